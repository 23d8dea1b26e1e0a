"""
Program Review — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from program_review.data.store import DataStore
from program_review.api.dependencies import set_store
from program_review.api.router_meta import router as meta_router
from program_review.api.router_grid import router as grid_router
from program_review.api.router_upload import router as upload_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the dataset at startup."""
    from program_review.config import BASE_FOLDER, DATASET_FILE, EXPORTS_FOLDER
    for d in [BASE_FOLDER, EXPORTS_FOLDER]:
        d.mkdir(parents=True, exist_ok=True)

    import os
    print(f"  PROGRAM_REVIEW_DATA_DIR = {os.environ.get('PROGRAM_REVIEW_DATA_DIR', '(not set)')}")
    print(f"  DATASET_FILE = {DATASET_FILE} (exists = {DATASET_FILE.exists()})")

    store = DataStore(DATASET_FILE).load()
    set_store(store)

    if store.row_count() > 0:
        print(f"\nProgram Review ready — {store.row_count():,} rows, {store.column_count()} columns\n")
    else:
        print("\nProgram Review ready — no data yet. Upload a CSV via /api/upload.\n")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Program Review API",
        description="Academic program review metrics — planned grid and spreadsheet export",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(grid_router)
    app.include_router(upload_router)

    # Serve the grid page with no-cache headers so browsers always get fresh JS
    static_dir = Path(__file__).parent / "static"
    if static_dir.is_dir():
        index_html = static_dir / "index.html"

        @app.get("/", response_class=HTMLResponse)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

        app.mount("/", StaticFiles(directory=str(static_dir)), name="static")

    return app


app = create_app()
