"""
Upload endpoint: replace the dataset CSV and re-plan the grid.
Reload lives in router_meta.py.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, UploadFile, File

from program_review.data.loader import rows_from_bytes
from program_review.data.store import DataStore
from program_review.api.dependencies import get_store_or_empty
from program_review.api.response_models import UploadResponse

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/upload", response_model=UploadResponse)
async def upload_dataset(
    file: UploadFile = File(...),
    store: DataStore = Depends(get_store_or_empty),
):
    """Validate an uploaded CSV, write it over the dataset file, and reload."""
    if not file.filename:
        raise HTTPException(400, "Missing filename")
    if not file.filename.lower().endswith(".csv"):
        raise HTTPException(400, f"Only .csv files are accepted (got '{file.filename}')")

    content = await file.read()
    try:
        rows = rows_from_bytes(content)
    except ValueError as exc:
        raise HTTPException(400, str(exc))

    store.dataset.parent.mkdir(parents=True, exist_ok=True)
    store.dataset.write_bytes(content)
    store.load_rows(rows)
    print(f"  Dataset replaced by upload '{file.filename}' — {store.row_count():,} rows")

    return UploadResponse(
        status="uploaded",
        name=file.filename,
        size=len(content),
        rows=store.row_count(),
        columns=store.column_count(),
    )
