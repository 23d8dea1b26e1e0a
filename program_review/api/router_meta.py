"""
Meta endpoints: health, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from program_review.data.store import DataStore
from program_review.api.dependencies import get_store_or_empty
from program_review.api.response_models import HealthResponse

router = APIRouter(prefix="/api", tags=["meta"])


def _health(store: DataStore, status: str = "ok") -> HealthResponse:
    return HealthResponse(
        status=status,
        loaded=store.is_loaded,
        rows=store.row_count(),
        columns=store.column_count(),
        dataset=str(store.dataset),
    )


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store_or_empty)):
    return _health(store)


@router.post("/reload", response_model=HealthResponse)
def reload_data(store: DataStore = Depends(get_store_or_empty)):
    """Re-read the dataset file and re-plan the grid."""
    store.load()
    print(f"  Reload complete — {store.row_count():,} rows, {store.column_count()} columns")
    return _health(store, status="reloaded")
