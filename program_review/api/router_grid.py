"""
Grid endpoints: row data + column definitions, column plan, xlsx export.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from program_review.config import EXPORTS_FOLDER
from program_review.data.store import DataStore
from program_review.api.dependencies import get_store
from program_review.api.response_models import ColumnsResponse, GridResponse
from program_review.reports import grid_report

router = APIRouter(prefix="/api", tags=["grid"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/grid", response_model=GridResponse)
def get_grid(store: DataStore = Depends(get_store)):
    return grid_report.generate_json(store.view)


@router.get("/columns", response_model=ColumnsResponse)
def get_columns(store: DataStore = Depends(get_store)):
    columns = grid_report.describe_columns(store.view)
    return {"columns": columns, "count": len(columns)}


@router.get("/export")
def export_grid(store: DataStore = Depends(get_store)):
    """Download the grid as displayed (column order, headers, overrides)."""
    if not store.view.columns:
        raise HTTPException(404, "No data to export")

    # Unique per request so concurrent exports never share a file
    stamp = f"{datetime.now():%Y-%m-%d_%H%M%S}_{uuid.uuid4().hex[:8]}"
    out_path = EXPORTS_FOLDER / f"Program_Review_{stamp}.xlsx"
    grid_report.generate_excel(store.view, out_path)

    return FileResponse(
        path=str(out_path),
        filename=out_path.name,
        media_type=XLSX_MEDIA_TYPE,
    )
