"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    rows: int
    columns: int
    dataset: str


class ColumnInfo(BaseModel):
    field: str
    header_name: str
    display_type: str
    rank: int
    align: str
    pinned: bool
    sort: Optional[str] = None


class ColumnsResponse(BaseModel):
    columns: list[ColumnInfo]
    count: int


class GridResponse(BaseModel):
    title: str
    columnDefs: list[dict[str, Any]]
    rowData: list[dict[str, Any]]


class UploadResponse(BaseModel):
    status: str
    name: str
    size: int
    rows: int
    columns: int
