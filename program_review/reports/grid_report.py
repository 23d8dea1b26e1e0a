"""
Program Review grid — JSON payload for the browser grid and the xlsx export.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from program_review.config import PAGE_TITLE, EXPORT_SHEET_TITLE
from program_review.excel.writer import ExcelWriter
from program_review.planner.schemas import GridView


def generate_json(view: GridView) -> dict:
    return {
        "title": PAGE_TITLE,
        "columnDefs": view.column_defs(),
        "rowData": view.display_rows(),
    }


def describe_columns(view: GridView) -> list[dict]:
    """Planned columns with their inferred type and rank, in display order."""
    return [
        {
            "field": c.field,
            "header_name": c.header_name,
            "display_type": c.display_type,
            "rank": c.rank,
            "align": "right" if c.right_aligned else "left",
            "pinned": c.pinned,
            "sort": c.sort,
        }
        for c in view.columns
    ]


def generate_excel(view: GridView, output_path: str | Path) -> Path:
    """Write the planned grid, exactly as displayed, to a single-sheet workbook."""
    ew = ExcelWriter()
    ws = ew.add_sheet(EXPORT_SHEET_TITLE)
    row = ew.write_title(
        ws, PAGE_TITLE,
        f"{len(view.rows):,} programs  |  Generated {pd.Timestamp.now():%B %d, %Y}",
        merge_cols=min(len(view.columns), 6),
    )
    ew.write_grid(ws, row, view.columns, view.display_rows())
    return ew.save(output_path)
