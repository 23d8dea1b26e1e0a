"""
ExcelWriter — builds a styled workbook from a planned grid.
"""
from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from program_review.excel.styles import TITLE_FONT, SUBTITLE_FONT
from program_review.excel.formatters import (
    format_header_row,
    format_data_cell,
    auto_column_width,
)
from program_review.planner.schemas import ColumnDescriptor, Row


class ExcelWriter:
    """Fluent builder for styled Excel workbooks."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._first_sheet = True

    # ------------------------------------------------------------------
    # Sheet management
    # ------------------------------------------------------------------

    def add_sheet(self, title: str) -> Worksheet:
        """Create a new worksheet (re-uses the default sheet for the first call)."""
        # Excel caps sheet names at 31 characters
        title = title[:31]
        if self._first_sheet:
            ws = self.wb.active
            ws.title = title
            self._first_sheet = False
        else:
            ws = self.wb.create_sheet(title=title)
        return ws

    # ------------------------------------------------------------------
    # Title block
    # ------------------------------------------------------------------

    def write_title(self, ws: Worksheet, title: str, subtitle: str, merge_cols: int = 6) -> int:
        """Write title + subtitle rows. Returns next available row."""
        merge_cols = max(merge_cols, 1)
        ws.cell(row=1, column=1).value = title
        ws.cell(row=1, column=1).font = TITLE_FONT
        ws.cell(row=2, column=1).value = subtitle
        ws.cell(row=2, column=1).font = SUBTITLE_FONT
        if merge_cols > 1:
            ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=merge_cols)
            ws.merge_cells(start_row=2, start_column=1, end_row=2, end_column=merge_cols)
        return 4

    # ------------------------------------------------------------------
    # Grid table
    # ------------------------------------------------------------------

    def write_grid(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[ColumnDescriptor],
        rows: list[Row],
        freeze: bool = True,
    ) -> int:
        """Write header labels + display rows in column order.

        Missing cells are left blank. Returns the row after the last data row.
        """
        for col_num, column in enumerate(columns, 1):
            ws.cell(row=start_row, column=col_num).value = column.header_name
        format_header_row(ws, start_row, len(columns))

        row = start_row + 1
        for row_data in rows:
            for col_num, column in enumerate(columns, 1):
                format_data_cell(
                    ws, row, col_num,
                    row_data.get(column.field),
                    right_aligned=column.right_aligned,
                    pinned=column.pinned,
                )
            row += 1

        auto_column_width(ws, min_row=start_row)
        if freeze:
            # Header row, plus the pinned leading column when there is one
            first_free_col = 2 if columns and columns[0].pinned else 1
            ws.freeze_panes = f"{get_column_letter(first_free_col)}{start_row + 1}"
        if columns:
            ws.auto_filter.ref = (
                f"A{start_row}:{get_column_letter(len(columns))}{max(row - 1, start_row)}"
            )
        return row

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Save the workbook to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
