"""
Reusable Excel cell/row formatting helpers.
"""
from __future__ import annotations

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from program_review.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, PINNED_FONT,
    THIN_BORDER,
    ALTERNATE_FILL, PINNED_FILL,
    CENTER, LEFT, RIGHT,
)


# ---------------------------------------------------------------------------
# Header row
# ---------------------------------------------------------------------------

def format_header_row(ws: Worksheet, row_num: int, num_cols: int) -> None:
    """Apply header styling to an entire row."""
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


# ---------------------------------------------------------------------------
# Data cell
# ---------------------------------------------------------------------------

def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value,
    right_aligned: bool = False,
    pinned: bool = False,
) -> None:
    """Write and format a single grid cell.

    Values are written as-is: numbers stay numbers, percentage text stays text.
    """
    cell = ws.cell(row=row_num, column=col_num)
    cell.value = value
    cell.font = PINNED_FONT if pinned else DATA_FONT
    cell.border = THIN_BORDER
    cell.alignment = RIGHT if right_aligned else LEFT

    if pinned:
        cell.fill = PINNED_FILL
    elif row_num % 2 == 0:
        cell.fill = ALTERNATE_FILL


# ---------------------------------------------------------------------------
# Auto column width
# ---------------------------------------------------------------------------

def auto_column_width(ws: Worksheet, min_row: int = 1, min_width: int = 8, max_width: int = 50) -> None:
    """Fit column widths to the longest value at or below `min_row`."""
    for column in ws.iter_cols(min_row=min_row):
        max_length = 0
        for cell in column:
            if cell.value is not None and cell.value != "":
                max_length = max(max_length, len(str(cell.value)))
        adjusted = min(max(max_length + 2, min_width), max_width)
        ws.column_dimensions[get_column_letter(column[0].column)].width = adjusted
