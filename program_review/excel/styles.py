"""
Colors, fonts, fills, borders and alignments for the grid export.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
NAVY = "1F3A5F"
HEADER_BG = "1F3A5F"
PINNED_BG = "E8EEF5"
ALTERNATE_ROW = "F7F7F7"
WHITE = "FFFFFF"
BLACK = "000000"
GRAY_666 = "666666"
GRID_GRAY = "D0D0D0"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=18, bold=True, color=NAVY)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=GRAY_666)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
PINNED_FONT = Font(name="Calibri", size=10, bold=True, color=BLACK)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=HEADER_BG, end_color=HEADER_BG, fill_type="solid")
PINNED_FILL = PatternFill(start_color=PINNED_BG, end_color=PINNED_BG, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=ALTERNATE_ROW, end_color=ALTERNATE_ROW, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color=GRID_GRAY),
    right=Side(style="thin", color=GRID_GRAY),
    top=Side(style="thin", color=GRID_GRAY),
    bottom=Side(style="thin", color=GRID_GRAY),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=NAVY),
    right=Side(style="thin", color=NAVY),
    top=Side(style="thin", color=NAVY),
    bottom=Side(style="medium", color=NAVY),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
