"""
Program Review — Configuration: paths, dataset rules, column overrides.
"""
import os
import re
from pathlib import Path

from program_review.planner.schemas import ColumnGroup, FieldSlot, GroupSlot, ValueOverride

# ---------------------------------------------------------------------------
# Paths — override with PROGRAM_REVIEW_DATA_DIR env var for deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("PROGRAM_REVIEW_DATA_DIR", str(Path.cwd() / "data")))
BASE_FOLDER = _data_dir
DATASET_FILE = _data_dir / os.environ.get("PROGRAM_REVIEW_DATASET", "Final.csv")
EXPORTS_FOLDER = _data_dir / "exports"

PAGE_TITLE = "Program Review"
EXPORT_SHEET_TITLE = "Program Review"

# ---------------------------------------------------------------------------
# Columns never shown (stale snapshot columns left in the export)
# ---------------------------------------------------------------------------
EXCLUDED_FIELDS = {"Fall 2020", "1920"}

# ---------------------------------------------------------------------------
# Identifier/code columns: numeric-looking but always text, left-aligned
# ---------------------------------------------------------------------------
LEFT_ALIGNED_NUMERIC_COLUMNS = ["Program ID", "CIP"]

# ---------------------------------------------------------------------------
# Pinning & default sort
# ---------------------------------------------------------------------------
PINNED_FIELD = "Program Title"
DEFAULT_SORT_FIELD = "Program Title"

# ---------------------------------------------------------------------------
# Column priority (order matters). GroupSlots expand to the discovered
# ratio / metric columns at planning time.
# ---------------------------------------------------------------------------
FIELDS_RANKED = [
    FieldSlot("Program Title"),
    FieldSlot("Program ID"),
    FieldSlot("CIP"),
    FieldSlot("Review Type"),
    FieldSlot("Metrics Met"),
    GroupSlot(ColumnGroup.RATIOS),
    GroupSlot(ColumnGroup.METRICS),
]

# ---------------------------------------------------------------------------
# Header label rewrites (first matching pattern wins)
# ---------------------------------------------------------------------------
HEADER_RENAMES = [
    # Academic-year codes: "2122" → "AY 2021-22"
    (re.compile(r"^(\d{2})(\d{2})$"), r"AY 20\1-\2"),
    (re.compile(r"\bPct\b"), "%"),
]

# ---------------------------------------------------------------------------
# Row-level display exceptions
# General Studies is an umbrella program and is not put through review;
# the source export still carries a review type for it.
# ---------------------------------------------------------------------------
VALUE_OVERRIDES = [
    ValueOverride(
        field="Review Type",
        when={"Program Title": "General Studies"},
        value="Not Reviewed",
    ),
]
