"""
Dataset CSV loading — every cell read as text, blanks kept as "".
"""
from __future__ import annotations

import io
from pathlib import Path

import pandas as pd

from program_review.config import DATASET_FILE
from program_review.planner.schemas import Row


def _read_text_frame(source) -> pd.DataFrame:
    """Read a CSV with no type or NA inference."""
    return pd.read_csv(source, dtype=str, keep_default_na=False, na_filter=False)


def _frame_to_rows(df: pd.DataFrame) -> list[Row]:
    # Duplicate headers come back as "Name.1"; keep them as separate columns
    return df.to_dict("records")


def load_rows(filepath: Path = DATASET_FILE) -> list[Row]:
    """Load the dataset file as a list of text-valued rows."""
    filepath = Path(filepath)
    if not filepath.exists():
        print(f"  Dataset not found: {filepath}")
        return []
    try:
        df = _read_text_frame(filepath)
    except pd.errors.EmptyDataError:
        print(f"  Dataset is empty: {filepath.name}")
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        print(f"  Warning: skipping {filepath.name}: {exc}")
        return []
    rows = _frame_to_rows(df)
    print(f"  Loaded {filepath.name}: {len(rows):,} rows, {len(df.columns)} columns")
    return rows


def rows_from_bytes(content: bytes, encoding: str = "utf-8-sig") -> list[Row]:
    """Parse uploaded CSV content. Raises ValueError if it is not a usable CSV."""
    try:
        text = content.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ValueError(f"CSV is not {encoding} text: {exc}") from exc
    if not text.strip():
        raise ValueError("CSV is empty")
    try:
        df = _read_text_frame(io.StringIO(text))
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise ValueError(f"Could not parse CSV: {exc}") from exc
    return _frame_to_rows(df)
