"""
DataStore — holds the current dataset snapshot and its planned grid.

Loaded at startup and on every reload/upload; each load re-derives the
normalized rows and column plan from scratch.
"""
from __future__ import annotations

from pathlib import Path

from program_review.config import DATASET_FILE
from program_review.data.loader import load_rows
from program_review.planner.columns import plan_grid
from program_review.planner.schemas import GridView, Row


class DataStore:
    """In-memory program review rows with their planned columns."""

    def __init__(self, dataset: Path = DATASET_FILE) -> None:
        self.dataset = Path(dataset)
        self.raw_rows: list[Row] = []
        self.view: GridView = GridView()
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> "DataStore":
        """Read the dataset file and plan the grid."""
        print("Loading program review data...")
        return self.load_rows(load_rows(self.dataset))

    def load_rows(self, raw_rows: list[Row]) -> "DataStore":
        """Replace the snapshot with already-parsed rows."""
        self.raw_rows = raw_rows
        self.view = plan_grid(raw_rows)
        self._loaded = True
        if self.view.columns:
            print(f"  Planned {len(self.view.columns)} columns: "
                  f"{', '.join(self.view.fields[:5])}{' ...' if len(self.view.columns) > 5 else ''}")
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def rows(self) -> list[Row]:
        return self.view.rows

    def row_count(self) -> int:
        return len(self.view.rows)

    def column_count(self) -> int:
        return len(self.view.columns)
