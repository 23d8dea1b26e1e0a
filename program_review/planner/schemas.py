"""
Column planning schemas: priority slots, override rules, column descriptors.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

Row = dict[str, Any]


class ColumnGroup(str, Enum):
    RATIOS = "ratios"
    METRICS = "metrics"


@dataclass(frozen=True)
class FieldSlot:
    """A literal column name in the priority list."""
    name: str


@dataclass(frozen=True)
class GroupSlot:
    """Placeholder expanded to the discovered columns of one group."""
    group: ColumnGroup


Slot = Union[FieldSlot, GroupSlot]


@dataclass(frozen=True)
class ValueOverride:
    """Display `value` in `field` for every row matching all `when` pairs.

    Applies whether or not the row carries `field` at all.
    """
    field: str
    when: dict[str, Any]
    value: Any

    def matches(self, row: Row) -> bool:
        return all(row.get(k) == v for k, v in self.when.items())


@dataclass(frozen=True)
class ColumnDescriptor:
    """One planned grid column, in display order."""
    field: str
    header_name: str
    display_type: str                     # "number" | "string" | native kind
    rank: int
    right_aligned: bool = False
    pinned: bool = False
    lock_position: bool = False
    lock_visible: bool = True
    sort: Optional[str] = None            # "asc" | "desc" | None
    value_getter: Optional[Callable[[Row], Any]] = field(default=None, compare=False, repr=False)

    def value(self, row: Row) -> Any:
        if self.value_getter is not None:
            return self.value_getter(row)
        return row.get(self.field)

    def to_column_def(self) -> dict:
        """AG Grid column definition."""
        return {
            "field": self.field,
            "headerName": self.header_name,
            "type": "rightAligned" if self.right_aligned else None,
            "pinned": "left" if self.pinned else None,
            "lockPosition": "left" if self.lock_position else False,
            "lockVisible": self.lock_visible,
            "sort": self.sort,
        }


@dataclass
class GridView:
    """Normalized rows plus their planned columns."""
    rows: list[Row] = field(default_factory=list)
    columns: list[ColumnDescriptor] = field(default_factory=list)

    @property
    def fields(self) -> list[str]:
        return [c.field for c in self.columns]

    def column_defs(self) -> list[dict]:
        return [c.to_column_def() for c in self.columns]

    def display_rows(self) -> list[Row]:
        """Rows with value overrides applied, planned columns only, in order.

        Keys missing from a source row stay missing unless an override
        supplies a value for them.
        """
        out = []
        for row in self.rows:
            display = {}
            for c in self.columns:
                value = c.value(row)
                if c.field in row or value is not None:
                    display[c.field] = value
            out.append(display)
        return out
