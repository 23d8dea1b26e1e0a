"""
Column planning: types + ordering + presentation rules → GridView.
"""
from __future__ import annotations

import re
from typing import Callable, Iterable, Optional

from program_review.config import (
    EXCLUDED_FIELDS,
    LEFT_ALIGNED_NUMERIC_COLUMNS,
    PINNED_FIELD,
    DEFAULT_SORT_FIELD,
    FIELDS_RANKED,
    HEADER_RENAMES,
    VALUE_OVERRIDES,
)
from program_review.data.normalize import parse_numeric_strings
from program_review.planner.column_types import TypeEvaluator, custom_type_evaluator, infer_column_types
from program_review.planner.ordering import rank_fields, order_fields
from program_review.planner.schemas import ColumnDescriptor, GridView, Row, Slot, ValueOverride


# ---------------------------------------------------------------------------
# Presentation rules
# ---------------------------------------------------------------------------

def is_excluded(field: str, excluded: Iterable[str] = EXCLUDED_FIELDS) -> bool:
    return field in excluded


def header_label(field: str, renames: list[tuple[re.Pattern, str]] = HEADER_RENAMES) -> str:
    """Display header for a field: first matching rename rule, else the name."""
    for pattern, replacement in renames:
        if pattern.search(field):
            return pattern.sub(replacement, field)
    return field


def value_getter_for(
    field: str,
    overrides: list[ValueOverride] = VALUE_OVERRIDES,
) -> Optional[Callable[[Row], object]]:
    """Build a getter applying the overrides for `field`, or None if there are none."""
    rules = [o for o in overrides if o.field == field]
    if not rules:
        return None

    def getter(row: Row):
        for rule in rules:
            if rule.matches(row):
                return rule.value
        return row.get(field)

    return getter


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------

def plan_columns(
    rows,
    type_evaluator: TypeEvaluator = custom_type_evaluator,
    priority: list[Slot] = FIELDS_RANKED,
    pinned_field: str | None = PINNED_FIELD,
    sort_field: str | None = DEFAULT_SORT_FIELD,
    left_aligned: Iterable[str] = LEFT_ALIGNED_NUMERIC_COLUMNS,
    excluded: Iterable[str] = EXCLUDED_FIELDS,
    renames: list[tuple[re.Pattern, str]] = HEADER_RENAMES,
    overrides: list[ValueOverride] = VALUE_OVERRIDES,
) -> list[ColumnDescriptor]:
    """Ordered column descriptors for already-normalized rows."""
    left_aligned = set(left_aligned)
    excluded = set(excluded)

    types = infer_column_types(rows, type_evaluator)
    fields = [f for f in types if not is_excluded(f, excluded)]
    ranks = rank_fields(fields, priority)

    columns = []
    for field in order_fields(fields, priority, pinned_field):
        display_type = types[field]
        is_pinned = field == pinned_field
        columns.append(ColumnDescriptor(
            field=field,
            header_name=header_label(field, renames),
            display_type=display_type,
            rank=ranks[field],
            right_aligned=display_type == "number" and field not in left_aligned,
            pinned=is_pinned,
            lock_position=is_pinned,
            sort="asc" if field == sort_field else None,
            value_getter=value_getter_for(field, overrides),
        ))
    return columns


def plan_grid(raw_rows, keep_text: Iterable[str] = LEFT_ALIGNED_NUMERIC_COLUMNS, **options) -> GridView:
    """Full pipeline: raw text rows → normalized rows + planned columns.

    Identifier columns are kept as text so codes like "01.0101" survive.
    """
    rows = parse_numeric_strings(raw_rows, keep_text=keep_text)
    return GridView(rows=rows, columns=plan_columns(rows, **options))
