"""
Per-column display type inference by majority vote.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from typing import Any, Callable

import numpy as np

from program_review.config import LEFT_ALIGNED_NUMERIC_COLUMNS
from program_review.planner.schemas import Row

TypeEvaluator = Callable[[Any, str], str]


def value_kind(value: Any, field: str | None = None) -> str:
    """Intrinsic kind of a cell value."""
    if value is None:
        return "undefined"
    if isinstance(value, (bool, np.bool_)):
        return "boolean"
    if isinstance(value, (int, float, np.number)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def custom_type_evaluator(value: Any, field: str) -> str:
    """Dataset evaluator: ID/code columns are text, percentages are numbers."""
    if field in LEFT_ALIGNED_NUMERIC_COLUMNS:
        return "string"
    if isinstance(value, str) and "%" in value:
        return "number"
    return value_kind(value)


def tally_types(rows, type_evaluator: TypeEvaluator = value_kind) -> dict[str, Counter]:
    """Count evaluator labels per column, in first-seen order."""
    tallies: dict[str, Counter] = {}
    if not isinstance(rows, (list, tuple)):
        return tallies
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        for field, value in row.items():
            tallies.setdefault(field, Counter())[type_evaluator(value, field)] += 1
    return tallies


def majority_type(tally: Counter) -> str:
    """Most frequent label; ties go to the label inserted first."""
    return tally.most_common(1)[0][0]


def infer_column_types(rows, type_evaluator: TypeEvaluator = value_kind) -> dict[str, str]:
    """Map each observed column to its majority display type."""
    return {
        field: majority_type(tally)
        for field, tally in tally_types(rows, type_evaluator).items()
    }
