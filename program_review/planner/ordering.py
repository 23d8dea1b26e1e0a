"""
Column ordering: priority list expansion with ratio / metric placeholder groups.
"""
from __future__ import annotations

import sys
from collections.abc import Iterable

from program_review.planner.schemas import ColumnGroup, FieldSlot, GroupSlot, Slot

UNRANKED = sys.maxsize


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def is_ratio_column(field: str) -> bool:
    """Name has "ratio" as a space-separated word but is not just "ratio"."""
    lowered = field.lower()
    return lowered != "ratio" and "ratio" in lowered.split(" ")


def named_fields(priority: Iterable[Slot]) -> set[str]:
    return {slot.name for slot in priority if isinstance(slot, FieldSlot)}


def classify_columns(fields: Iterable[str], priority: Iterable[Slot]) -> dict[ColumnGroup, list[str]]:
    """Split observed fields into the ratio and metric groups.

    Fields named literally in `priority` (and not ratios) belong to neither.
    Group members keep their order of appearance.
    """
    named = named_fields(priority)
    groups: dict[ColumnGroup, list[str]] = {ColumnGroup.RATIOS: [], ColumnGroup.METRICS: []}
    for field in fields:
        if is_ratio_column(field):
            groups[ColumnGroup.RATIOS].append(field)
        elif field not in named:
            groups[ColumnGroup.METRICS].append(field)
    return groups


# ---------------------------------------------------------------------------
# Expansion & ranking
# ---------------------------------------------------------------------------

def expand_priority(priority: Iterable[Slot], groups: dict[ColumnGroup, list[str]]) -> list[list[str]]:
    """Resolve each slot to a list of names.

    A group is materialised at its first slot only; repeated slots of the same
    group and groups with no entry in `groups` resolve to [].
    """
    expanded: list[list[str]] = []
    used: set[ColumnGroup] = set()
    for slot in priority:
        if isinstance(slot, GroupSlot):
            if slot.group in used:
                expanded.append([])
                continue
            used.add(slot.group)
            expanded.append(list(groups.get(slot.group, [])))
        else:
            expanded.append([slot.name])
    return expanded


def flatten_ranks(expanded: Iterable[list[str]]) -> list[str]:
    """Concatenate the resolved slots; a name keeps its first position."""
    seen: set[str] = set()
    ranked: list[str] = []
    for names in expanded:
        for name in names:
            if name not in seen:
                seen.add(name)
                ranked.append(name)
    return ranked


def build_rank_list(fields: Iterable[str], priority: Iterable[Slot]) -> list[str]:
    priority = list(priority)
    fields = list(fields)
    return flatten_ranks(expand_priority(priority, classify_columns(fields, priority)))


def rank_fields(fields: Iterable[str], priority: Iterable[Slot]) -> dict[str, int]:
    """Rank of every field: its index in the expanded list, else UNRANKED."""
    fields = list(fields)
    index = {name: i for i, name in enumerate(build_rank_list(fields, priority))}
    return {field: index.get(field, UNRANKED) for field in fields}


def order_fields(fields: Iterable[str], priority: Iterable[Slot], pinned: str | None = None) -> list[str]:
    """Total display order. The pinned field always leads; sort is stable."""
    fields = list(fields)
    ranks = rank_fields(fields, priority)
    return sorted(fields, key=lambda f: (f != pinned, ranks[f]))
