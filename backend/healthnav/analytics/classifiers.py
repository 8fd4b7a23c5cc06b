"""
Trailing-window majority classification shared by the categorical logs
(stress, burnout, social support).
"""
from __future__ import annotations
from typing import Any, Collection, Optional, Sequence, Tuple

from .utils import as_list, field


MajorityRule = Tuple[str, Collection[str]]


def trailing(entries: Sequence[Any], window: Optional[int]) -> list:
    """Last ``window`` entries, or all of them when window is None."""
    items = list(entries)
    if window is None:
        return items
    return items[-window:] if window > 0 else []


def classify_majority(
    entries: Any,
    key: str,
    rules: Sequence[MajorityRule],
    default: str,
    window: Optional[int] = None,
    unknown: str = "unknown",
) -> str:
    """Label a categorical log by strict majority.

    Rules are checked in order, most severe first; a rule's label wins when
    strictly more than half of the windowed entries carry one of its values.
    Falls through to ``default``. Missing, empty or non-list input gives
    ``unknown``.
    """
    items = as_list(entries)
    if not items:
        return unknown
    recent = trailing(items, window)
    if not recent:
        return unknown
    values = [field(e, key) for e in recent]
    for label, matching in rules:
        count = sum(1 for v in values if v in matching)
        if count / len(values) > 0.5:
            return label
    return default
