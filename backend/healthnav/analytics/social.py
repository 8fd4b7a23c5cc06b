"""
Social and environmental analytics over the last week of entries.
"""
from __future__ import annotations
from typing import Any

from .classifiers import classify_majority, trailing
from .utils import as_list, field


RECENT_WINDOW = 7

LONELINESS_RULES = [
    ("isolated", {"isolated"}),
    ("supported", {"supported"}),
]


def get_loneliness_status(social_support: Any) -> str:
    return classify_majority(
        social_support, "feeling", LONELINESS_RULES, default="neutral", window=RECENT_WINDOW
    )


def get_environmental_risk(environmental_risks: Any) -> str:
    """First high-level exposure in the recent window, as ``"<type> (high)"``."""
    entries = as_list(environmental_risks)
    if not entries:
        return "none"
    for r in trailing(entries, RECENT_WINDOW):
        if field(r, "level") == "high":
            return f"{field(r, 'type')} (high)"
    return "none"
