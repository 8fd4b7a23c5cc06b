"""
Lifestyle and behavior analytics: diet quality, hydration, stress.
"""
from __future__ import annotations
from typing import Any, Dict
from statistics import mean

from ..schemas import HydrationStatus
from .classifiers import classify_majority
from .utils import as_list, field, round_int, safe_float


DIET_SCORES: Dict[str, int] = {
    "balanced": 90,
    "vegetarian": 80,
    "vegan": 80,
    "low-carb": 75,
}
DEFAULT_DIET_SCORE = 60

# Daily intake bounds, ml
HYDRATION_LOW_ML = 1200
HYDRATION_HIGH_ML = 3000

STRESS_RULES = [
    ("high", {"high", "very_high"}),
    ("moderate", {"moderate"}),
]


def get_diet_quality_score(profile: Any) -> float:
    """Explicit ``dietQualityScore`` wins; otherwise scored from dietary habits."""
    score = field(profile, "diet_quality_score")
    if isinstance(score, (int, float)) and not isinstance(score, bool):
        return score
    return DIET_SCORES.get(field(profile, "dietary_habits"), DEFAULT_DIET_SCORE)


def get_hydration_status(hydration: Any) -> HydrationStatus:
    entries = as_list(hydration)
    if not entries:
        return HydrationStatus(avg=0, status="low")
    avg = mean(safe_float(field(h, "amount")) or 0.0 for h in entries)
    status = "adequate"
    if avg < HYDRATION_LOW_ML:
        status = "low"
    elif avg > HYDRATION_HIGH_ML:
        status = "high"
    return HydrationStatus(avg=round_int(avg), status=status)


def get_stress_level(entries: Any) -> str:
    """Majority stress level over the whole log: unknown, low, moderate or high."""
    return classify_majority(entries, "level", STRESS_RULES, default="low")
