"""
Trend and goal math over chronological measurement series.
"""
from __future__ import annotations
from typing import Any, List, Optional, Sequence

from ..schemas import GoalProgress, TrendResult
from .utils import as_list, point_value, round_half_up, round_int


# Changes within +/- this band count as stable
TREND_THRESHOLD = 0.1


def series_values(series: Any) -> List[Optional[float]]:
    """Numeric values of a series of numbers or {value, date} points."""
    items = as_list(series) or []
    return [point_value(p) for p in items]


def calculate_trend(series: Any) -> TrendResult:
    values = series_values(series)
    if len(values) < 2:
        return TrendResult(trend="no data", change=0, percent=0)
    first = values[0] or 0.0
    last = values[-1] or 0.0
    change = last - first
    percent = (change / first) * 100 if first != 0 else 0.0
    trend = "stable"
    if change > TREND_THRESHOLD:
        trend = "increasing"
    elif change < -TREND_THRESHOLD:
        trend = "decreasing"
    return TrendResult(
        trend=trend,
        change=round_half_up(change, 1),
        percent=round_half_up(percent, 1),
    )


def calculate_goal_progress(current: Optional[float], goal: Optional[float]) -> GoalProgress:
    """Percent of goal reached; not clamped, so overshooting gives > 100."""
    if not goal:
        return GoalProgress(percent=0, met=False)
    percent = round_int((float(current or 0) / float(goal)) * 100)
    return GoalProgress(percent=percent, met=percent >= 100)


def calculate_streak(values: Any, goal: float) -> int:
    """Number of most recent consecutive entries at or above goal."""
    if goal is None:
        return 0
    streak = 0
    for v in reversed(series_values(values)):
        if v is not None and v >= goal:
            streak += 1
        else:
            break
    return streak


def latest_value(series: Sequence[Any]) -> Optional[float]:
    values = series_values(series)
    return values[-1] if values else None
