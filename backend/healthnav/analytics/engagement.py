"""
AI-recommendation, mental-health and engagement analytics.
"""
from __future__ import annotations
from typing import Any, List
from collections import Counter
from operator import itemgetter

from .classifiers import classify_majority, trailing
from .utils import as_list, calendar_day, field, path, round_int


RECENT_WINDOW = 7
ENGAGEMENT_WINDOW = 14  # two weeks of usage events
ACTION_PLAN_COUNT = 3

STREAK_FEEDBACK_DAYS = 7

FEEDBACK_STREAK = "Amazing streak! Keep up your daily activity!"
FEEDBACK_WEIGHT = "Great job on your weight loss progress!"
FEEDBACK_SLEEP = "Your sleep is improving—keep it up!"
FEEDBACK_DEFAULT = "Keep making healthy choices!"

BURNOUT_RULES = [
    ("high", {"high"}),
    ("moderate", {"moderate"}),
]


def get_recent_action_plans(ai_action_plans: Any) -> List[str]:
    """Plans of the last three action-plan entries, oldest first."""
    entries = as_list(ai_action_plans) or []
    return [field(p, "plan") for p in trailing(entries, ACTION_PLAN_COUNT)]


def get_motivational_feedback(analytics: Any) -> str:
    # Order matters: first matching rule wins
    streak = path(analytics, "goal_progress", "steps", "streak")
    if isinstance(streak, (int, float)) and streak >= STREAK_FEEDBACK_DAYS:
        return FEEDBACK_STREAK
    if path(analytics, "trends", "weight", "trend") == "decreasing":
        return FEEDBACK_WEIGHT
    if path(analytics, "trends", "sleep", "trend") == "increasing":
        return FEEDBACK_SLEEP
    return FEEDBACK_DEFAULT


def get_mood_pattern(mood_log: Any) -> str:
    """Most frequent mood of the last week; ties go to the mood logged first."""
    entries = as_list(mood_log)
    if not entries:
        return "unknown"
    counts = Counter(field(m, "mood") for m in trailing(entries, RECENT_WINDOW))
    counts.pop(None, None)
    if not counts:
        return "unknown"
    mood, _ = max(counts.items(), key=itemgetter(1))
    return mood


def get_burnout_risk(burnout_risk: Any) -> str:
    return classify_majority(
        burnout_risk, "risk", BURNOUT_RULES, default="low", window=RECENT_WINDOW
    )


def get_app_engagement(app_usage: Any) -> str:
    """Distinct days of use in the last 14 events: high, moderate or low."""
    entries = as_list(app_usage)
    if not entries:
        return "unknown"
    days_used = len({calendar_day(field(u, "date")) for u in trailing(entries, ENGAGEMENT_WINDOW)})
    if days_used >= 10:
        return "high"
    if days_used >= 5:
        return "moderate"
    return "low"


def get_recommendation_follow_rate(recommendation_responses: Any) -> int:
    entries = as_list(recommendation_responses)
    if not entries:
        return 0
    followed = sum(1 for r in entries if field(r, "followed"))
    return round_int((followed / len(entries)) * 100)
