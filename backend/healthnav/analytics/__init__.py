"""
Analytics engine: pure functions deriving trends, goal progress, streaks,
adherence, risk flags and status labels from a user's health records.

Modules by category:
- trends: trend direction, goal progress, streaks
- risk: overdue screenings, medication adherence, chronic-condition flags
- lifestyle: diet quality, hydration, stress
- social: loneliness, environmental risk
- preventive: vaccinations, preventive reminders
- engagement: action plans, motivational feedback, mood, burnout, app usage
- profile: health score, risk flag, profile recommendations
- report: everything above composed for one profile snapshot

No function raises on missing or empty input; each returns its own
"no data" sentinel instead.
"""
from .classifiers import classify_majority
from .engagement import (
    get_app_engagement,
    get_burnout_risk,
    get_mood_pattern,
    get_motivational_feedback,
    get_recent_action_plans,
    get_recommendation_follow_rate,
)
from .lifestyle import get_diet_quality_score, get_hydration_status, get_stress_level
from .preventive import get_upcoming_preventive_reminders, get_vaccination_status
from .profile import calculate_health_score, get_profile_recommendations, get_risk_flag
from .report import build_user_analytics
from .risk import (
    AdherenceModel,
    WeeklyDoseAdherence,
    get_chronic_condition_risk,
    get_medication_adherence,
    get_upcoming_screenings,
)
from .social import get_environmental_risk, get_loneliness_status
from .trends import calculate_goal_progress, calculate_streak, calculate_trend

__all__ = [
    "AdherenceModel",
    "WeeklyDoseAdherence",
    "build_user_analytics",
    "calculate_goal_progress",
    "calculate_health_score",
    "calculate_streak",
    "calculate_trend",
    "classify_majority",
    "get_app_engagement",
    "get_burnout_risk",
    "get_chronic_condition_risk",
    "get_diet_quality_score",
    "get_environmental_risk",
    "get_hydration_status",
    "get_loneliness_status",
    "get_medication_adherence",
    "get_mood_pattern",
    "get_motivational_feedback",
    "get_profile_recommendations",
    "get_recent_action_plans",
    "get_recommendation_follow_rate",
    "get_risk_flag",
    "get_stress_level",
    "get_upcoming_preventive_reminders",
    "get_upcoming_screenings",
    "get_vaccination_status",
]
