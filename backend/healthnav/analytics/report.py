"""
Aggregate analytics for one profile snapshot, as shown on the dashboard and
folded into the coaching context.
"""
from __future__ import annotations
import logging
from typing import Any, Optional, Sequence
from datetime import datetime

from ..config import settings
from ..schemas import (
    AnalyticsReport,
    Engagement,
    GoalProgressSummary,
    HealthProfile,
    Lifestyle,
    MentalHealth,
    Preventive,
    RiskAlerts,
    Social,
    StepsProgress,
    Trends,
)
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
from .risk import (
    AdherenceModel,
    get_chronic_condition_risk,
    get_medication_adherence,
    get_upcoming_screenings,
)
from .social import get_environmental_risk, get_loneliness_status
from .trends import (
    calculate_goal_progress,
    calculate_streak,
    calculate_trend,
    latest_value,
    series_values,
)
from .utils import to_utc, utcnow


logger = logging.getLogger(__name__)


def _goal_progress(profile: HealthProfile) -> GoalProgressSummary:
    weight_goal = profile.goals.weight
    current_weight = latest_value(profile.biometrics.weight)
    weight = None
    if weight_goal and current_weight:
        weight = calculate_goal_progress(current_weight, weight_goal)

    step_goal = profile.goals.steps
    steps = StepsProgress()
    if step_goal:
        step_values = series_values(profile.biometrics.steps)
        steps.streak = calculate_streak(step_values, step_goal)
        if step_values:
            progress = calculate_goal_progress(step_values[-1], step_goal)
            steps.percent = progress.percent
            steps.met = progress.met
    return GoalProgressSummary(weight=weight, steps=steps)


def build_user_analytics(
    profile: Any,
    now: Optional[datetime] = None,
    recommended_vaccines: Optional[Sequence[str]] = None,
    adherence_model: Optional[AdherenceModel] = None,
) -> AnalyticsReport:
    """Compute every summary for ``profile`` (a HealthProfile or its JSON form)."""
    if not isinstance(profile, HealthProfile):
        profile = HealthProfile.model_validate(profile or {})
    now = to_utc(now) if now else utcnow()
    if recommended_vaccines is None:
        recommended_vaccines = settings.recommended_vaccines

    bio = profile.biometrics
    report = AnalyticsReport(
        generated_at=now,
        health_score=calculate_health_score(profile),
        risk_flag=get_risk_flag(profile),
        ai_recommendations=get_profile_recommendations(profile),
        trends=Trends(
            weight=calculate_trend(bio.weight),
            heart_rate=calculate_trend(bio.heart_rate),
            sleep=calculate_trend(bio.sleep_hours),
            steps=calculate_trend(bio.steps),
        ),
        goal_progress=_goal_progress(profile),
        risk_alerts=RiskAlerts(
            upcoming_screenings=get_upcoming_screenings(profile.screenings, now=now),
            medication_adherence=get_medication_adherence(profile.medications, model=adherence_model),
            chronic_condition_risks=get_chronic_condition_risk(profile),
        ),
        lifestyle=Lifestyle(
            diet_quality_score=get_diet_quality_score(profile),
            hydration=get_hydration_status(profile.hydration),
            stress_level=get_stress_level(profile.stress_level),
        ),
        social=Social(
            loneliness=get_loneliness_status(profile.social_support),
            environmental_risk=get_environmental_risk(profile.environmental_risks),
        ),
        preventive=Preventive(
            vaccination=get_vaccination_status(profile.immunization_records, recommended_vaccines),
            reminders=get_upcoming_preventive_reminders(profile.preventive_reminders, now=now),
        ),
        action_plans=get_recent_action_plans(profile.ai_action_plans),
        motivational_feedback="",
        mental_health=MentalHealth(
            mood_pattern=get_mood_pattern(profile.mood_log),
            burnout_risk=get_burnout_risk(profile.burnout_risk),
        ),
        engagement=Engagement(
            app_engagement=get_app_engagement(profile.app_usage),
            recommendation_follow_rate=get_recommendation_follow_rate(profile.recommendation_responses),
        ),
    )
    # Feedback reads trends and streak, so it runs on the finished report
    report.motivational_feedback = get_motivational_feedback(report)
    logger.debug(
        f"Analytics built for profile {profile.uid or '<anonymous>'}: "
        f"score={report.health_score} risk={report.risk_flag.level}"
    )
    return report
