import copy

from healthnav.analytics import build_user_analytics
from healthnav.analytics.engagement import FEEDBACK_DEFAULT, FEEDBACK_STREAK, FEEDBACK_WEIGHT
from healthnav.coaching import render_analytics_context
from healthnav.schemas import HealthProfile


def test_report_from_profile_document(profile_doc, now):
    report = build_user_analytics(profile_doc, now=now)

    assert report.generated_at == now
    assert report.health_score == 95
    assert report.risk_flag.level == "low"
    assert report.ai_recommendations == ["Keep up your healthy habits!"]

    assert report.trends.weight.trend == "decreasing"
    assert report.trends.weight.change == -3.0
    assert report.trends.weight.percent == -3.5
    assert report.trends.heart_rate.trend == "no data"
    assert report.trends.sleep.trend == "increasing"
    assert report.trends.steps.trend == "increasing"

    assert report.goal_progress.weight.percent == 100
    assert report.goal_progress.weight.met is True
    assert report.goal_progress.steps.streak == 2
    assert report.goal_progress.steps.percent == 131
    assert report.goal_progress.steps.met is True

    assert [s.name for s in report.risk_alerts.upcoming_screenings] == ["Colonoscopy"]
    assert report.risk_alerts.medication_adherence.adherence == 93
    assert report.risk_alerts.medication_adherence.missed == 1
    assert report.risk_alerts.chronic_condition_risks == ["Diabetes"]

    assert report.lifestyle.diet_quality_score == 90
    assert report.lifestyle.hydration.avg == 2000
    assert report.lifestyle.hydration.status == "adequate"
    assert report.lifestyle.stress_level == "moderate"

    assert report.social.loneliness == "supported"
    assert report.social.environmental_risk == "air quality (high)"

    assert report.preventive.vaccination.received == ["Influenza"]
    assert report.preventive.vaccination.missing == ["COVID-19", "Tetanus", "Hepatitis B"]
    assert [r.name for r in report.preventive.reminders] == ["Dental cleaning"]

    assert report.action_plans == ["Walk 20 minutes"]
    assert report.motivational_feedback == FEEDBACK_WEIGHT
    assert report.mental_health.mood_pattern == "happy"
    assert report.mental_health.burnout_risk == "low"
    assert report.engagement.app_engagement == "low"
    assert report.engagement.recommendation_follow_rate == 50


def test_report_for_empty_profile(now):
    report = build_user_analytics({}, now=now)
    assert report.health_score == 80
    assert report.trends.weight.trend == "no data"
    assert report.goal_progress.weight is None
    assert report.goal_progress.steps.streak == 0
    assert report.goal_progress.steps.percent is None
    assert report.risk_alerts.upcoming_screenings == []
    assert report.risk_alerts.medication_adherence.adherence == 100
    assert report.lifestyle.diet_quality_score == 60
    assert report.lifestyle.hydration.status == "low"
    assert report.lifestyle.stress_level == "unknown"
    assert report.social.loneliness == "unknown"
    assert report.social.environmental_risk == "none"
    assert report.mental_health.mood_pattern == "unknown"
    assert report.engagement.app_engagement == "unknown"
    assert report.engagement.recommendation_follow_rate == 0
    assert report.motivational_feedback == FEEDBACK_DEFAULT


def test_report_for_missing_profile(now):
    assert build_user_analytics(None, now=now).health_score == 80


def test_report_streak_feedback(now):
    steps = [{"value": 10000, "date": f"2024-06-{d:02d}"} for d in range(1, 9)]
    profile = HealthProfile.model_validate({"biometrics": {"steps": steps}, "goals": {"steps": 8000}})
    report = build_user_analytics(profile, now=now)
    assert report.goal_progress.steps.streak == 8
    assert report.motivational_feedback == FEEDBACK_STREAK


def test_report_custom_vaccine_list(profile_doc, now):
    report = build_user_analytics(profile_doc, now=now, recommended_vaccines=["Influenza", "Shingles"])
    assert report.preventive.vaccination.missing == ["Shingles"]


def test_report_is_repeatable_and_leaves_input_alone(profile_doc, now):
    snapshot = copy.deepcopy(profile_doc)
    first = build_user_analytics(profile_doc, now=now)
    second = build_user_analytics(profile_doc, now=now)
    assert first == second
    assert profile_doc == snapshot


def test_analytics_context_sections(profile_doc, now):
    context = render_analytics_context(build_user_analytics(profile_doc, now=now))
    assert "- AI Health Score: 95 / 100" in context
    assert "- Upcoming screenings: Colonoscopy" in context
    assert "- Medication adherence: 93% (missed: 1)" in context
    assert "- Chronic condition risks: Diabetes" in context
    assert "- Diet quality score: 90/100" in context
    assert "- Hydration: adequate (avg: 2000 ml/day)" in context
    assert "- Environmental risk: air quality (high)" in context
    assert "- Missing vaccines: COVID-19, Tetanus, Hepatitis B" in context
    assert "- Action plans: Walk 20 minutes" in context
    assert f"- Motivational feedback: {FEEDBACK_WEIGHT}" in context
    assert "- Recommendation follow rate: 50%" in context


def test_analytics_context_for_empty_profile(now):
    context = render_analytics_context(build_user_analytics({}, now=now))
    assert "- Upcoming screenings: None" in context
    assert "- Action plans: None" in context
    assert "- Mood pattern: unknown" in context
