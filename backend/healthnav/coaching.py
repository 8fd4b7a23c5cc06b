"""
Plain-text analytics context for the coaching assistant.

The rendered sections are inserted verbatim into the assistant's prompt
template, which lives with the AI flows and is not part of this package.
"""
from __future__ import annotations
from typing import List

from .schemas import AnalyticsReport


def _join(items: List[str], sep: str = ", ") -> str:
    return sep.join(i for i in items if i) or "None"


def render_analytics_context(report: AnalyticsReport) -> str:
    recs = report.ai_recommendations
    adherence = report.risk_alerts.medication_adherence
    hydration = report.lifestyle.hydration
    sections = [
        "Health Analytics:\n"
        f"- AI Health Score: {report.health_score} / 100\n"
        f"- Risk Level: {report.risk_flag.level} ({report.risk_flag.message})\n"
        "- AI Recommendations:" + ("\n  - " + "\n  - ".join(recs) if recs else " None"),

        "Risk & Alerts:\n"
        f"- Upcoming screenings: {_join([s.name for s in report.risk_alerts.upcoming_screenings])}\n"
        f"- Medication adherence: {adherence.adherence}% (missed: {adherence.missed})\n"
        f"- Chronic condition risks: {_join(report.risk_alerts.chronic_condition_risks)}",

        "Lifestyle & Behavior:\n"
        f"- Diet quality score: {report.lifestyle.diet_quality_score:g}/100\n"
        f"- Hydration: {hydration.status} (avg: {hydration.avg} ml/day)\n"
        f"- Stress level: {report.lifestyle.stress_level}",

        "Social & Environmental:\n"
        f"- Loneliness status: {report.social.loneliness}\n"
        f"- Environmental risk: {report.social.environmental_risk}",

        "Preventive Health:\n"
        f"- Missing vaccines: {_join(report.preventive.vaccination.missing)}\n"
        f"- Upcoming preventive reminders: {_join([r.name for r in report.preventive.reminders])}",

        "AI Recommendations:\n"
        f"- Action plans: {_join(report.action_plans, '; ')}\n"
        f"- Motivational feedback: {report.motivational_feedback}",

        "Mental Health Insights:\n"
        f"- Mood pattern: {report.mental_health.mood_pattern}\n"
        f"- Burnout risk: {report.mental_health.burnout_risk}",

        "Engagement Analytics:\n"
        f"- App engagement: {report.engagement.app_engagement}\n"
        f"- Recommendation follow rate: {report.engagement.recommendation_follow_rate}%",
    ]
    return "\n\n".join(sections) + "\n"
