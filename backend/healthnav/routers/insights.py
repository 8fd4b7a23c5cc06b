"""
Insights and analytics endpoints.

- POST /api/insights/report: full analytics for a profile snapshot
- POST /api/insights/report/context: the same report as coaching context text
- POST /api/insights/trend: trend direction and change for one series
- POST /api/insights/goal-progress: progress toward a goal plus current streak
"""
import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query

from .. import schemas
from ..analytics import (
    build_user_analytics,
    calculate_goal_progress,
    calculate_streak,
    calculate_trend,
)
from ..coaching import render_analytics_context


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/insights", tags=["Insights"])


@router.post("/report", response_model=schemas.AnalyticsReport)
def get_report(
    profile: schemas.HealthProfile,
    as_of: Optional[datetime] = Query(None, description="Evaluate due dates as of this time (default now)"),
):
    """
    Compute every analytics summary for the given profile snapshot.

    - **as_of**: reference time for overdue screenings and reminders
    """
    report = build_user_analytics(profile, now=as_of)
    logger.info(f"Report generated for {profile.uid or 'anonymous profile'}")
    return report


@router.post("/report/context", response_model=schemas.AnalyticsContext)
def get_report_context(
    profile: schemas.HealthProfile,
    as_of: Optional[datetime] = Query(None),
):
    report = build_user_analytics(profile, now=as_of)
    return schemas.AnalyticsContext(context=render_analytics_context(report))


@router.post("/trend", response_model=schemas.TrendResult)
def get_trend(body: schemas.TrendRequest):
    return calculate_trend(body.values)


@router.post("/goal-progress", response_model=schemas.GoalProgressResponse)
def get_goal_progress(body: schemas.GoalProgressRequest):
    """
    Progress of ``current`` against ``goal``; ``values`` (oldest first)
    are scanned for the trailing run of days at or above the goal.
    """
    return schemas.GoalProgressResponse(
        progress=calculate_goal_progress(body.current, body.goal),
        streak=calculate_streak(body.values, body.goal) if body.goal else 0,
    )
