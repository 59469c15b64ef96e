"""
Analytics router.

GET /trends    — pain / stress series and their correlation (all users)
GET /insights  — averages, top items, weekly trend, correlation (premium)
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jawlog.core.context import UserContext, get_user_context
from jawlog.db.base import get_db
from jawlog.schemas.analytics import (
    CorrelationOut,
    InsightsResponse,
    TrendPoint,
    TrendsResponse,
    WeeklyTrendOut,
)
from jawlog.schemas.common import ErrorResponse, ItemCount
from jawlog.services.analytics import CorrelationLabel
from jawlog.services.insights import get_insights
from jawlog.services.trends import get_trends

router = APIRouter(tags=["analytics"])


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------

def _counts(pairs: list[tuple[str, int]]) -> list[ItemCount]:
    return [ItemCount(label=label, count=count) for label, count in pairs]


def _correlation(r: Optional[float], label: Optional[CorrelationLabel]) -> Optional[CorrelationOut]:
    if r is None or label is None:
        return None
    return CorrelationOut(value=round(r, 4), label=label.label, description=label.description)


# ---------------------------------------------------------------------------
# GET /trends
# ---------------------------------------------------------------------------

@router.get(
    "/trends",
    response_model=TrendsResponse,
    summary="Pain and stress trends",
)
def trends(
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    """
    Return the user's most recent 30 logs, oldest first, for charting,
    plus the Pearson correlation between stress and pain.

    `correlation` is null with fewer than 2 logs and 0.0 when either
    series never varies.
    """
    report = get_trends(db, ctx)
    return TrendsResponse(
        total=len(report.points),
        points=[
            TrendPoint(date=str(p.date), pain_score=p.pain_score, stress_level=p.stress_level)
            for p in report.points
        ],
        correlation=_correlation(report.correlation, report.correlation_label),
    )


# ---------------------------------------------------------------------------
# GET /insights
# ---------------------------------------------------------------------------

@router.get(
    "/insights",
    response_model=InsightsResponse,
    summary="Personal insights (premium)",
    responses={402: {"model": ErrorResponse, "description": "Subscription required."}},
)
def insights(
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    """
    Derived statistics over the most recent 30 logs:

    - average pain and stress (one decimal, 0.0 with no logs)
    - top 3 foods, medications, exercises, symptoms and work types
    - weekly trend: 3 newest logs vs the 4 before them
    - stress/pain correlation with a qualitative label

    Raises **402** when the user has no active subscription.
    """
    stats = get_insights(db, ctx)
    trend = stats.weekly_trend
    return InsightsResponse(
        record_count=stats.record_count,
        average_pain=stats.average_pain,
        average_stress=stats.average_stress,
        top_foods=_counts(stats.top_foods),
        top_medications=_counts(stats.top_medications),
        top_exercises=_counts(stats.top_exercises),
        top_symptoms=_counts(stats.top_symptoms),
        top_work_types=_counts(stats.top_work_types),
        work_days=stats.work_days,
        weekly_trend=WeeklyTrendOut(
            change_percent=trend.change_percent,
            improving=trend.improving,
            recent_mean=trend.recent_mean,
            prior_mean=trend.prior_mean,
        ) if trend is not None else None,
        correlation=_correlation(stats.correlation, stats.correlation_label),
    )
