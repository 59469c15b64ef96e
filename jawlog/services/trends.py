"""
Trends service: pain / stress series for charts plus the stress-pain
correlation. Available to every user.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from jawlog.core.context import UserContext
from jawlog.services.analytics import (
    CorrelationLabel,
    DailyRecord,
    compute_correlation,
    describe_correlation,
)
from jawlog.services.logs import fetch_records


@dataclass
class TrendReport:
    points: list[DailyRecord]              # oldest first
    correlation: Optional[float]           # None = fewer than 2 logs
    correlation_label: Optional[CorrelationLabel]


def get_trends(db: Session, ctx: UserContext) -> TrendReport:
    records = fetch_records(db, ctx, newest_first=False)
    r = compute_correlation(records)
    return TrendReport(
        points=records,
        correlation=r,
        correlation_label=describe_correlation(r) if r is not None else None,
    )
