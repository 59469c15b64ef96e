"""
Daily log service: upsert one log per user per day, read history.

Public API
----------
upsert_daily_log(db, ctx, entry)            -> LogResult     (commit)
list_history(db, ctx, limit)                -> list[DailyLog] (newest first)
count_logs(db, ctx)                         -> int
fetch_records(db, ctx, newest_first, limit) -> list[DailyRecord]
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jawlog.core.config import settings
from jawlog.core.context import UserContext
from jawlog.models.daily_log import DailyLog
from jawlog.services.analytics import DailyRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input / result types
# ---------------------------------------------------------------------------

@dataclass
class LogEntry:
    """Lightweight DTO so the service layer stays schema-agnostic."""
    pain_score: int
    stress_level: int
    foods: list[str] = field(default_factory=list)
    medications: list[str] = field(default_factory=list)
    exercises: list[str] = field(default_factory=list)
    symptoms: list[str] = field(default_factory=list)
    work_done: bool = False
    work_type: Optional[str] = None
    day: Optional[date] = None


@dataclass
class LogResult:
    log: DailyLog
    created: bool               # False when an existing day was overwritten
    recommend_product: bool


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _today() -> date:
    return datetime.now(tz=timezone.utc).date()


def pain_band(score: int) -> str:
    if score <= 3:
        return "low"
    if score <= 6:
        return "moderate"
    return "high"


def stress_band(level: int) -> str:
    if level <= 2:
        return "low"
    if level <= 3:
        return "moderate"
    return "high"


def should_recommend_product(prior_logs: int, stress_level: int, pain_score: int) -> bool:
    """High stress + high pain, once the user has an established logging habit."""
    return (
        prior_logs >= settings.RECOMMENDATION_MIN_LOGS
        and stress_level >= settings.RECOMMENDATION_MIN_STRESS
        and pain_score >= settings.RECOMMENDATION_MIN_PAIN
    )


def _find_log(db: Session, ctx: UserContext, day: date) -> Optional[DailyLog]:
    return (
        db.query(DailyLog)
        .filter(DailyLog.user_id == ctx.user_id, DailyLog.date == day)
        .first()
    )


def _apply_entry(log: DailyLog, entry: LogEntry) -> None:
    log.pain_score = entry.pain_score
    log.stress_level = entry.stress_level
    log.foods = list(entry.foods)
    log.medications = list(entry.medications)
    log.exercises = list(entry.exercises)
    log.symptoms = list(entry.symptoms)
    log.work_done = entry.work_done
    log.work_type = entry.work_type if entry.work_done else None


# ---------------------------------------------------------------------------
# Public — write
# ---------------------------------------------------------------------------

def upsert_daily_log(db: Session, ctx: UserContext, entry: LogEntry) -> LogResult:
    """
    Insert or overwrite the (user, day) log and commit.

    The product recommendation is judged against the number of logs the
    user had before this submission.
    """
    target = entry.day or _today()
    prior_logs = count_logs(db, ctx)

    log = _find_log(db, ctx, target)
    created = log is None
    if created:
        log = DailyLog(user_id=ctx.user_id, date=target)
        db.add(log)
    _apply_entry(log, entry)

    try:
        db.commit()
    except IntegrityError:
        if not created:
            raise
        # Another request created the same day between lookup and flush.
        db.rollback()
        log = _find_log(db, ctx, target)
        if log is None:
            raise
        logger.info("Concurrent log for user %s on %s, overwriting", ctx.user_id, target)
        created = False
        _apply_entry(log, entry)
        db.commit()
    db.refresh(log)
    logger.info(
        "%s daily log for user %s on %s",
        "Created" if created else "Updated", ctx.user_id, target,
    )

    return LogResult(
        log=log,
        created=created,
        recommend_product=should_recommend_product(
            prior_logs, entry.stress_level, entry.pain_score
        ),
    )


# ---------------------------------------------------------------------------
# Public — read
# ---------------------------------------------------------------------------

def _clamp_limit(limit: Optional[int]) -> int:
    cap = settings.HISTORY_LIMIT
    if limit is None:
        return cap
    return max(1, min(limit, cap))


def list_history(db: Session, ctx: UserContext, limit: Optional[int] = None) -> list[DailyLog]:
    """Most recent logs first, capped at HISTORY_LIMIT."""
    return (
        db.query(DailyLog)
        .filter(DailyLog.user_id == ctx.user_id)
        .order_by(DailyLog.date.desc())
        .limit(_clamp_limit(limit))
        .all()
    )


def count_logs(db: Session, ctx: UserContext) -> int:
    return (
        db.query(func.count(DailyLog.id))
        .filter(DailyLog.user_id == ctx.user_id)
        .scalar()
        or 0
    )


def fetch_records(
    db: Session,
    ctx: UserContext,
    newest_first: bool = True,
    limit: Optional[int] = None,
) -> list[DailyRecord]:
    """
    Load up to `limit` logs as detached `DailyRecord` values.

    The window is always the most recent days; `newest_first=False` only
    flips the order of the returned list (charts read oldest -> newest).
    """
    rows = list_history(db, ctx, limit)
    records = [DailyRecord.from_row(r) for r in rows]
    if not newest_first:
        records.reverse()
    return records
