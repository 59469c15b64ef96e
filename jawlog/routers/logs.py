"""
Daily log router.

POST /logs         — create or overwrite a day's log
GET  /logs         — history, most recent first (max 30)
GET  /logs/count   — number of logged days
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jawlog.core.config import settings
from jawlog.core.context import UserContext, get_user_context
from jawlog.core.errors import LogPersistenceError
from jawlog.db.base import get_db
from jawlog.models.daily_log import DailyLog
from jawlog.schemas.logs import (
    LogCountResponse,
    LogHistoryResponse,
    LogRequest,
    LogResponse,
    LogSubmitResponse,
)
from jawlog.services.logs import (
    LogEntry,
    count_logs,
    list_history,
    pain_band,
    stress_band,
    upsert_daily_log,
)

router = APIRouter(prefix="/logs", tags=["logs"])


# ---------------------------------------------------------------------------
# Serialization helper
# ---------------------------------------------------------------------------

def _log_fields(log: DailyLog) -> dict:
    return {
        "id": log.id,
        "date": str(log.date),
        "pain_score": log.pain_score,
        "stress_level": log.stress_level,
        "pain_band": pain_band(log.pain_score),
        "stress_band": stress_band(log.stress_level),
        "foods": list(log.foods or []),
        "medications": list(log.medications or []),
        "exercises": list(log.exercises or []),
        "symptoms": list(log.symptoms or []),
        "work_done": log.work_done,
        "work_type": log.work_type,
        "created_at": log.created_at.isoformat() if log.created_at else None,
        "updated_at": log.updated_at.isoformat() if log.updated_at else None,
    }


# ---------------------------------------------------------------------------
# POST /logs
# ---------------------------------------------------------------------------

@router.post(
    "",
    response_model=LogSubmitResponse,
    summary="Save a day's log",
    responses={
        200: {"description": "Existing log for that date overwritten."},
        201: {"description": "New log created."},
        401: {"description": "Missing X-User-Id header."},
        422: {"description": "Validation error (score out of range, etc.)"},
    },
)
def submit_log(
    payload: LogRequest,
    response: Response,
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    """
    Record pain, stress, foods, medications, exercises, symptoms and work
    for one calendar day. One log per day: a second submission for the
    same date replaces the first.

    `recommend_product` is set when the user already has 5+ logs and this
    log reports stress ≥ 4 and pain ≥ 5.
    """
    entry = LogEntry(
        pain_score=payload.pain_score,
        stress_level=payload.stress_level,
        foods=payload.foods,
        medications=payload.medications,
        exercises=payload.exercises,
        symptoms=payload.symptoms,
        work_done=payload.work_done,
        work_type=payload.work_type,
        day=payload.date,
    )
    try:
        result = upsert_daily_log(db, ctx, entry)
    except SQLAlchemyError as exc:
        db.rollback()
        raise LogPersistenceError(
            message="Could not save the daily log.",
            day=str(payload.date) if payload.date else None,
        ) from exc

    response.status_code = status.HTTP_201_CREATED if result.created else status.HTTP_200_OK
    return LogSubmitResponse(
        **_log_fields(result.log),
        created=result.created,
        recommend_product=result.recommend_product,
        product_url=settings.PRODUCT_URL if result.recommend_product else None,
    )


# ---------------------------------------------------------------------------
# GET /logs
# ---------------------------------------------------------------------------

@router.get(
    "",
    response_model=LogHistoryResponse,
    summary="Log history, most recent first",
)
def history(
    limit: Optional[int] = Query(
        default=None,
        ge=1,
        description="Number of logs to return. Capped at 30.",
    ),
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    logs = list_history(db, ctx, limit)
    return LogHistoryResponse(
        total=len(logs),
        items=[LogResponse(**_log_fields(log)) for log in logs],
    )


# ---------------------------------------------------------------------------
# GET /logs/count
# ---------------------------------------------------------------------------

@router.get("/count", response_model=LogCountResponse, summary="Number of logged days")
def log_count(
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    return LogCountResponse(count=count_logs(db, ctx))
