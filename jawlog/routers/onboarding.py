"""
Onboarding router.

GET  /onboarding                — current status and next step
POST /onboarding/steps/{step}   — mark a step done (finish or skip)
POST /onboarding/complete       — finish onboarding
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jawlog.core.context import UserContext, get_user_context
from jawlog.db.base import get_db
from jawlog.models.onboarding import UserOnboarding
from jawlog.schemas.onboarding import OnboardingStatusOut
from jawlog.services.onboarding import (
    OnboardingStep,
    complete_onboarding,
    complete_step,
    get_or_create_status,
    next_step,
)

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


def _status_out(s: UserOnboarding) -> OnboardingStatusOut:
    step = next_step(s)
    return OnboardingStatusOut(
        foods_completed=s.foods_completed,
        medications_completed=s.medications_completed,
        exercises_completed=s.exercises_completed,
        symptoms_completed=s.symptoms_completed,
        onboarding_completed=s.onboarding_completed,
        completed_at=s.completed_at.isoformat() if s.completed_at else None,
        next_step=step.value if step is not None else None,
    )


@router.get("", response_model=OnboardingStatusOut, summary="Onboarding status")
def onboarding_status(
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    return _status_out(get_or_create_status(db, ctx))


@router.post("/steps/{step}", response_model=OnboardingStatusOut, summary="Mark a step done")
def onboarding_step(
    step: OnboardingStep,
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    """Used both when the user finishes a step and when they skip it."""
    return _status_out(complete_step(db, ctx, step))


@router.post("/complete", response_model=OnboardingStatusOut, summary="Finish onboarding")
def onboarding_complete(
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    return _status_out(complete_onboarding(db, ctx))
