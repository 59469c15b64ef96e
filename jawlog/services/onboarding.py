"""
Onboarding service: four preference-selection steps, then done.

Steps (in order): foods -> medications -> exercises -> symptoms.
Skipping a step marks it complete just like finishing it.
"""
from __future__ import annotations

import enum
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jawlog.core.context import UserContext
from jawlog.models.onboarding import UserOnboarding


class OnboardingStep(str, enum.Enum):
    foods = "foods"
    medications = "medications"
    exercises = "exercises"
    symptoms = "symptoms"


STEP_ORDER = [
    OnboardingStep.foods,
    OnboardingStep.medications,
    OnboardingStep.exercises,
    OnboardingStep.symptoms,
]


def _step_column(step: OnboardingStep) -> str:
    return f"{step.value}_completed"


def get_or_create_status(db: Session, ctx: UserContext) -> UserOnboarding:
    status = db.query(UserOnboarding).filter(UserOnboarding.user_id == ctx.user_id).first()
    if status is None:
        status = UserOnboarding(user_id=ctx.user_id)
        db.add(status)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            status = (
                db.query(UserOnboarding).filter(UserOnboarding.user_id == ctx.user_id).one()
            )
        db.refresh(status)
    return status


def next_step(status: UserOnboarding) -> OnboardingStep | None:
    """First step not yet completed, or None once all four are done."""
    for step in STEP_ORDER:
        if not getattr(status, _step_column(step)):
            return step
    return None


def complete_step(db: Session, ctx: UserContext, step: OnboardingStep) -> UserOnboarding:
    status = get_or_create_status(db, ctx)
    setattr(status, _step_column(step), True)
    db.commit()
    db.refresh(status)
    return status


def complete_onboarding(db: Session, ctx: UserContext) -> UserOnboarding:
    status = get_or_create_status(db, ctx)
    if not status.onboarding_completed:
        status.onboarding_completed = True
        status.completed_at = datetime.now(tz=timezone.utc)
        db.commit()
        db.refresh(status)
    return status
