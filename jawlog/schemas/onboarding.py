from typing import Optional
from pydantic import BaseModel, Field


class OnboardingStatusOut(BaseModel):
    foods_completed: bool
    medications_completed: bool
    exercises_completed: bool
    symptoms_completed: bool
    onboarding_completed: bool
    completed_at: Optional[str]
    next_step: Optional[str] = Field(
        description="First unfinished step, or null when all steps are done."
    )
