"""
Daily log request / response schemas.

POST /logs        → LogRequest → LogResponse
GET  /logs        → LogHistoryResponse
GET  /logs/count  → LogCountResponse
"""
from __future__ import annotations

import datetime as dt
from typing import Annotated, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

MAX_ITEMS_PER_FIELD = 50

Label = Annotated[str, Field(max_length=128)]


class LogRequest(BaseModel):
    """One day's log. Submitting the same date twice overwrites it."""

    pain_score: int = Field(ge=1, le=10, description="Jaw pain, 1 (none) to 10 (worst).")
    stress_level: int = Field(ge=1, le=5, description="Stress, 1 (calm) to 5 (very high).")
    foods: list[Label] = Field(default_factory=list, max_length=MAX_ITEMS_PER_FIELD)
    medications: list[Label] = Field(default_factory=list, max_length=MAX_ITEMS_PER_FIELD)
    exercises: list[Label] = Field(default_factory=list, max_length=MAX_ITEMS_PER_FIELD)
    symptoms: list[Label] = Field(default_factory=list, max_length=MAX_ITEMS_PER_FIELD)
    work_done: bool = False
    work_type: Optional[str] = Field(default=None, max_length=128)
    date: Optional[dt.date] = Field(
        default=None,
        description="Calendar day of the log. Defaults to today (UTC).",
        examples=["2026-10-19"],
    )

    @field_validator("foods", "medications", "exercises", "symptoms", mode="after")
    @classmethod
    def strip_labels(cls, v: list[str]) -> list[str]:
        """Trim labels, drop blanks, keep first occurrence of duplicates."""
        seen: list[str] = []
        for label in (s.strip() for s in v):
            if label and label not in seen:
                seen.append(label)
        return seen

    @model_validator(mode="after")
    def clear_work_type(self) -> "LogRequest":
        if not self.work_done:
            self.work_type = None
        elif self.work_type is not None:
            self.work_type = self.work_type.strip() or None
        return self


class LogResponse(BaseModel):
    id: int
    date: str
    pain_score: int
    stress_level: int
    pain_band: str = Field(description='"low" (1-3), "moderate" (4-6) or "high" (7-10).')
    stress_band: str = Field(description='"low" (1-2), "moderate" (3) or "high" (4-5).')
    foods: list[str]
    medications: list[str]
    exercises: list[str]
    symptoms: list[str]
    work_done: bool
    work_type: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str]


class LogSubmitResponse(LogResponse):
    created: bool = Field(description="False when an existing log for the date was overwritten.")
    recommend_product: bool = Field(
        description="True when stress and pain are both high for an established user."
    )
    product_url: Optional[str] = None


class LogHistoryResponse(BaseModel):
    total: int
    items: list[LogResponse] = Field(description="Most recent first.")


class LogCountResponse(BaseModel):
    count: int
