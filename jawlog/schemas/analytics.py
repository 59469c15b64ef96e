"""
Analytics schemas.

GET /trends   → TrendsResponse
GET /insights → InsightsResponse
"""
from typing import Optional
from pydantic import BaseModel, Field

from jawlog.schemas.common import ItemCount


class TrendPoint(BaseModel):
    date: str
    pain_score: int
    stress_level: int


class CorrelationOut(BaseModel):
    value: float = Field(description="Pearson r between stress (x) and pain (y). Range: -1.0–1.0.")
    label: str = Field(
        description="strong_positive | moderate_positive | weak | moderate_negative | strong_negative"
    )
    description: str


class TrendsResponse(BaseModel):
    """Pain and stress over the most recent logs, oldest first."""
    total: int
    points: list[TrendPoint]
    correlation: Optional[CorrelationOut] = Field(
        default=None, description="Null when fewer than 2 logs exist."
    )


class WeeklyTrendOut(BaseModel):
    change_percent: float = Field(
        description="Mean pain of the 3 newest logs vs the next 4, in percent.",
        examples=[60.0],
    )
    improving: bool = Field(description="True when pain went down.")
    recent_mean: float
    prior_mean: float


class InsightsResponse(BaseModel):
    """Derived statistics over the most recent logs. Premium only."""
    record_count: int
    average_pain: float
    average_stress: float
    top_foods: list[ItemCount]
    top_medications: list[ItemCount]
    top_exercises: list[ItemCount]
    top_symptoms: list[ItemCount]
    top_work_types: list[ItemCount]
    work_days: int
    weekly_trend: Optional[WeeklyTrendOut] = Field(
        default=None, description="Null when there is not enough data for two windows."
    )
    correlation: Optional[CorrelationOut] = None
