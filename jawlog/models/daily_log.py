import datetime as dt
from sqlalchemy import Integer, String, Boolean, DateTime, Date, JSON, CheckConstraint, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from jawlog.db.base import Base


class DailyLog(Base):
    """One user's symptom / diet / medication / exercise log for a calendar day."""

    __tablename__ = "daily_logs"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_daily_log_user_date"),
        CheckConstraint("pain_score BETWEEN 1 AND 10", name="ck_daily_log_pain_range"),
        CheckConstraint("stress_level BETWEEN 1 AND 5", name="ck_daily_log_stress_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    pain_score: Mapped[int] = mapped_column(Integer, nullable=False)
    stress_level: Mapped[int] = mapped_column(Integer, nullable=False)
    foods: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    medications: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    exercises: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    symptoms: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    work_done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    work_type: Mapped[str | None] = mapped_column(String(128), nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
