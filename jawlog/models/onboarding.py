from datetime import datetime
from sqlalchemy import Integer, String, Boolean, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from jawlog.db.base import Base


class UserOnboarding(Base):
    """Per-user progress through the four preference-selection steps."""

    __tablename__ = "user_onboarding"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    foods_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    medications_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    exercises_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    symptoms_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    onboarding_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
