from datetime import datetime, date
from sqlalchemy import Integer, String, Boolean, DateTime, Date, func
from sqlalchemy.orm import Mapped, mapped_column

from jawlog.db.base import Base


class UserSubscription(Base):
    """Premium subscription state. Written by the billing integration, read here."""

    __tablename__ = "user_subscription"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    subscribed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    subscription_tier: Mapped[str | None] = mapped_column(String(32), nullable=True)
    subscription_end: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
