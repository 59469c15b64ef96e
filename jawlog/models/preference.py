from datetime import datetime
from sqlalchemy import Integer, String, Boolean, DateTime, Enum, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column
import enum

from jawlog.db.base import Base


class PreferenceType(str, enum.Enum):
    foods = "foods"
    medications = "medications"
    exercises = "exercises"
    symptoms = "symptoms"


class UserPreference(Base):
    """A label the user picks from when logging a day."""

    __tablename__ = "user_preferences"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "preference_type", "preference_value",
            name="uq_user_preference_value",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    preference_type: Mapped[str] = mapped_column(
        Enum(PreferenceType, name="preference_type_enum"), nullable=False
    )
    preference_value: Mapped[str] = mapped_column(String(128), nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class DefaultPreference(Base):
    """Suggested labels offered during onboarding. Seeded by migration."""

    __tablename__ = "default_preferences"
    __table_args__ = (
        UniqueConstraint("preference_type", "preference_value", name="uq_default_preference_value"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    preference_type: Mapped[str] = mapped_column(
        Enum(PreferenceType, name="preference_type_enum"), nullable=False
    )
    preference_value: Mapped[str] = mapped_column(String(128), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
