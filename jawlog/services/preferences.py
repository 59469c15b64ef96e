"""
Preference service: the per-user label lists offered on the log form.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from jawlog.core.context import UserContext
from jawlog.core.errors import PreferenceNotFoundError
from jawlog.models.preference import DefaultPreference, PreferenceType, UserPreference

logger = logging.getLogger(__name__)


def list_preferences(db: Session, ctx: UserContext, ptype: PreferenceType) -> list[UserPreference]:
    return (
        db.query(UserPreference)
        .filter(UserPreference.user_id == ctx.user_id, UserPreference.preference_type == ptype)
        .order_by(UserPreference.id)
        .all()
    )


def list_default_preferences(db: Session, ptype: PreferenceType) -> list[DefaultPreference]:
    return (
        db.query(DefaultPreference)
        .filter(DefaultPreference.preference_type == ptype)
        .order_by(DefaultPreference.id)
        .all()
    )


def add_preference(
    db: Session,
    ctx: UserContext,
    ptype: PreferenceType,
    value: str,
    is_default: bool = False,
) -> tuple[UserPreference, bool]:
    """
    Add a label for the user. Returns (row, created); adding a label the
    user already has returns the existing row with created=False.
    """
    value = value.strip()
    existing = (
        db.query(UserPreference)
        .filter(
            UserPreference.user_id == ctx.user_id,
            UserPreference.preference_type == ptype,
            UserPreference.preference_value == value,
        )
        .first()
    )
    if existing is not None:
        return existing, False

    pref = UserPreference(
        user_id=ctx.user_id,
        preference_type=ptype,
        preference_value=value,
        is_default=is_default,
    )
    db.add(pref)
    db.commit()
    db.refresh(pref)
    return pref, True


def remove_preference(db: Session, ctx: UserContext, ptype: PreferenceType, preference_id: int) -> None:
    pref = (
        db.query(UserPreference)
        .filter(
            UserPreference.id == preference_id,
            UserPreference.user_id == ctx.user_id,
            UserPreference.preference_type == ptype,
        )
        .first()
    )
    if pref is None:
        raise PreferenceNotFoundError(preference_id)
    db.delete(pref)
    db.commit()
    logger.info("Removed preference %s for user %s", preference_id, ctx.user_id)
