"""
Subscription service: read-side of the billing integration.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jawlog.models.subscription import UserSubscription

logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(tz=timezone.utc).date()


def get_or_create_subscription(db: Session, user_id: str) -> UserSubscription:
    """Return the user's subscription row, creating an unsubscribed one if missing."""
    sub = db.query(UserSubscription).filter(UserSubscription.user_id == user_id).first()
    if sub is None:
        logger.info("Creating default subscription row for user %s", user_id)
        sub = UserSubscription(user_id=user_id, subscribed=False)
        db.add(sub)
        try:
            db.commit()
        except IntegrityError:
            # Created by a concurrent request; use that row.
            db.rollback()
            sub = db.query(UserSubscription).filter(UserSubscription.user_id == user_id).one()
        db.refresh(sub)
    return sub


def is_active(sub: Optional[UserSubscription], today: Optional[date] = None) -> bool:
    """Subscribed and not past `subscription_end` (an open end never lapses)."""
    if sub is None or not sub.subscribed:
        return False
    if sub.subscription_end is None:
        return True
    return sub.subscription_end >= (today or _today())


def is_subscribed(db: Session, user_id: str) -> bool:
    sub = db.query(UserSubscription).filter(UserSubscription.user_id == user_id).first()
    return is_active(sub)
