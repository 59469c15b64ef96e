"""
Insights service: the premium statistics view.

Access is decided from the caller's `UserContext`, never by looking the
subscription up here.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from jawlog.core.config import settings
from jawlog.core.context import UserContext
from jawlog.core.errors import SubscriptionRequiredError
from jawlog.services.analytics import DerivedStatistics, compute_statistics
from jawlog.services.logs import fetch_records

logger = logging.getLogger(__name__)

FEATURE_NAME = "insights"


def require_subscription(ctx: UserContext, feature: str = FEATURE_NAME) -> None:
    if not ctx.is_subscribed:
        logger.info("User %s denied %s: not subscribed", ctx.user_id, feature)
        raise SubscriptionRequiredError(feature=feature, upgrade_url=settings.PRODUCT_URL)


def get_insights(db: Session, ctx: UserContext) -> DerivedStatistics:
    """Derived statistics over the user's most recent logs (newest first)."""
    require_subscription(ctx)
    return compute_statistics(fetch_records(db, ctx, newest_first=True))
