"""
Subscription router.

GET /subscription — the caller's plan, plus the upgrade link when free
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jawlog.core.config import settings
from jawlog.core.context import UserContext, get_user_context
from jawlog.db.base import get_db
from jawlog.schemas.subscription import SubscriptionOut
from jawlog.services.subscription import get_or_create_subscription, is_active

router = APIRouter(prefix="/subscription", tags=["subscription"])


@router.get("", response_model=SubscriptionOut, summary="Current subscription")
def subscription(
    ctx: UserContext = Depends(get_user_context),
    db: Session = Depends(get_db),
):
    sub = get_or_create_subscription(db, ctx.user_id)
    return SubscriptionOut(
        subscribed=is_active(sub),
        subscription_tier=sub.subscription_tier,
        subscription_end=str(sub.subscription_end) if sub.subscription_end else None,
        upgrade_url=None if is_active(sub) else settings.PRODUCT_URL,
    )
