from typing import Optional
from pydantic import BaseModel


class SubscriptionOut(BaseModel):
    subscribed: bool
    subscription_tier: Optional[str]
    subscription_end: Optional[str]
    upgrade_url: Optional[str] = None
