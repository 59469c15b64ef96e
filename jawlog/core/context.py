"""
Per-request user context.

Authentication happens upstream; the gateway forwards the caller's id in
`X-User-Id`. Services never look the user up themselves: they receive a
`UserContext` built here, once per request.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from jawlog.core.errors import MissingUserContextError
from jawlog.db.base import get_db
from jawlog.services.subscription import is_subscribed


@dataclass(frozen=True)
class UserContext:
    user_id: str
    is_subscribed: bool = False


def get_user_context(
    x_user_id: Optional[str] = Header(default=None, max_length=64),
    db: Session = Depends(get_db),
) -> UserContext:
    if x_user_id is None or not x_user_id.strip():
        raise MissingUserContextError()
    user_id = x_user_id.strip()
    return UserContext(user_id=user_id, is_subscribed=is_subscribed(db, user_id))
