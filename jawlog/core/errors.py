"""
Custom exception hierarchy for jawlog.

Rule: every HTTP error has a machine-readable `code` string so clients
can branch on it without parsing English messages.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class JawlogException(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class MissingUserContextError(JawlogException):
    http_status = status.HTTP_401_UNAUTHORIZED
    code = "MISSING_USER_CONTEXT"

    def __init__(self):
        super().__init__(message="Request is missing the X-User-Id header.")


class SubscriptionRequiredError(JawlogException):
    http_status = status.HTTP_402_PAYMENT_REQUIRED
    code = "SUBSCRIPTION_REQUIRED"

    def __init__(self, feature: str, upgrade_url: str | None = None):
        details: dict[str, Any] = {"feature": feature}
        if upgrade_url:
            details["upgrade_url"] = upgrade_url
        super().__init__(
            message=f"A premium subscription is required for {feature}.",
            details=details,
        )


class PreferenceNotFoundError(JawlogException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "PREFERENCE_NOT_FOUND"

    def __init__(self, preference_id: int):
        super().__init__(
            message=f"Preference {preference_id} not found.",
            details={"preference_id": preference_id},
        )


class LogPersistenceError(JawlogException):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "LOG_PERSISTENCE_ERROR"

    def __init__(self, message: str, day: str | None = None):
        super().__init__(
            message=message,
            details={"date": day} if day else {},
        )


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def jawlog_exception_handler(request: Request, exc: JawlogException) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return structured 422 with machine-readable field errors."""
    field_errors = []
    for error in exc.errors():
        field_errors.append({
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        })
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed.",
            "details": {"errors": field_errors},
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
        },
    )
