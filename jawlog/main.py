from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from jawlog.db.base import get_db
from jawlog.core.config import settings
from jawlog.core.logging_setup import configure_logging
from jawlog.routers import logs as logs_router
from jawlog.routers import analytics as analytics_router
from jawlog.routers import preferences as preferences_router
from jawlog.routers import onboarding as onboarding_router
from jawlog.routers import subscription as subscription_router
from jawlog.core.errors import (
    JawlogException,
    jawlog_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="jawlog API",
    description=(
        "**Daily TMJ symptom tracker**\n\n"
        "Log pain, stress, foods, medications, exercise and symptoms once per day, "
        "then read history, trends and (premium) insights.\n\n"
        "Every request carries the caller's id in `X-User-Id`. "
        "All error responses follow the `{code, message, details}` envelope."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Exception handlers (most specific first) ---
app.add_exception_handler(JawlogException, jawlog_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Routers ---
app.include_router(logs_router.router)
app.include_router(analytics_router.router)
app.include_router(preferences_router.router)
app.include_router(onboarding_router.router)
app.include_router(subscription_router.router)


@app.get("/health", tags=["health"], summary="Health check")
def health(db: Session = Depends(get_db)):
    """
    Returns `{"status": "ok", "db": "ok"}` when both the API and the database
    are reachable. Returns HTTP 503 if the DB is down.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "ok"
    except SQLAlchemyError:
        db_status = "unreachable"

    if db_status != "ok":
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": db_status},
        )
    return {"status": "ok", "db": "ok", "env": settings.APP_ENV}
