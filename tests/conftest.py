"""
Shared pytest fixtures.

Uses a SQLite database file so no Postgres is required for tests.
Each test gets its own user id, so rows never bleed between tests.
"""
import os
import uuid

SQLITE_URL = "sqlite:///./test_jawlog.db"
os.environ.setdefault("DATABASE_URL", SQLITE_URL)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from jawlog.db.base import Base, get_db  # noqa: E402
from jawlog.main import app  # noqa: E402
from jawlog.models.preference import DefaultPreference, PreferenceType  # noqa: E402
from jawlog.models.subscription import UserSubscription  # noqa: E402

engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

_DEFAULT_PREFERENCES = [
    (PreferenceType.foods, "Coffee"),
    (PreferenceType.foods, "Chewing gum"),
    (PreferenceType.foods, "Steak"),
    (PreferenceType.medications, "Ibuprofen"),
    (PreferenceType.medications, "Magnesium"),
    (PreferenceType.exercises, "Jaw stretches"),
    (PreferenceType.exercises, "Yoga"),
    (PreferenceType.symptoms, "Jaw pain"),
    (PreferenceType.symptoms, "Clicking"),
    (PreferenceType.symptoms, "Headache"),
]


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.create_all(bind=engine)
    # Seed suggested labels (normally done by Alembic migration)
    db = TestingSessionLocal()
    try:
        if db.query(DefaultPreference).count() == 0:
            for ptype, value in _DEFAULT_PREFERENCES:
                db.add(DefaultPreference(preference_type=ptype, preference_value=value))
            db.commit()
    finally:
        db.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def user_id() -> str:
    return f"user-{uuid.uuid4().hex[:12]}"


@pytest.fixture()
def headers(user_id) -> dict[str, str]:
    return {"X-User-Id": user_id}


@pytest.fixture()
def subscribed(db, user_id) -> str:
    """Give the test user an open-ended premium subscription."""
    db.add(UserSubscription(user_id=user_id, subscribed=True, subscription_tier="premium"))
    db.commit()
    return user_id


@pytest.fixture()
def concurrent_insert():
    """
    Arm a one-shot hook that commits `row` from a separate session right
    before the next flush, as if another request won the race to insert it.
    """
    hooks = []

    def arm(row):
        fired = False

        def _insert(session, flush_context, instances):
            nonlocal fired
            if fired:
                return
            fired = True
            other = TestingSessionLocal()
            try:
                other.add(row)
                other.commit()
            finally:
                other.close()

        event.listen(Session, "before_flush", _insert)
        hooks.append(_insert)

    yield arm
    for hook in hooks:
        event.remove(Session, "before_flush", hook)
