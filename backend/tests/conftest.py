import json
import os
import uuid
from datetime import date

# Settings are read at import time; point them at test values first.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-secret-for-runova-tests-0123456789")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from jose import jwt  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from runova.api.deps import get_completion_client, get_today  # noqa: E402
from runova.core.config import settings  # noqa: E402
from runova.db import Base, get_db  # noqa: E402
from runova.main import app  # noqa: E402
from runova.services.completion import CompletionClient  # noqa: E402


FIXED_TODAY = date(2025, 3, 26)  # a Wednesday


class FakeCompletionClient(CompletionClient):
    """Returns a canned body and records every prompt it was given."""

    def __init__(self, response: str | dict | Exception = None):
        self.response = response if response is not None else sample_plan_json()
        self.calls: list[tuple[str, str]] = []

    def complete_json(self, system: str, prompt: str) -> str:
        self.calls.append((system, prompt))
        if isinstance(self.response, Exception):
            raise self.response
        if isinstance(self.response, dict):
            return json.dumps(self.response)
        return self.response


def sample_plan_json(weeks: int = 2) -> dict:
    schedule = []
    for week in range(1, weeks + 1):
        schedule.append(
            {
                "week": week,
                "totalMileage": 15 + week,
                "workouts": [
                    {"day": 1, "type": "long_run", "distance": 6 + week, "duration": 60,
                     "description": "Long and steady", "intensity": "moderate"},
                    {"day": 3, "type": "easy_run", "distance": 4, "duration": 40,
                     "description": "Easy", "intensity": "easy"},
                    {"day": 5, "type": "intervals", "distance": 5, "duration": 45.4,
                     "description": "6x800m", "intensity": "hard"},
                ],
            }
        )
    return {
        "planName": "Speedy Spring",
        "weeklySchedule": schedule,
        "recommendations": "Sleep well and keep easy days easy.",
    }


def make_token(user_id: uuid.UUID, email: str | None = "runner@example.com", **claims) -> str:
    payload = {"sub": str(user_id), "aud": "authenticated", "role": "authenticated"}
    if email:
        payload["email"] = email
    payload.update(claims)
    return jwt.encode(payload, settings.supabase_jwt_secret, algorithm=settings.jwt_algorithm)


def auth_headers(user_id: uuid.UUID, **kwargs) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id, **kwargs)}"}


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db_session(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def completion():
    return FakeCompletionClient()


@pytest.fixture
def client(engine, completion):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_client] = lambda: completion
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
def other_user_id():
    return uuid.uuid4()


@pytest.fixture
def headers(user_id):
    return auth_headers(user_id)


@pytest.fixture
def other_headers(other_user_id):
    return auth_headers(other_user_id, email="someone@example.com")
