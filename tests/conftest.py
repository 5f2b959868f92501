"""Shared fixtures: a throwaway SQLite database and a recording push gateway."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "primeform_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ENVIRONMENT"] = "development"
for _name in (
    "SENDGRID_API_KEY",
    "SENDGRID_SENDER",
    "FIREBASE_SERVICE_ACCOUNT_PATH",
    "FIREBASE_SERVICE_ACCOUNT_JSON",
    "CRON_API_KEY",
):
    os.environ.pop(_name, None)

from primeform.config import get_settings  # noqa: E402

get_settings.cache_clear()

from primeform.domain.entities import (  # noqa: E402
    Notification,
    NotificationKind,
    NotificationPreferences,
    NotificationPriority,
    User,
)
from primeform.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from primeform.infrastructure.push import PushMessage, PushResult  # noqa: E402
from primeform.infrastructure.repositories import (  # noqa: E402
    DeviceRegistrationRepository,
    NotificationRepository,
    UserRepository,
)
from primeform.interfaces.api.dependencies import get_push_gateway  # noqa: E402
from primeform.utils import add_days, utc_now  # noqa: E402
from main import create_app  # noqa: E402


@dataclass
class RecordingPushGateway:
    """Push gateway double that remembers every send and can be told to fail."""

    sent: list[tuple[str, PushMessage]] = field(default_factory=list)
    failing_ids: set[str] = field(default_factory=set)
    raising_ids: set[str] = field(default_factory=set)
    error_code: str = "gateway_unavailable"

    def send(self, token: str, message: PushMessage) -> PushResult:
        self.sent.append((token, message))
        if message.data.get("notificationId") in self.raising_ids:
            raise ConnectionError("gateway connection reset")
        if message.data.get("notificationId") in self.failing_ids:
            return PushResult.failed(self.error_code, "forced failure")
        return PushResult.sent(f"msg-{len(self.sent)}")

    @property
    def titles(self) -> list[str]:
        return [message.title for _, message in self.sent]


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def push_gateway() -> RecordingPushGateway:
    return RecordingPushGateway()


@pytest.fixture()
def make_user(session):
    """Insert a user without going through the (slow) password hashing."""

    counter = {"value": 0}

    def _make_user(
        *,
        full_name: str = "Ayesha Khan",
        language: str | None = None,
        push_enabled: bool = True,
        diet_reminders_enabled: bool = True,
        workout_reminders_enabled: bool = True,
        token: str | None = None,
    ) -> User:
        counter["value"] += 1
        user = UserRepository(session).create(
            User(
                id=None,
                full_name=full_name,
                email=f"user{counter['value']}@example.com",
                password="not-a-real-hash",
                language=language,
                preferences=NotificationPreferences(
                    push_enabled=push_enabled,
                    diet_reminders_enabled=diet_reminders_enabled,
                    workout_reminders_enabled=workout_reminders_enabled,
                ),
            )
        )
        if token:
            DeviceRegistrationRepository(session).register(user.id, token)
        return user

    return _make_user


@pytest.fixture()
def make_notification(session):
    """Store a notification directly, optionally backdated by ``age_minutes``."""

    def _make_notification(
        user_id: int,
        *,
        kind: NotificationKind = NotificationKind.GENERAL,
        title: str = "Notification",
        message: str = "Body",
        is_read: bool = False,
        age_minutes: int = 0,
        metadata: dict | None = None,
    ) -> Notification:
        created_at = utc_now() - timedelta(minutes=age_minutes)
        return NotificationRepository(session).create(
            Notification(
                id=None,
                user_id=user_id,
                kind=kind,
                title=title,
                message=message,
                priority=NotificationPriority.MEDIUM,
                metadata=metadata or {"language": "en"},
                is_read=is_read,
                created_at=created_at,
                expires_at=add_days(created_at, 30),
            )
        )

    return _make_notification


@pytest.fixture()
def client(push_gateway) -> Iterator[TestClient]:
    """Return a test client whose push gateway records every send."""

    app = create_app()
    app.dependency_overrides[get_push_gateway] = lambda: push_gateway
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def signup(client):
    """Register an account through the API and return its auth headers."""

    def _signup(
        email: str = "ayesha@example.com",
        password: str = "Secret123",
        full_name: str = "Ayesha Khan",
        language: str | None = None,
    ) -> dict[str, str]:
        payload = {"full_name": full_name, "email": email, "password": password}
        if language is not None:
            payload["language"] = language
        response = client.post("/auth/signup", json=payload)
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _signup
