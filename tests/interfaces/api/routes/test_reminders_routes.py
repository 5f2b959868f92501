"""Tests for the reminder endpoints."""

from __future__ import annotations

import pytest

from primeform.config import get_settings


@pytest.fixture()
def cron_key(monkeypatch):
    monkeypatch.setenv("CRON_API_KEY", "cron-secret")
    get_settings.cache_clear()
    yield "cron-secret"
    monkeypatch.delenv("CRON_API_KEY")
    get_settings.cache_clear()


def test_send_reminder_to_me(client, signup, push_gateway) -> None:
    headers = signup()
    client.post("/users/me/push-token", json={"token": "device-1"}, headers=headers)

    gym = client.post("/reminders/gym/me", headers=headers)
    diet = client.post("/reminders/diet/me", headers=headers)

    assert gym.status_code == 200
    assert gym.json()["status"] == "sent"
    assert gym.json()["kind"] == "gym_reminder"
    assert diet.json()["status"] == "skipped"
    assert diet.json()["reason"] == "no_active_plan"
    assert push_gateway.titles[-1] == "PrimeForm - Gym Exercise Reminder 🏋️"


def test_unknown_reminder_slug_is_rejected(client, signup) -> None:
    response = client.post("/reminders/yoga/me", headers=signup())

    assert response.status_code == 422
    assert "streak_broken" in response.json()["detail"]


def test_send_daily_requires_cron_key(client, cron_key) -> None:
    assert client.post("/reminders/send-daily").status_code == 403
    assert (
        client.post("/reminders/send-daily", headers={"X-Cron-Key": "wrong"}).status_code
        == 403
    )


def test_send_daily_summary(client, signup, push_gateway, cron_key) -> None:
    headers = signup()
    client.post("/users/me/push-token", json={"token": "device-1"}, headers=headers)
    client.post("/plans/workout", json={"name": "Full body"}, headers=headers)
    signup(email="no-device@example.com")

    response = client.post("/reminders/send-daily", headers={"X-Cron-Key": cron_key})

    assert response.status_code == 200
    assert response.json() == {
        "users": 1,
        "sent": 2,
        "failed": 0,
        "suppressed": 0,
        "skipped": 1,
        "failed_users": {},
    }
