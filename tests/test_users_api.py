"""Integration tests for the account, device and profile endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

PROFILE = {
    "country": "Pakistan",
    "age": 28,
    "gender": "female",
    "height": "165 cm",
    "current_weight": "70 kg",
    "body_goal": "lose_weight",
    "target_weight": "60 kg",
}


def test_signup_and_login_flow(client: TestClient, signup) -> None:
    headers = signup(language="ur-PK")

    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    body = me.json()
    assert body["email"] == "ayesha@example.com"
    assert body["language"] == "ur"
    assert body["preferences"] == {
        "push_enabled": True,
        "diet_reminders_enabled": True,
        "workout_reminders_enabled": True,
    }

    token_response = client.post(
        "/auth/token", data={"username": "ayesha@example.com", "password": "Secret123"}
    )
    assert token_response.status_code == 200
    assert token_response.json()["token_type"] == "bearer"

    assert client.get("/users/me", headers=headers).json()["last_login"] is not None


def test_signup_rejects_duplicate_email(client: TestClient, signup) -> None:
    signup()

    response = client.post(
        "/auth/signup",
        json={"full_name": "Other", "email": "AYESHA@example.com", "password": "Secret123"},
    )

    assert response.status_code == 409


def test_welcome_is_stored_but_not_pushed_at_signup(client, signup, push_gateway) -> None:
    headers = signup()

    listing = client.get("/notifications/", headers=headers).json()

    assert [item["kind"] for item in listing["items"]] == ["welcome"]
    assert listing["items"][0]["priority"] == "high"
    assert listing["items"][0]["message"].startswith("Hi Ayesha Khan!")
    assert push_gateway.sent == []


def test_registering_push_token_replays_pending_notifications(
    client, signup, push_gateway
) -> None:
    headers = signup()

    response = client.post("/users/me/push-token", json={"token": "device-1"}, headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["attempted"] == 1
    assert body["sent"] == 1
    assert body["deliveries"][0]["status"] == "sent"
    token, message = push_gateway.sent[0]
    assert token == "device-1"
    assert message.title == "Welcome to PrimeForm! 🎉"
    assert message.data["type"] == "welcome"


def test_push_token_can_be_cleared(client, signup, push_gateway) -> None:
    headers = signup()
    client.post("/users/me/push-token", json={"token": "device-1"}, headers=headers)

    assert client.delete("/users/me/push-token", headers=headers).status_code == 204

    client.post("/plans/diet", json={"name": "Cutting"}, headers=headers)
    assert len(push_gateway.sent) == 1


def test_settings_update_changes_gating(client, signup, push_gateway) -> None:
    headers = signup()
    client.post("/users/me/push-token", json={"token": "device-1"}, headers=headers)

    response = client.patch(
        "/users/me/settings",
        json={"diet_reminders_enabled": False, "language": "ur"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["preferences"]["diet_reminders_enabled"] is False
    assert response.json()["language"] == "ur"

    client.post("/plans/diet", json={"name": "Cutting"}, headers=headers)
    outcome = client.post("/reminders/diet/me", headers=headers).json()

    assert outcome["status"] == "suppressed"
    assert outcome["reason"] == "category_disabled"


def test_settings_reject_unknown_fields(client, signup) -> None:
    headers = signup()

    response = client.patch("/users/me/settings", json={"theme": "dark"}, headers=headers)

    assert response.status_code == 422


def test_profile_save_awards_badge_once(client, signup, push_gateway) -> None:
    headers = signup()
    client.post("/users/me/push-token", json={"token": "device-1"}, headers=headers)

    assert client.get("/users/me/profile", headers=headers).status_code == 404

    first = client.put("/users/me/profile", json=PROFILE, headers=headers)
    second = client.put("/users/me/profile", json={**PROFILE, "age": 29}, headers=headers)

    assert first.status_code == 200
    assert first.json()["badges"] == ["profile_completion"]
    assert second.json()["age"] == 29
    badge_pushes = [m for _, m in push_gateway.sent if m.data["type"] == "badge_earned"]
    assert len(badge_pushes) == 1
    assert badge_pushes[0].data["badgeType"] == "profile_completion"


def test_profile_rejects_out_of_range_age(client, signup) -> None:
    headers = signup()

    response = client.put("/users/me/profile", json={**PROFILE, "age": 8}, headers=headers)

    assert response.status_code == 422


def test_plan_creation_pushes_and_replaces_active_plan(client, signup, push_gateway) -> None:
    headers = signup()
    client.post("/users/me/push-token", json={"token": "device-1"}, headers=headers)

    first = client.post("/plans/workout", json={"name": "Push pull legs"}, headers=headers)
    second = client.post("/plans/workout", json={"name": "Full body"}, headers=headers)

    assert first.status_code == 201
    active = client.get("/plans/workout/active", headers=headers).json()
    assert active["id"] == second.json()["id"]
    plans = client.get("/plans/workout", headers=headers).json()
    assert sorted(plan["is_active"] for plan in plans) == [False, True]

    _, message = push_gateway.sent[-1]
    assert message.data["type"] == "workout_plan_created"
    assert message.data["planId"] == str(second.json()["id"])
    assert message.data["actionType"] == "workout_plan"
    assert client.get("/plans/diet/active", headers=headers).status_code == 404


def test_requests_without_token_are_rejected(client) -> None:
    assert client.get("/users/me").status_code == 401
    assert client.get("/notifications/").status_code == 401
