"""Tests for recording and pushing application events."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from primeform.application.use_cases.notifications import NotificationDispatcher
from primeform.application.use_cases.notifications.localization import TRANSLATIONS
from primeform.domain.entities import (
    DeliveryStatus,
    NotificationKind,
    NotificationPriority,
    SuppressionReason,
)
from primeform.domain.exceptions import (
    NotificationStoreError,
    UnknownKindError,
    UserNotFoundError,
)
from primeform.infrastructure.repositories import NotificationRepository


def _records(session, user_id):
    return list(NotificationRepository(session).list_for_user(user_id, limit=None))


def test_record_without_device_token_is_deferred(session, push_gateway, make_user):
    user = make_user()

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.WORKOUT_PLAN_CREATED
    )

    records = _records(session, user.id)
    assert len(records) == 1
    assert records[0].kind is NotificationKind.WORKOUT_PLAN_CREATED
    assert records[0].is_read is False
    assert result.status is DeliveryStatus.DEFERRED
    assert result.notification_id == records[0].id
    assert push_gateway.sent == []


def test_record_is_pushed_when_token_exists(session, push_gateway, make_user):
    user = make_user(token="device-token-123")

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id,
        NotificationKind.DIET_PLAN_CREATED,
        {"plan_id": 7, "plan_details": {"planName": "Cut"}},
    )

    assert result.status is DeliveryStatus.SENT
    assert result.delivery.message_id == "msg-1"
    token, message = push_gateway.sent[0]
    assert token == "device-token-123"
    assert message.title == result.notification.title
    assert message.body == result.notification.message
    assert message.data["type"] == "diet_plan_created"
    assert message.data["notificationId"] == str(result.notification_id)
    assert message.data["language"] == "en"
    assert message.data["planId"] == "7"
    assert message.data["planDetails"] == '{"planName": "Cut"}'
    assert message.data["hasAppLogo"] == "true"
    assert all(isinstance(value, str) for value in message.data.values())


def test_welcome_is_recorded_but_not_pushed(session, push_gateway, make_user):
    user = make_user(full_name="Sara", token="device-token-123")

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.WELCOME
    )

    assert result.status is DeliveryStatus.DEFERRED
    assert result.notification.priority is NotificationPriority.HIGH
    assert "Sara" in result.notification.message
    assert push_gateway.sent == []


def test_badge_is_pushed_immediately_when_token_exists(session, push_gateway, make_user):
    user = make_user(token="device-token-123")

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.BADGE_EARNED
    )

    assert result.status is DeliveryStatus.SENT
    assert result.notification.metadata["badgeType"] == "profile_completion"
    assert len(push_gateway.sent) == 1


def test_badge_uses_urdu_text_for_urdu_user(session, push_gateway, make_user):
    user = make_user(full_name="علی", language="ur")

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.BADGE_EARNED
    )

    title, _ = TRANSLATIONS["ur"][NotificationKind.BADGE_EARNED]
    assert result.notification.title == title
    assert "علی" in result.notification.message
    assert result.notification.language == "ur"


def test_region_variant_language_is_recorded_as_base_language(
    session, push_gateway, make_user
):
    user = make_user(language="ur-PK")

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.GYM_REMINDER
    )

    assert result.notification.metadata["language"] == "ur"


@pytest.mark.parametrize(
    "kind",
    [
        NotificationKind.DIET_REMINDER,
        NotificationKind.WORKOUT_REMINDER,
        NotificationKind.GYM_REMINDER,
        NotificationKind.STREAK_BROKEN_REMINDER,
    ],
)
def test_reminders_are_suppressed_when_push_disabled(
    session, push_gateway, make_user, kind
):
    user = make_user(push_enabled=False, token="device-token-123")

    result = NotificationDispatcher(session, push_gateway).dispatch(user.id, kind)

    assert result.status is DeliveryStatus.SUPPRESSED
    assert result.decision.reason_if_suppressed is SuppressionReason.PUSH_DISABLED
    assert result.notification is None
    assert _records(session, user.id) == []
    assert push_gateway.sent == []


def test_diet_reminder_suppressed_by_category(session, push_gateway, make_user):
    user = make_user(diet_reminders_enabled=False, token="device-token-123")

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.DIET_REMINDER
    )

    assert result.decision.reason_if_suppressed is SuppressionReason.CATEGORY_DISABLED
    assert _records(session, user.id) == []
    assert push_gateway.sent == []


def test_reminder_metadata_carries_navigation_hint(session, push_gateway, make_user):
    user = make_user(token="device-token-123")

    NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.STREAK_BROKEN_REMINDER
    )

    _, message = push_gateway.sent[0]
    assert message.data["navigateTo"] == "streak"
    assert message.data["actionType"] == "streak"


def test_general_accepts_custom_content(session, push_gateway, make_user):
    user = make_user()

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id,
        "general",
        {
            "title": "Maintenance",
            "message": "We will be back soon",
            "priority": "low",
            "metadata": {"source": "ops"},
        },
    )

    assert result.notification.title == "Maintenance"
    assert result.notification.message == "We will be back soon"
    assert result.notification.priority is NotificationPriority.LOW
    assert result.notification.metadata["source"] == "ops"


def test_general_without_content_uses_translation(session, push_gateway, make_user):
    user = make_user(language="ur")

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.GENERAL
    )

    assert result.notification.title == TRANSLATIONS["ur"][NotificationKind.GENERAL][0]


def test_unknown_user_raises_and_writes_nothing(session, push_gateway):
    with pytest.raises(UserNotFoundError):
        NotificationDispatcher(session, push_gateway).dispatch(
            999, NotificationKind.WELCOME
        )

    assert NotificationRepository(session).count_total(999) == 0


def test_unknown_kind_is_rejected(session, push_gateway, make_user):
    user = make_user()

    with pytest.raises(UnknownKindError):
        NotificationDispatcher(session, push_gateway).dispatch(user.id, "streak_extended")

    assert _records(session, user.id) == []


def test_push_failure_keeps_the_record(session, make_user, push_gateway):
    user = make_user(token="device-token-123")
    push_gateway.failing_ids = {str(number) for number in range(1, 10)}

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.BADGE_EARNED
    )

    assert result.status is DeliveryStatus.FAILED
    assert result.delivery.error_code == "gateway_unavailable"
    assert result.notification_id is not None
    assert len(_records(session, user.id)) == 1


def test_raising_gateway_is_reported_as_failed_delivery(session, make_user, push_gateway):
    user = make_user(token="device-token-123")
    push_gateway.raising_ids = {str(number) for number in range(1, 10)}

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.BADGE_EARNED
    )

    assert result.status is DeliveryStatus.FAILED
    assert result.delivery.error_code == "unknown_error"
    assert result.delivery.detail == "gateway connection reset"
    assert len(_records(session, user.id)) == 1


def test_welcome_record_survives_failing_gateway(session, make_user, push_gateway):
    user = make_user(token="device-token-123")
    push_gateway.failing_ids = {str(number) for number in range(1, 10)}

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.WELCOME
    )

    assert result.notification_id is not None
    assert result.status is DeliveryStatus.DEFERRED


def test_stored_text_is_not_affected_by_later_translation_changes(
    session, push_gateway, make_user, monkeypatch
):
    user = make_user()
    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.DIET_PLAN_CREATED
    )

    monkeypatch.setitem(
        TRANSLATIONS["en"], NotificationKind.DIET_PLAN_CREATED, ("Changed", "Changed")
    )

    stored = NotificationRepository(session).get_for_user(result.notification_id, user_id=user.id)
    assert stored.title == result.notification.title
    assert stored.title != "Changed"


def test_store_failure_propagates(session, push_gateway, make_user, monkeypatch):
    user = make_user(token="device-token-123")

    def _fail_commit():
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(session, "commit", _fail_commit)

    with pytest.raises(NotificationStoreError):
        NotificationDispatcher(session, push_gateway).dispatch(
            user.id, NotificationKind.BADGE_EARNED
        )
    assert push_gateway.sent == []


def test_records_expire_after_retention_period(session, push_gateway, make_user):
    user = make_user()

    result = NotificationDispatcher(session, push_gateway).dispatch(
        user.id, NotificationKind.GENERAL
    )

    stored = NotificationRepository(session).get_for_user(result.notification_id, user_id=user.id)
    assert (stored.expires_at - stored.created_at).days == 30
