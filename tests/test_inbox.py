"""Tests for listing, reading and deleting notifications."""

from datetime import timedelta

import pytest

from primeform.application.use_cases.notifications import (
    BulkAction,
    bulk_update_notifications,
    count_unread,
    delete_notification,
    get_notification_stats,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    purge_expired_notifications,
)
from primeform.domain.entities import Notification, NotificationKind
from primeform.domain.exceptions import NotificationNotFoundError
from primeform.infrastructure.repositories import NotificationRepository
from primeform.utils import utc_now


def test_list_is_paginated_newest_first(session, make_user, make_notification):
    user = make_user()
    for index in range(5):
        make_notification(user.id, title=f"n{index}", age_minutes=10 - index)

    first = list_notifications(session, user.id, page=1, limit=2)
    last = list_notifications(session, user.id, page=3, limit=2)

    assert [item.title for item in first.items] == ["n4", "n3"]
    assert first.has_more is True
    assert [item.title for item in last.items] == ["n0"]
    assert last.has_more is False


def test_list_can_exclude_read(session, make_user, make_notification):
    user = make_user()
    make_notification(user.id, title="read", is_read=True)
    make_notification(user.id, title="unread")

    page = list_notifications(session, user.id, include_read=False)

    assert [item.title for item in page.items] == ["unread"]


def test_unread_count_tracks_read_state(session, make_user, make_notification):
    user = make_user()
    other = make_user()
    notifications = [make_notification(user.id) for _ in range(4)]
    make_notification(other.id)

    assert count_unread(session, user.id) == 4

    mark_notification_read(session, user.id, notifications[0].id)
    assert count_unread(session, user.id) == 3

    assert mark_all_notifications_read(session, user.id) == 3
    assert count_unread(session, user.id) == 0
    assert count_unread(session, other.id) == 1


def test_mark_read_is_idempotent(session, make_user, make_notification):
    user = make_user()
    notification = make_notification(user.id)

    first = mark_notification_read(session, user.id, notification.id)
    second = mark_notification_read(session, user.id, notification.id)

    assert first.is_read is True
    assert second.is_read is True
    assert count_unread(session, user.id) == 0


def test_cannot_touch_another_users_notification(session, make_user, make_notification):
    owner = make_user()
    intruder = make_user()
    notification = make_notification(owner.id)

    with pytest.raises(NotificationNotFoundError):
        mark_notification_read(session, intruder.id, notification.id)
    with pytest.raises(NotificationNotFoundError):
        delete_notification(session, intruder.id, notification.id)

    assert count_unread(session, owner.id) == 1


def test_delete_notification(session, make_user, make_notification):
    user = make_user()
    notification = make_notification(user.id)

    delete_notification(session, user.id, notification.id)

    assert NotificationRepository(session).count_total(user.id) == 0
    with pytest.raises(NotificationNotFoundError):
        delete_notification(session, user.id, notification.id)


def test_bulk_mark_as_read(session, make_user, make_notification):
    user = make_user()
    notifications = [make_notification(user.id) for _ in range(3)]

    updated = bulk_update_notifications(
        session,
        user.id,
        action=BulkAction.MARK_AS_READ,
        notification_ids=[notifications[0].id, notifications[1].id, notifications[1].id],
    )

    assert updated == 2
    assert count_unread(session, user.id) == 1


def test_bulk_delete(session, make_user, make_notification):
    user = make_user()
    notifications = [make_notification(user.id) for _ in range(3)]

    deleted = bulk_update_notifications(
        session,
        user.id,
        action="delete",
        notification_ids=[notification.id for notification in notifications],
    )

    assert deleted == 3
    assert NotificationRepository(session).count_total(user.id) == 0


def test_bulk_with_foreign_id_changes_nothing(session, make_user, make_notification):
    user = make_user()
    other = make_user()
    mine = make_notification(user.id)
    theirs = make_notification(other.id)

    with pytest.raises(NotificationNotFoundError):
        bulk_update_notifications(
            session,
            user.id,
            action=BulkAction.DELETE,
            notification_ids=[mine.id, theirs.id],
        )

    assert NotificationRepository(session).count_total(user.id) == 1
    assert NotificationRepository(session).count_total(other.id) == 1


def test_bulk_requires_ids(session, make_user):
    user = make_user()

    with pytest.raises(ValueError):
        bulk_update_notifications(
            session, user.id, action=BulkAction.DELETE, notification_ids=[]
        )


def test_stats(session, make_user, make_notification):
    user = make_user()
    make_notification(user.id, kind=NotificationKind.WELCOME, is_read=True)
    make_notification(user.id, kind=NotificationKind.GYM_REMINDER)
    make_notification(user.id, kind=NotificationKind.GYM_REMINDER)

    stats = get_notification_stats(session, user.id)

    assert stats.total == 3
    assert stats.unread == 2
    assert stats.read == 1
    assert stats.by_kind == {"welcome": 1, "gym_reminder": 2}


def test_purge_removes_expired_regardless_of_read_state(
    session, make_user, make_notification
):
    user = make_user()
    make_notification(user.id, title="old-unread", age_minutes=31 * 24 * 60)
    make_notification(user.id, title="old-read", is_read=True, age_minutes=31 * 24 * 60)
    make_notification(user.id, title="fresh")

    deleted = purge_expired_notifications(session)

    assert deleted == 2
    titles = [item.title for item in list_notifications(session, user.id).items]
    assert titles == ["fresh"]


def test_purge_uses_given_time(session, make_user, make_notification):
    user = make_user()
    make_notification(user.id)

    assert purge_expired_notifications(session, now=utc_now()) == 0
    assert (
        purge_expired_notifications(session, now=utc_now() + timedelta(days=31))
        == 1
    )


def test_store_defaults_expiry_to_retention_period(session, make_user):
    user = make_user()
    created_at = utc_now()

    stored = NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=user.id,
            kind=NotificationKind.GENERAL,
            title="No expiry given",
            message="Body",
            created_at=created_at,
        )
    )

    assert stored.expires_at - stored.created_at == timedelta(days=30)
