"""Use cases backing the notification inbox of a user."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sqlalchemy.orm import Session

from primeform.domain.entities import Notification, NotificationStats
from primeform.domain.exceptions import NotificationNotFoundError
from primeform.infrastructure.repositories import NotificationRepository
from primeform.utils import utc_now

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class BulkAction(str, Enum):
    """Operations accepted by :func:`bulk_update_notifications`."""

    MARK_AS_READ = "mark_as_read"
    DELETE = "delete"


@dataclass(frozen=True)
class NotificationPage:
    """A slice of a user's notifications, newest first."""

    items: list[Notification]
    page: int
    limit: int
    has_more: bool


def list_notifications(
    session: Session,
    user_id: int,
    *,
    page: int = 1,
    limit: int = 20,
    include_read: bool = True,
) -> NotificationPage:
    """Return one page of notifications for ``user_id``."""

    page = max(page, 1)
    limit = min(max(limit, 1), MAX_PAGE_SIZE)
    repository = NotificationRepository(session)
    # One extra row tells whether another page exists.
    rows = list(
        repository.list_for_user(
            user_id,
            offset=(page - 1) * limit,
            limit=limit + 1,
            include_read=include_read,
        )
    )
    return NotificationPage(
        items=rows[:limit], page=page, limit=limit, has_more=len(rows) > limit
    )


def count_unread(session: Session, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)


def mark_notification_read(session: Session, user_id: int, notification_id: int) -> Notification:
    """Mark a notification as read, raising when it is not owned by the user."""

    notification = NotificationRepository(session).mark_as_read(
        notification_id, user_id=user_id
    )
    if notification is None:
        raise NotificationNotFoundError(notification_id)
    return notification


def mark_all_notifications_read(session: Session, user_id: int) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


def delete_notification(session: Session, user_id: int, notification_id: int) -> None:
    """Delete a notification owned by ``user_id``."""

    if not NotificationRepository(session).delete(notification_id, user_id=user_id):
        raise NotificationNotFoundError(notification_id)


def bulk_update_notifications(
    session: Session,
    user_id: int,
    *,
    action: BulkAction | str,
    notification_ids: Sequence[int],
) -> int:
    """Apply ``action`` to every id, or to none when any id is not the user's."""

    action = BulkAction(action)
    ids = list(dict.fromkeys(notification_ids))
    if not ids:
        raise ValueError("At least one notification id is required")

    repository = NotificationRepository(session)
    owned = repository.existing_ids_for_user(ids, user_id=user_id)
    missing = [notification_id for notification_id in ids if notification_id not in owned]
    if missing:
        raise NotificationNotFoundError(missing[0])

    if action is BulkAction.MARK_AS_READ:
        return repository.mark_many_as_read(ids, user_id=user_id)
    return repository.delete_many(ids, user_id=user_id)


def get_notification_stats(session: Session, user_id: int) -> NotificationStats:
    repository = NotificationRepository(session)
    return NotificationStats(
        total=repository.count_total(user_id),
        unread=repository.count_unread(user_id),
        by_kind=repository.count_by_kind(user_id),
    )


def purge_expired_notifications(session: Session, *, now: datetime | None = None) -> int:
    """Delete every notification whose retention period has elapsed."""

    deleted = NotificationRepository(session).delete_expired(now=now or utc_now())
    logger.info("Purged %s expired notifications", deleted)
    return deleted


__all__ = [
    "BulkAction",
    "NotificationPage",
    "bulk_update_notifications",
    "count_unread",
    "delete_notification",
    "get_notification_stats",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "purge_expired_notifications",
]
