"""Notification dispatch, delivery and inbox use cases."""

from .catalog import KIND_PROFILES, KindProfile, coerce_kind
from .dispatcher import NotificationDispatcher
from .inbox import (
    BulkAction,
    NotificationPage,
    bulk_update_notifications,
    count_unread,
    delete_notification,
    get_notification_stats,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    purge_expired_notifications,
)
from .localization import LocalizedContent, normalize_language, resolve
from .preferences import evaluate_preferences
from .sweep import DeferredDeliverySweep

__all__ = [
    "BulkAction",
    "DeferredDeliverySweep",
    "KIND_PROFILES",
    "KindProfile",
    "LocalizedContent",
    "NotificationDispatcher",
    "NotificationPage",
    "bulk_update_notifications",
    "coerce_kind",
    "count_unread",
    "delete_notification",
    "evaluate_preferences",
    "get_notification_stats",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "normalize_language",
    "purge_expired_notifications",
    "resolve",
]
