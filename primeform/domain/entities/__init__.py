"""Domain entities exposed by the application."""

from .device_registration import DeviceRegistration
from .dispatch import (
    DeliveryStatus,
    DispatchDecision,
    DispatchResult,
    PushDeliveryReport,
    SuppressionReason,
    SweepResult,
)
from .notification import (
    REMINDER_KINDS,
    Notification,
    NotificationKind,
    NotificationPriority,
    NotificationStats,
)
from .plan import Plan, PlanType
from .user import NotificationPreferences, User
from .user_profile import PROFILE_COMPLETION_BADGE, UserProfile

__all__ = [
    "DeliveryStatus",
    "DeviceRegistration",
    "DispatchDecision",
    "DispatchResult",
    "Notification",
    "NotificationKind",
    "NotificationPreferences",
    "NotificationPriority",
    "NotificationStats",
    "Plan",
    "PlanType",
    "PROFILE_COMPLETION_BADGE",
    "PushDeliveryReport",
    "REMINDER_KINDS",
    "SuppressionReason",
    "SweepResult",
    "User",
    "UserProfile",
]
