"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationKind(str, Enum):
    """Closed set of events a notification can describe."""

    WELCOME = "welcome"
    DIET_PLAN_CREATED = "diet_plan_created"
    WORKOUT_PLAN_CREATED = "workout_plan_created"
    GENERAL = "general"
    BADGE_EARNED = "badge_earned"
    DIET_REMINDER = "diet_reminder"
    WORKOUT_REMINDER = "workout_reminder"
    GYM_REMINDER = "gym_reminder"
    STREAK_BROKEN_REMINDER = "streak_broken_reminder"

    @property
    def is_reminder(self) -> bool:
        """Return ``True`` for ephemeral reminder kinds."""

        return self in REMINDER_KINDS


REMINDER_KINDS: frozenset[NotificationKind] = frozenset(
    {
        NotificationKind.DIET_REMINDER,
        NotificationKind.WORKOUT_REMINDER,
        NotificationKind.GYM_REMINDER,
        NotificationKind.STREAK_BROKEN_REMINDER,
    }
)


class NotificationPriority(str, Enum):
    """Relative importance of a notification."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    kind: NotificationKind
    title: str
    message: str
    priority: NotificationPriority = NotificationPriority.MEDIUM
    metadata: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    expires_at: datetime | None = None

    @property
    def language(self) -> str | None:
        """Language the title and message were rendered in."""

        value = self.metadata.get("language")
        return str(value) if value else None


@dataclass(frozen=True)
class NotificationStats:
    """Aggregated counters for the notifications of a user."""

    total: int
    unread: int
    by_kind: dict[str, int]

    @property
    def read(self) -> int:
        return self.total - self.unread


__all__ = [
    "Notification",
    "NotificationKind",
    "NotificationPriority",
    "NotificationStats",
    "REMINDER_KINDS",
]
