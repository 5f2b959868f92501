"""Domain entity representing a user."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class NotificationPreferences:
    """Per-user switches that control which notifications are delivered."""

    push_enabled: bool = True
    diet_reminders_enabled: bool = True
    workout_reminders_enabled: bool = True


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    full_name: str
    email: str
    password: str
    language: str | None = None
    is_active: bool = True
    preferences: NotificationPreferences = field(default_factory=NotificationPreferences)
    last_login: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def language_or(self, default: str) -> str:
        """Return the user's language or ``default`` when it is unset."""

        language = (self.language or "").strip()
        return language or default
