"""Errors raised by the use cases and repositories."""

from __future__ import annotations


class UserNotFoundError(LookupError):
    """The referenced user does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class UnknownKindError(ValueError):
    """A caller asked for a notification kind outside the supported set."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unsupported notification kind: {kind!r}")
        self.kind = kind


class NotificationNotFoundError(LookupError):
    """The notification does not exist or belongs to another user."""

    def __init__(self, notification_id: int) -> None:
        super().__init__("Notification not found or unauthorized")
        self.notification_id = notification_id


class NotificationStoreError(RuntimeError):
    """Persisting a notification failed; the event was not recorded."""


class IncorrectPasswordError(ValueError):
    """The current password supplied for a password change is wrong."""


class EmailAlreadyRegisteredError(ValueError):
    """Signup attempted with an email that already has an account."""


__all__ = [
    "EmailAlreadyRegisteredError",
    "IncorrectPasswordError",
    "NotificationNotFoundError",
    "NotificationStoreError",
    "UnknownKindError",
    "UserNotFoundError",
]
