"""Reminder schemas."""

from pydantic import BaseModel, ConfigDict

from primeform.domain.entities import NotificationKind


class ReminderOutcomeRead(BaseModel):
    user_id: int
    kind: NotificationKind
    status: str
    reason: str | None = None
    notification_id: int | None = None
    error_code: str | None = None

    model_config = ConfigDict(from_attributes=True)


class DailyReminderSummaryRead(BaseModel):
    users: int
    sent: int
    failed: int
    suppressed: int
    skipped: int
    failed_users: dict[int, str]
