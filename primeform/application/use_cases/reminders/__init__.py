"""Use cases for reminder notifications."""

from .send_daily_reminders import (
    DAILY_REMINDER_KINDS,
    DailyReminderSummary,
    send_daily_reminders,
    send_daily_reminders_to_all_users,
)
from .send_reminder import NO_ACTIVE_PLAN, SKIPPED, ReminderOutcome, send_reminder

__all__ = [
    "DAILY_REMINDER_KINDS",
    "DailyReminderSummary",
    "NO_ACTIVE_PLAN",
    "ReminderOutcome",
    "SKIPPED",
    "send_daily_reminders",
    "send_daily_reminders_to_all_users",
    "send_reminder",
]
