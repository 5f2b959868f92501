"""Use cases for the daily reminder batch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from primeform.domain.entities import DeliveryStatus, NotificationKind
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.repositories import UserRepository

from .send_reminder import SKIPPED, ReminderOutcome, send_reminder

logger = logging.getLogger(__name__)

DAILY_REMINDER_KINDS: tuple[NotificationKind, ...] = (
    NotificationKind.DIET_REMINDER,
    NotificationKind.WORKOUT_REMINDER,
    NotificationKind.GYM_REMINDER,
)


@dataclass
class DailyReminderSummary:
    """Totals collected while sending reminders to every registered device."""

    users: int = 0
    outcomes: list[ReminderOutcome] = field(default_factory=list)
    failed_users: dict[int, str] = field(default_factory=dict)

    def _count(self, status: str) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def sent(self) -> int:
        return self._count(DeliveryStatus.SENT.value)

    @property
    def failed(self) -> int:
        return self._count(DeliveryStatus.FAILED.value)

    @property
    def suppressed(self) -> int:
        return self._count(DeliveryStatus.SUPPRESSED.value)

    @property
    def skipped(self) -> int:
        return self._count(SKIPPED)


def send_daily_reminders(
    session: Session, push_gateway: PushGateway, *, user_id: int
) -> list[ReminderOutcome]:
    """Send the diet, workout and gym reminders to one user."""

    return [
        send_reminder(session, push_gateway, user_id=user_id, kind=kind)
        for kind in DAILY_REMINDER_KINDS
    ]


def send_daily_reminders_to_all_users(
    session: Session, push_gateway: PushGateway
) -> DailyReminderSummary:
    """Send the daily reminders to every active user with a device token."""

    summary = DailyReminderSummary()
    user_ids = UserRepository(session).list_ids_with_device_tokens()
    logger.info("Sending daily reminders to %s users", len(user_ids))

    for user_id in user_ids:
        summary.users += 1
        try:
            summary.outcomes.extend(
                send_daily_reminders(session, push_gateway, user_id=user_id)
            )
        except Exception as exc:
            session.rollback()
            logger.exception("Daily reminders failed for user %s", user_id)
            summary.failed_users[user_id] = str(exc)

    logger.info(
        "Daily reminders finished: users=%s sent=%s failed=%s suppressed=%s skipped=%s",
        summary.users,
        summary.sent,
        summary.failed,
        summary.suppressed,
        summary.skipped,
    )
    return summary


__all__ = [
    "DAILY_REMINDER_KINDS",
    "DailyReminderSummary",
    "send_daily_reminders",
    "send_daily_reminders_to_all_users",
]
