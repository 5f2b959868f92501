"""Use case for sending a single reminder to a user."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from primeform.application.use_cases.notifications import NotificationDispatcher, coerce_kind
from primeform.domain.entities import DispatchResult, NotificationKind, PlanType
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.repositories import PlanRepository

logger = logging.getLogger(__name__)

SKIPPED = "skipped"
NO_ACTIVE_PLAN = "no_active_plan"

REQUIRED_PLANS: dict[NotificationKind, PlanType] = {
    NotificationKind.DIET_REMINDER: PlanType.DIET,
    NotificationKind.WORKOUT_REMINDER: PlanType.WORKOUT,
}


@dataclass(frozen=True)
class ReminderOutcome:
    """What happened to one reminder for one user."""

    user_id: int
    kind: NotificationKind
    status: str
    reason: str | None = None
    notification_id: int | None = None
    error_code: str | None = None

    @classmethod
    def from_dispatch(cls, result: DispatchResult) -> "ReminderOutcome":
        reason = result.decision.reason_if_suppressed
        return cls(
            user_id=result.user_id,
            kind=result.kind,
            status=result.status.value,
            reason=reason.value if reason else None,
            notification_id=result.notification_id,
            error_code=result.delivery.error_code if result.delivery else None,
        )


def send_reminder(
    session: Session,
    push_gateway: PushGateway,
    *,
    user_id: int,
    kind: NotificationKind | str,
) -> ReminderOutcome:
    """Dispatch ``kind`` unless the user has no plan for it to remind about."""

    kind = coerce_kind(kind)
    if not kind.is_reminder:
        raise ValueError(f"{kind.value} is not a reminder")

    plan_type = REQUIRED_PLANS.get(kind)
    if plan_type is not None and PlanRepository(session).get_active(user_id, plan_type) is None:
        logger.info(
            "No active %s plan for user %s, skipping %s", plan_type.value, user_id, kind.value
        )
        return ReminderOutcome(
            user_id=user_id, kind=kind, status=SKIPPED, reason=NO_ACTIVE_PLAN
        )

    result = NotificationDispatcher(session, push_gateway).dispatch(user_id, kind)
    return ReminderOutcome.from_dispatch(result)


__all__ = ["NO_ACTIVE_PLAN", "REQUIRED_PLANS", "ReminderOutcome", "SKIPPED", "send_reminder"]
