"""Endpoints that trigger reminder notifications."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from primeform.application.use_cases.reminders import (
    ReminderOutcome,
    send_daily_reminders_to_all_users,
    send_reminder,
)
from primeform.domain.entities import REMINDER_KINDS, NotificationKind, User
from primeform.infrastructure.database import get_db
from primeform.infrastructure.push import PushGateway
from primeform.interfaces.api.dependencies import (
    get_current_active_user,
    get_push_gateway,
    require_cron_key,
)
from primeform.interfaces.api.schemas import DailyReminderSummaryRead, ReminderOutcomeRead

router = APIRouter(prefix="/reminders", tags=["reminders"])

_REMINDERS_BY_SLUG: dict[str, NotificationKind] = {
    kind.value.removesuffix("_reminder"): kind for kind in REMINDER_KINDS
}


def _outcome_to_schema(outcome: ReminderOutcome) -> ReminderOutcomeRead:
    return ReminderOutcomeRead.model_validate(outcome)


@router.post(
    "/send-daily",
    response_model=DailyReminderSummaryRead,
    dependencies=[Depends(require_cron_key)],
)
def send_daily(
    db: Session = Depends(get_db),
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> DailyReminderSummaryRead:
    """Send the daily reminders to every user with a registered device."""

    summary = send_daily_reminders_to_all_users(db, push_gateway)
    return DailyReminderSummaryRead(
        users=summary.users,
        sent=summary.sent,
        failed=summary.failed,
        suppressed=summary.suppressed,
        skipped=summary.skipped,
        failed_users=summary.failed_users,
    )


@router.post("/{reminder}/me", response_model=ReminderOutcomeRead)
def send_reminder_to_me(
    reminder: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    push_gateway: PushGateway = Depends(get_push_gateway),
) -> ReminderOutcomeRead:
    """Send one reminder (``diet``, ``workout``, ``gym`` or ``streak_broken``) now."""

    kind = _REMINDERS_BY_SLUG.get(reminder)
    if kind is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                f"Unknown reminder '{reminder}'. "
                f"Expected one of: {', '.join(sorted(_REMINDERS_BY_SLUG))}"
            ),
        )
    outcome = send_reminder(db, push_gateway, user_id=current_user.id, kind=kind)
    return _outcome_to_schema(outcome)
