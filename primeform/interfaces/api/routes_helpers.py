"""Helper utilities shared across API route handlers."""

from primeform.domain.entities import DispatchResult, Notification, SweepResult, User
from primeform.infrastructure.security import create_access_token
from primeform.interfaces.api.dependencies import password_signature
from primeform.interfaces.api.schemas import (
    DispatchResultRead,
    NotificationRead,
    PushDeliveryRead,
    PushTokenRegistrationRead,
    Token,
)


def issue_token(user: User) -> Token:
    """Return a bearer token bound to the current password of ``user``."""

    access_token = create_access_token(
        data={"sub": user.email, "pwd_sig": password_signature(user)}
    )
    return Token(access_token=access_token, token_type="bearer")


def notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def dispatch_result_to_schema(result: DispatchResult) -> DispatchResultRead:
    reason = result.decision.reason_if_suppressed
    return DispatchResultRead(
        status=result.status,
        reason=reason.value if reason else None,
        notification=(
            notification_to_schema(result.notification) if result.notification else None
        ),
        error_code=result.delivery.error_code if result.delivery else None,
    )


def sweep_result_to_schema(result: SweepResult) -> PushTokenRegistrationRead:
    return PushTokenRegistrationRead(
        attempted=result.attempted,
        sent=result.sent,
        failed=result.failed,
        deliveries=[
            PushDeliveryRead(
                notification_id=report.notification_id,
                status=report.status.value,
                message_id=report.message_id,
                error_code=report.error_code,
            )
            for report in result.deliveries
        ],
    )
