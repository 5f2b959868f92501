"""Push a stored notification to a device and report the outcome."""

from __future__ import annotations

import logging

from primeform.domain.entities import DeliveryStatus, Notification, PushDeliveryReport
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.push.gateway import ERROR_UNKNOWN

from .payloads import build_push_message

logger = logging.getLogger(__name__)


def deliver_notification(
    push_gateway: PushGateway, token: str, notification: Notification
) -> PushDeliveryReport:
    """Send ``notification`` to ``token`` using its stored title and message."""

    try:
        result = push_gateway.send(token, build_push_message(notification))
    except Exception as exc:
        logger.exception(
            "Push gateway raised for notification %s of user %s",
            notification.id,
            notification.user_id,
        )
        return PushDeliveryReport(
            notification_id=notification.id,
            status=DeliveryStatus.FAILED,
            error_code=ERROR_UNKNOWN,
            detail=str(exc),
        )

    if result.success:
        return PushDeliveryReport(
            notification_id=notification.id,
            status=DeliveryStatus.SENT,
            message_id=result.message_id,
        )

    if result.token_invalid:
        logger.warning(
            "Device token for user %s is no longer valid (%s)",
            notification.user_id,
            result.error_code,
        )
    else:
        logger.warning(
            "Push delivery failed for notification %s of user %s: %s",
            notification.id,
            notification.user_id,
            result.error_code,
        )
    return PushDeliveryReport(
        notification_id=notification.id,
        status=DeliveryStatus.FAILED,
        error_code=result.error_code,
        detail=result.detail,
    )


__all__ = ["deliver_notification"]
