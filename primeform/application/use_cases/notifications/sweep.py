"""Replay unread notifications to a freshly registered device."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from primeform.config import Settings, get_settings
from primeform.domain.entities import SweepResult
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.repositories import (
    DeviceRegistrationRepository,
    NotificationRepository,
)

from .delivery import deliver_notification

logger = logging.getLogger(__name__)


class DeferredDeliverySweep:
    """Push the newest unread notifications of a user to their device.

    Records are sent newest first, one at a time, and are left unread. A
    failed send does not stop the remaining ones.
    """

    def __init__(
        self,
        session: Session,
        push_gateway: PushGateway,
        settings: Settings | None = None,
    ) -> None:
        self.push_gateway = push_gateway
        self.settings = settings or get_settings()
        self.devices = DeviceRegistrationRepository(session)
        self.notifications = NotificationRepository(session)

    def sweep(self, user_id: int) -> SweepResult:
        token = self.devices.get_token(user_id)
        if token is None:
            logger.info("No device token for user %s; nothing to sweep", user_id)
            return SweepResult(user_id=user_id)

        pending = self.notifications.list_unread_for_user(
            user_id, limit=self.settings.pending_notification_limit
        )
        if not pending:
            logger.info("No pending notifications for user %s", user_id)
            return SweepResult(user_id=user_id)

        deliveries = [
            deliver_notification(self.push_gateway, token, notification)
            for notification in pending
        ]
        result = SweepResult(user_id=user_id, deliveries=deliveries)
        logger.info(
            "Sent %s of %s pending notifications to user %s",
            result.sent,
            result.attempted,
            user_id,
        )
        return result


__all__ = ["DeferredDeliverySweep"]
