"""Use cases for registering and clearing device push tokens."""

import logging

from sqlalchemy.orm import Session

from primeform.application.use_cases.notifications import DeferredDeliverySweep
from primeform.domain.entities import SweepResult
from primeform.domain.exceptions import UserNotFoundError
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.repositories import (
    DeviceRegistrationRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


def register_device_token(
    session: Session, push_gateway: PushGateway, *, user_id: int, token: str
) -> SweepResult:
    """Store ``token`` for the user and replay their pending notifications to it."""

    token = token.strip()
    if not token:
        raise ValueError("Push token is required")
    if UserRepository(session).get(user_id) is None:
        raise UserNotFoundError(user_id)

    registration = DeviceRegistrationRepository(session).register(user_id, token)
    logger.info("Registered device token %s for user %s", registration.masked_token, user_id)
    return DeferredDeliverySweep(session, push_gateway).sweep(user_id)


def clear_device_token(session: Session, *, user_id: int) -> bool:
    """Forget the device token of the user; return ``False`` if none was stored."""

    return DeviceRegistrationRepository(session).clear(user_id)
