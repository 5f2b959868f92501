"""Push notification delivery adapters."""

from __future__ import annotations

import logging

from primeform.config import Settings, get_settings

from .gateway import NullPushGateway, PushGateway, PushMessage, PushResult

logger = logging.getLogger(__name__)


def build_push_gateway(settings: Settings | None = None) -> PushGateway:
    """Return the gateway matching the configured push credentials."""

    settings = settings or get_settings()
    if not settings.push_configured:
        logger.warning("Firebase credentials not configured; push notifications are disabled")
        return NullPushGateway()

    from .firebase import FirebaseConfigurationError, FirebasePushGateway

    try:
        return FirebasePushGateway.from_settings(settings)
    except (FirebaseConfigurationError, ValueError) as exc:
        logger.error("Could not initialise Firebase push gateway: %s", exc)
        return NullPushGateway()


__all__ = [
    "NullPushGateway",
    "PushGateway",
    "PushMessage",
    "PushResult",
    "build_push_gateway",
]
