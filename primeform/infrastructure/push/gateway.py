"""Contracts shared by every push delivery adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)

ERROR_TOKEN_NOT_REGISTERED = "token_not_registered"
ERROR_INVALID_MESSAGE = "invalid_message"
ERROR_INVALID_ARGUMENT = "invalid_argument"
ERROR_AUTHENTICATION = "authentication_error"
ERROR_UNAVAILABLE = "gateway_unavailable"
ERROR_TIMEOUT = "timeout"
ERROR_NOT_CONFIGURED = "gateway_not_configured"
ERROR_UNKNOWN = "unknown_error"

PERMANENT_TOKEN_ERRORS = frozenset({ERROR_TOKEN_NOT_REGISTERED})


@dataclass(frozen=True)
class PushMessage:
    """Rendered notification handed to a push gateway.

    Every value in ``data`` must already be a string; providers such as FCM
    reject nested structures and non-string scalars.
    """

    title: str
    body: str
    data: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key, value in self.data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    f"Push data must map strings to strings, got {key!r}: {type(value).__name__}"
                )


@dataclass(frozen=True)
class PushResult:
    """Outcome reported by a gateway for a single send."""

    success: bool
    message_id: str | None = None
    error_code: str | None = None
    detail: str | None = None

    @classmethod
    def sent(cls, message_id: str) -> "PushResult":
        return cls(success=True, message_id=message_id)

    @classmethod
    def failed(cls, error_code: str, detail: str | None = None) -> "PushResult":
        return cls(success=False, error_code=error_code, detail=detail)

    @property
    def token_invalid(self) -> bool:
        """Return ``True`` when the token will never accept deliveries again."""

        return self.error_code in PERMANENT_TOKEN_ERRORS


class PushGateway(Protocol):
    """Capability able to deliver a message to a device token."""

    def send(self, token: str, message: PushMessage) -> PushResult:
        """Deliver ``message`` to ``token`` and report the outcome without raising."""


class NullPushGateway:
    """Gateway used when no push provider is configured; every send fails."""

    def send(self, token: str, message: PushMessage) -> PushResult:
        logger.debug(
            "Push notifications disabled; dropping push token_prefix=%s", (token or "")[:8]
        )
        return PushResult.failed(ERROR_NOT_CONFIGURED, "Push gateway is not configured")


__all__ = [
    "ERROR_AUTHENTICATION",
    "ERROR_INVALID_ARGUMENT",
    "ERROR_INVALID_MESSAGE",
    "ERROR_NOT_CONFIGURED",
    "ERROR_TIMEOUT",
    "ERROR_TOKEN_NOT_REGISTERED",
    "ERROR_UNAVAILABLE",
    "ERROR_UNKNOWN",
    "NullPushGateway",
    "PushGateway",
    "PushMessage",
    "PushResult",
]
