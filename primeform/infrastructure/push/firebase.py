"""Firebase Cloud Messaging adapter for push delivery."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import firebase_admin
from firebase_admin import credentials, exceptions, messaging

from primeform.config import Settings

from .gateway import (
    ERROR_AUTHENTICATION,
    ERROR_INVALID_ARGUMENT,
    ERROR_INVALID_MESSAGE,
    ERROR_TIMEOUT,
    ERROR_TOKEN_NOT_REGISTERED,
    ERROR_UNAVAILABLE,
    ERROR_UNKNOWN,
    PushMessage,
    PushResult,
)

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "primeform-push"
ANDROID_CHANNEL_ID = "primeform-notifications"
ANDROID_ACCENT_COLOR = "#6366F1"

_ERROR_CODES_BY_STATUS: dict[str, str] = {
    "INVALID_ARGUMENT": ERROR_INVALID_ARGUMENT,
    "NOT_FOUND": ERROR_TOKEN_NOT_REGISTERED,
    "UNAUTHENTICATED": ERROR_AUTHENTICATION,
    "PERMISSION_DENIED": ERROR_AUTHENTICATION,
    "UNAVAILABLE": ERROR_UNAVAILABLE,
    "INTERNAL": ERROR_UNAVAILABLE,
    "RESOURCE_EXHAUSTED": ERROR_UNAVAILABLE,
    "DEADLINE_EXCEEDED": ERROR_TIMEOUT,
}


class FirebaseConfigurationError(RuntimeError):
    """Raised when the Firebase service account cannot be loaded."""


def load_service_account(settings: Settings) -> dict[str, Any]:
    """Return the service account mapping configured in ``settings``."""

    if settings.firebase_service_account_path:
        path = Path(settings.firebase_service_account_path).expanduser().resolve()
        if not path.is_file():
            raise FirebaseConfigurationError(f"Service account file not found at: {path}")
        raw = path.read_text(encoding="utf-8")
    elif settings.firebase_service_account_json:
        raw = settings.firebase_service_account_json
    else:
        raise FirebaseConfigurationError("Firebase service account not configured")

    try:
        service_account = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise FirebaseConfigurationError("Service account is not valid JSON") from exc

    missing = [
        key
        for key in ("project_id", "private_key", "client_email")
        if not service_account.get(key)
    ]
    if missing:
        raise FirebaseConfigurationError(
            "Invalid service account JSON: missing " + ", ".join(missing)
        )
    return service_account


class FirebasePushGateway:
    """Deliver push messages through the Firebase Admin SDK."""

    def __init__(self, app: firebase_admin.App) -> None:
        self._app = app

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirebasePushGateway":
        """Initialise (or reuse) the Firebase app described by ``settings``."""

        try:
            app = firebase_admin.get_app(FIREBASE_APP_NAME)
        except ValueError:
            service_account = load_service_account(settings)
            app = firebase_admin.initialize_app(
                credentials.Certificate(service_account),
                options={
                    "projectId": service_account["project_id"],
                    "httpTimeout": settings.push_timeout_seconds,
                },
                name=FIREBASE_APP_NAME,
            )
            logger.info(
                "Firebase push gateway initialised for project %s",
                service_account["project_id"],
            )
        return cls(app)

    def send(self, token: str, message: PushMessage) -> PushResult:
        try:
            message_id = messaging.send(self._build_message(token, message), app=self._app)
        except messaging.UnregisteredError as exc:
            logger.warning("Device token is no longer registered: %s", _mask(token))
            return PushResult.failed(ERROR_TOKEN_NOT_REGISTERED, str(exc))
        except exceptions.FirebaseError as exc:
            error_code = _ERROR_CODES_BY_STATUS.get(str(exc.code), ERROR_UNKNOWN)
            logger.error(
                "FCM request failed with status %s (%s) for token %s",
                exc.code,
                error_code,
                _mask(token),
            )
            return PushResult.failed(error_code, str(exc))
        except ValueError as exc:
            logger.error("FCM rejected the push message: %s", exc)
            return PushResult.failed(ERROR_INVALID_MESSAGE, str(exc))
        except Exception as exc:  # pragma: no cover - network failures depend on environment
            logger.exception("Unexpected error sending push notification: %s", exc)
            return PushResult.failed(ERROR_UNKNOWN, str(exc))

        logger.info("Push notification delivered with message id %s", message_id)
        return PushResult.sent(message_id)

    @staticmethod
    def _build_message(token: str, message: PushMessage) -> messaging.Message:
        return messaging.Message(
            token=token,
            notification=messaging.Notification(title=message.title, body=message.body),
            data=dict(message.data),
            android=messaging.AndroidConfig(
                priority="high",
                notification=messaging.AndroidNotification(
                    channel_id=ANDROID_CHANNEL_ID,
                    color=ANDROID_ACCENT_COLOR,
                    sound="default",
                    default_vibrate_timings=True,
                ),
            ),
            apns=messaging.APNSConfig(
                payload=messaging.APNSPayload(
                    aps=messaging.Aps(sound="default", badge=1, content_available=True)
                )
            ),
        )


def _mask(token: str) -> str:
    return f"{token[:20]}..." if len(token) > 20 else token


__all__ = [
    "FirebaseConfigurationError",
    "FirebasePushGateway",
    "load_service_account",
]
