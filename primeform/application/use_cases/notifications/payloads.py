"""Helpers that turn stored notifications into push messages."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from primeform.domain.entities import Notification
from primeform.infrastructure.push import PushMessage

from .localization import DEFAULT_LANGUAGE


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, default=str, ensure_ascii=False, sort_keys=True)


def build_push_data(
    *,
    kind: str,
    notification_id: int | None,
    metadata: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Return a flat string map describing a notification for the device."""

    data = {
        str(key): _stringify(value)
        for key, value in (metadata or {}).items()
        if value is not None
    }
    data["type"] = kind
    data["language"] = data.get("language") or DEFAULT_LANGUAGE
    if notification_id is not None:
        data["notificationId"] = str(notification_id)
    return data


def build_push_message(notification: Notification) -> PushMessage:
    """Build the push message for ``notification`` from its stored content."""

    return PushMessage(
        title=notification.title,
        body=notification.message,
        data=build_push_data(
            kind=notification.kind.value,
            notification_id=notification.id,
            metadata=notification.metadata,
        ),
    )


__all__ = ["build_push_data", "build_push_message"]
