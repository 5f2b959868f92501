"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from primeform.application.use_cases.notifications import BulkAction
from primeform.domain.entities import DeliveryStatus, NotificationKind, NotificationPriority


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    kind: NotificationKind
    title: str
    message: str
    priority: NotificationPriority
    metadata: dict[str, Any] = Field(default_factory=dict)
    is_read: bool
    created_at: datetime
    updated_at: datetime | None = None
    expires_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class NotificationPageRead(BaseModel):
    items: list[NotificationRead]
    page: int
    limit: int
    has_more: bool
    unread_count: int


class UnreadCountRead(BaseModel):
    unread_count: int


class AffectedCountRead(BaseModel):
    count: int


class NotificationStatsRead(BaseModel):
    total: int
    unread: int
    read: int
    by_kind: dict[str, int]


class NotificationBulkRequest(BaseModel):
    """Payload used to mark as read or delete a batch of notifications."""

    action: BulkAction
    ids: list[int] = Field(..., min_length=1, description="Notification identifiers")


class NotificationTestRequest(BaseModel):
    """Payload accepted by the development-only test endpoint."""

    kind: NotificationKind = NotificationKind.GENERAL
    title: str | None = Field(default=None, max_length=200)
    message: str | None = Field(default=None, max_length=1000)
    priority: NotificationPriority | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class DispatchResultRead(BaseModel):
    status: DeliveryStatus
    reason: str | None = None
    notification: NotificationRead | None = None
    error_code: str | None = None
