"""Value objects describing the outcome of notification dispatch and sweeps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .notification import Notification, NotificationKind


class SuppressionReason(str, Enum):
    """Why a notification was dropped before a record was created."""

    PUSH_DISABLED = "push_disabled"
    CATEGORY_DISABLED = "category_disabled"


class DeliveryStatus(str, Enum):
    """Terminal outcome of a single dispatch or re-delivery."""

    SENT = "sent"
    FAILED = "failed"
    DEFERRED = "deferred"
    SUPPRESSED = "suppressed"


@dataclass(frozen=True)
class DispatchDecision:
    """Result of evaluating preferences for one kind and one user."""

    should_create_record: bool
    should_push_now: bool
    reason_if_suppressed: SuppressionReason | None = None

    @classmethod
    def suppressed(cls, reason: SuppressionReason) -> "DispatchDecision":
        return cls(
            should_create_record=False,
            should_push_now=False,
            reason_if_suppressed=reason,
        )

    @property
    def is_suppressed(self) -> bool:
        return self.reason_if_suppressed is not None


@dataclass(frozen=True)
class PushDeliveryReport:
    """Structured result of a push attempt for a stored notification."""

    notification_id: int | None
    status: DeliveryStatus
    message_id: str | None = None
    error_code: str | None = None
    detail: str | None = None


@dataclass(frozen=True)
class DispatchResult:
    """Everything a caller needs to know about a dispatched event."""

    user_id: int
    kind: NotificationKind
    decision: DispatchDecision
    notification: Notification | None = None
    delivery: PushDeliveryReport | None = None

    @property
    def status(self) -> DeliveryStatus:
        if self.decision.is_suppressed or self.notification is None:
            return DeliveryStatus.SUPPRESSED
        if self.delivery is None:
            return DeliveryStatus.DEFERRED
        return self.delivery.status

    @property
    def notification_id(self) -> int | None:
        return self.notification.id if self.notification else None


@dataclass(frozen=True)
class SweepResult:
    """Deliveries attempted while flushing unread notifications to a device."""

    user_id: int
    deliveries: list[PushDeliveryReport] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.deliveries)

    @property
    def sent(self) -> int:
        return sum(1 for report in self.deliveries if report.status is DeliveryStatus.SENT)

    @property
    def failed(self) -> int:
        return self.attempted - self.sent


__all__ = [
    "DeliveryStatus",
    "DispatchDecision",
    "DispatchResult",
    "PushDeliveryReport",
    "SuppressionReason",
    "SweepResult",
]
