"""Record application events as notifications and push them when possible."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from primeform.config import Settings, get_settings
from primeform.domain.entities import (
    PROFILE_COMPLETION_BADGE,
    DispatchResult,
    Notification,
    NotificationKind,
    NotificationPriority,
    User,
)
from primeform.domain.exceptions import UserNotFoundError
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.repositories import (
    DeviceRegistrationRepository,
    NotificationRepository,
    UserRepository,
)
from primeform.utils import add_days, utc_now

from .catalog import KindProfile, coerce_kind, get_profile
from .delivery import deliver_notification
from .localization import normalize_language, resolve
from .preferences import evaluate_preferences

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Turn an application event into a notification record and a push.

    Preferences are evaluated on every call. A suppressed event writes
    nothing. Any other event is always recorded, and pushed right away only
    when the user has a device token and the kind allows immediate delivery;
    otherwise the record waits for :class:`DeferredDeliverySweep`.
    """

    def __init__(
        self,
        session: Session,
        push_gateway: PushGateway,
        settings: Settings | None = None,
    ) -> None:
        self.session = session
        self.push_gateway = push_gateway
        self.settings = settings or get_settings()
        self.users = UserRepository(session)
        self.devices = DeviceRegistrationRepository(session)
        self.notifications = NotificationRepository(session)

    def dispatch(
        self,
        user_id: int,
        kind: NotificationKind | str,
        context: Mapping[str, Any] | None = None,
    ) -> DispatchResult:
        kind = coerce_kind(kind)
        context = dict(context or {})

        user = self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        token = self.devices.get_token(user_id)
        decision = evaluate_preferences(
            kind, user.preferences, has_device_token=token is not None
        )
        if decision.is_suppressed:
            logger.info(
                "Suppressed %s notification for user %s: %s",
                kind.value,
                user_id,
                decision.reason_if_suppressed.value,
            )
            return DispatchResult(user_id=user_id, kind=kind, decision=decision)

        notification = self.notifications.create(self._build_notification(user, kind, context))

        if not decision.should_push_now:
            logger.info(
                "Deferred push of %s notification %s for user %s",
                kind.value,
                notification.id,
                user_id,
            )
            return DispatchResult(
                user_id=user_id, kind=kind, decision=decision, notification=notification
            )

        delivery = deliver_notification(self.push_gateway, token, notification)
        return DispatchResult(
            user_id=user_id,
            kind=kind,
            decision=decision,
            notification=notification,
            delivery=delivery,
        )

    def _build_notification(
        self, user: User, kind: NotificationKind, context: dict[str, Any]
    ) -> Notification:
        profile = get_profile(kind)
        language = normalize_language(user.language_or(self.settings.default_language))
        content = resolve(kind, language, {"name": user.full_name})

        title = content.title
        message = content.message
        priority = profile.priority
        metadata = self._build_metadata(kind, profile, language, context)

        if kind is NotificationKind.GENERAL:
            title = context.get("title") or title
            message = context.get("message") or message
            if context.get("priority"):
                priority = NotificationPriority(context["priority"])

        now = utc_now()
        return Notification(
            id=None,
            user_id=user.id,
            kind=kind,
            title=title,
            message=message,
            priority=priority,
            metadata=metadata,
            is_read=False,
            created_at=now,
            expires_at=add_days(now, self.settings.notification_retention_days),
        )

    @staticmethod
    def _build_metadata(
        kind: NotificationKind,
        profile: KindProfile,
        language: str,
        context: Mapping[str, Any],
    ) -> dict[str, Any]:
        metadata: dict[str, Any] = {"hasAppLogo": True, "language": language}
        if profile.action_type:
            metadata["actionType"] = profile.action_type
        if profile.navigate_to:
            metadata["navigateTo"] = profile.navigate_to

        if kind in (NotificationKind.DIET_PLAN_CREATED, NotificationKind.WORKOUT_PLAN_CREATED):
            if context.get("plan_id") is not None:
                metadata["planId"] = context["plan_id"]
            metadata["planDetails"] = dict(context.get("plan_details") or {})
        elif kind is NotificationKind.BADGE_EARNED:
            metadata["badgeType"] = context.get("badge_type") or PROFILE_COMPLETION_BADGE
        elif kind is NotificationKind.GENERAL:
            metadata.update(context.get("metadata") or {})
        return metadata


__all__ = ["NotificationDispatcher"]
