"""Persistence helpers for notification entities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from primeform.domain.entities import (
    Notification,
    NotificationKind,
    NotificationPriority,
)
from primeform.config import get_settings
from primeform.domain.exceptions import NotificationStoreError
from primeform.infrastructure.models import NotificationModel
from primeform.utils import (
    add_days,
    from_storage,
    to_storage,
    utc_now,
)

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_user(self, notification_id: int, *, user_id: int) -> Notification | None:
        model = self._get_owned_model(notification_id, user_id=user_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: int,
        *,
        offset: int = 0,
        limit: int | None = 20,
        include_read: bool = True,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if not include_read:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_unread_for_user(
        self, user_id: int, *, limit: int | None = 50
    ) -> Sequence[Notification]:
        return self.list_for_user(user_id, limit=limit, include_read=False)

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        try:
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception(
                "Failed to store %s notification for user %s",
                notification.kind.value,
                notification.user_id,
            )
            raise NotificationStoreError(
                f"Could not store notification for user {notification.user_id}"
            ) from exc
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        model = self._get_owned_model(notification_id, user_id=user_id)
        if model is None:
            return None
        if not model.is_read:
            model.is_read = True
            model.updated_at = to_storage(utc_now())
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_many_as_read(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.updated_at: to_storage(
                        utc_now()
                    ),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.updated_at: to_storage(
                        utc_now()
                    ),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def delete(self, notification_id: int, *, user_id: int) -> bool:
        model = self._get_owned_model(notification_id, user_id=user_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    def delete_many(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        deleted = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
            )
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    def delete_expired(self, *, now: datetime) -> int:
        deleted = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.expires_at < to_storage(now))
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    def existing_ids_for_user(self, notification_ids: Iterable[int], *, user_id: int) -> set[int]:
        ids = list(notification_ids)
        if not ids:
            return set()
        query = self.session.query(NotificationModel.id).filter(
            NotificationModel.id.in_(ids),
            NotificationModel.user_id == user_id,
        )
        return {notification_id for (notification_id,) in query.all()}

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(func.count(NotificationModel.id))
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .scalar()
            or 0
        )

    def count_total(self, user_id: int) -> int:
        return (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .scalar()
            or 0
        )

    def count_by_kind(self, user_id: int) -> dict[str, int]:
        query = (
            self.session.query(NotificationModel.kind, func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .group_by(NotificationModel.kind)
        )
        return {kind: count for kind, count in query.all()}

    def _get_owned_model(self, notification_id: int, *, user_id: int) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.user_id = notification.user_id
        model.kind = notification.kind.value
        model.title = notification.title
        model.message = notification.message
        model.priority = notification.priority.value
        model.metadata_ = dict(notification.metadata or {})
        model.is_read = notification.is_read
        created_at = notification.created_at or utc_now()
        expires_at = notification.expires_at or add_days(
            created_at, get_settings().notification_retention_days
        )
        model.created_at = to_storage(created_at)
        model.expires_at = to_storage(expires_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            kind=NotificationKind(model.kind),
            title=model.title,
            message=model.message,
            priority=NotificationPriority(model.priority),
            metadata=dict(model.metadata_ or {}),
            is_read=model.is_read,
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
            expires_at=from_storage(model.expires_at),
        )


__all__ = ["NotificationRepository"]
