"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from primeform.domain.entities import NotificationPreferences, User
from primeform.infrastructure.models import DeviceRegistrationModel, UserModel
from primeform.utils import storage_now


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.email == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        model.created_at = user.created_at or storage_now()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if model is None:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        model.updated_at = storage_now()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def record_login(self, user_id: int) -> None:
        model = self.session.get(UserModel, user_id)
        if model is None:
            return
        model.last_login = storage_now()
        self.session.add(model)
        self.session.commit()

    def list_ids_with_device_tokens(self) -> Sequence[int]:
        query = (
            self.session.query(UserModel.id)
            .join(DeviceRegistrationModel, DeviceRegistrationModel.user_id == UserModel.id)
            .filter(UserModel.is_active.is_(True))
            .order_by(UserModel.id)
        )
        return [user_id for (user_id,) in query.all()]

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            password=model.password,
            language=model.language,
            is_active=model.is_active,
            preferences=NotificationPreferences(
                push_enabled=model.push_enabled,
                diet_reminders_enabled=model.diet_reminders_enabled,
                workout_reminders_enabled=model.workout_reminders_enabled,
            ),
            last_login=model.last_login,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.full_name = user.full_name
        model.email = user.email.strip().lower()
        model.password = user.password
        model.language = user.language
        model.is_active = user.is_active
        model.push_enabled = user.preferences.push_enabled
        model.diet_reminders_enabled = user.preferences.diet_reminders_enabled
        model.workout_reminders_enabled = user.preferences.workout_reminders_enabled
        model.last_login = user.last_login


__all__ = ["UserRepository"]
