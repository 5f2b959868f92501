"""Persistence helpers for device push tokens."""

from __future__ import annotations

from sqlalchemy.orm import Session

from primeform.domain.entities import DeviceRegistration
from primeform.infrastructure.models import DeviceRegistrationModel
from primeform.utils import from_storage, storage_now


class DeviceRegistrationRepository:
    """Store at most one push token per user; the latest write wins."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> DeviceRegistration | None:
        model = self.session.get(DeviceRegistrationModel, user_id)
        return self._to_entity(model) if model else None

    def get_token(self, user_id: int) -> str | None:
        registration = self.get(user_id)
        return registration.token if registration else None

    def register(self, user_id: int, token: str) -> DeviceRegistration:
        model = self.session.get(DeviceRegistrationModel, user_id)
        if model is None:
            model = DeviceRegistrationModel(user_id=user_id)
        model.token = token
        model.registered_at = storage_now()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def clear(self, user_id: int) -> bool:
        model = self.session.get(DeviceRegistrationModel, user_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _to_entity(model: DeviceRegistrationModel) -> DeviceRegistration:
        return DeviceRegistration(
            user_id=model.user_id,
            token=model.token,
            registered_at=from_storage(model.registered_at),
        )


__all__ = ["DeviceRegistrationRepository"]
