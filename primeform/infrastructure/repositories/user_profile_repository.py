"""Persistence helpers for user profiles."""

from __future__ import annotations

from sqlalchemy.orm import Session

from primeform.domain.entities import UserProfile
from primeform.infrastructure.models import UserProfileModel
from primeform.utils import from_storage, storage_now


class UserProfileRepository:
    """Load and store the single profile owned by each user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> UserProfile | None:
        model = self.session.get(UserProfileModel, user_id)
        return self._to_entity(model) if model else None

    def save(self, profile: UserProfile) -> UserProfile:
        model = self.session.get(UserProfileModel, profile.user_id)
        now = storage_now()
        if model is None:
            model = UserProfileModel(user_id=profile.user_id, created_at=now)
        else:
            model.updated_at = now
        model.country = profile.country
        model.age = profile.age
        model.gender = profile.gender
        model.height = profile.height
        model.current_weight = profile.current_weight
        model.target_weight = profile.target_weight
        model.body_goal = profile.body_goal
        model.details = dict(profile.details or {})
        model.badges = list(profile.badges)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserProfileModel) -> UserProfile:
        return UserProfile(
            user_id=model.user_id,
            country=model.country,
            age=model.age,
            gender=model.gender,
            height=model.height,
            current_weight=model.current_weight,
            target_weight=model.target_weight,
            body_goal=model.body_goal,
            details=dict(model.details or {}),
            badges=list(model.badges or []),
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
        )


__all__ = ["UserProfileRepository"]
