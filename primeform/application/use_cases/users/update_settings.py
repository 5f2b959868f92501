"""Use case for updating notification preferences and language."""

from dataclasses import replace

from sqlalchemy.orm import Session

from primeform.domain.entities import User
from primeform.domain.exceptions import UserNotFoundError
from primeform.infrastructure.repositories import UserRepository

from .validators import ensure_supported_language


def update_settings(
    session: Session,
    *,
    user_id: int,
    push_enabled: bool | None = None,
    diet_reminders_enabled: bool | None = None,
    workout_reminders_enabled: bool | None = None,
    language: str | None = None,
) -> User:
    """Update the provided switches, leaving the others untouched."""

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise UserNotFoundError(user_id)

    preferences = current_user.preferences
    preferences = replace(
        preferences,
        push_enabled=push_enabled if push_enabled is not None else preferences.push_enabled,
        diet_reminders_enabled=(
            diet_reminders_enabled
            if diet_reminders_enabled is not None
            else preferences.diet_reminders_enabled
        ),
        workout_reminders_enabled=(
            workout_reminders_enabled
            if workout_reminders_enabled is not None
            else preferences.workout_reminders_enabled
        ),
    )

    updated_user = replace(
        current_user,
        preferences=preferences,
        language=(
            ensure_supported_language(language)
            if language is not None
            else current_user.language
        ),
    )
    return repository.update(updated_user)
