"""Use case for changing the password of a signed-in user."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from primeform.domain.entities import User
from primeform.domain.exceptions import IncorrectPasswordError, UserNotFoundError
from primeform.infrastructure.repositories import UserRepository
from primeform.infrastructure.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def change_password(
    session: Session, *, user_id: int, current_password: str, new_password: str
) -> User:
    """Replace the password; tokens issued for the old one stop validating."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    if not verify_password(current_password, user.password):
        raise IncorrectPasswordError("Current password is incorrect")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if new_password == current_password:
        raise ValueError("New password must differ from the current one")

    updated = repository.update(replace(user, password=get_password_hash(new_password)))
    logger.info("Password changed for user %s", user_id)
    return updated
