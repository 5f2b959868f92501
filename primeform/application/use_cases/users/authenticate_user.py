"""Use case for authenticating a user."""

from enum import Enum, auto

from sqlalchemy.orm import Session

from primeform.infrastructure.repositories import UserRepository
from primeform.infrastructure.security import verify_password

from .validators import normalize_email


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()


def authenticate_user(session: Session, email: str, password: str):
    """Return the authentication result along with the user when possible."""

    try:
        normalized = normalize_email(email)
    except ValueError:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    user = UserRepository(session).get_by_email(normalized)

    if not user:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not verify_password(password, user.password):
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not user.is_active:
        return user, AuthenticationStatus.INACTIVE

    return user, AuthenticationStatus.SUCCESS
