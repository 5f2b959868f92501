"""Use case for registering the last login of a user."""

from sqlalchemy.orm import Session

from primeform.infrastructure.repositories import UserRepository


def record_login(session: Session, user_id: int) -> None:
    """Persist the last login timestamp for the given user."""

    UserRepository(session).record_login(user_id)
