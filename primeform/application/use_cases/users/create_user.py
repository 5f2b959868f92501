"""Use case for registering new users."""

import logging

from sqlalchemy.orm import Session

from primeform.application.use_cases.notifications import NotificationDispatcher
from primeform.domain.entities import NotificationKind, User
from primeform.domain.exceptions import EmailAlreadyRegisteredError, NotificationStoreError
from primeform.infrastructure.email import send_welcome_email
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.repositories import UserRepository
from primeform.infrastructure.security import get_password_hash
from primeform.utils import storage_now

from .validators import ensure_supported_language, normalize_email

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    push_gateway: PushGateway,
    *,
    full_name: str,
    email: str,
    password: str,
    language: str | None = None,
) -> User:
    """Create a new user, greet them by email and record the welcome notification."""

    repository = UserRepository(session)
    email = normalize_email(email)
    if repository.get_by_email(email):
        raise EmailAlreadyRegisteredError("Email is already registered")

    user = repository.create(
        User(
            id=None,
            full_name=full_name.strip(),
            email=email,
            password=get_password_hash(password),
            language=ensure_supported_language(language) if language else None,
            created_at=storage_now(),
        )
    )
    logger.info("Registered user %s", user.id)

    if not send_welcome_email(user.email, user.full_name):
        logger.warning("Welcome email could not be sent to user %s", user.id)

    try:
        NotificationDispatcher(session, push_gateway).dispatch(user.id, NotificationKind.WELCOME)
    except NotificationStoreError:
        logger.warning("Welcome notification for user %s was not stored", user.id)

    return user
