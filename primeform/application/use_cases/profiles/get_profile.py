"""Use case for retrieving the fitness profile of a user."""

from sqlalchemy.orm import Session

from primeform.domain.entities import UserProfile
from primeform.infrastructure.repositories import UserProfileRepository


def get_profile(session: Session, *, user_id: int) -> UserProfile:
    """Return the profile or raise ``LookupError`` when it was never saved."""

    profile = UserProfileRepository(session).get(user_id)
    if profile is None:
        raise LookupError("User profile not found")
    return profile
