"""Use case for creating or updating the fitness profile of a user."""

import logging
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from primeform.application.use_cases.notifications import NotificationDispatcher
from primeform.domain.entities import PROFILE_COMPLETION_BADGE, NotificationKind, UserProfile
from primeform.domain.exceptions import NotificationStoreError, UserNotFoundError
from primeform.infrastructure.push import PushGateway
from primeform.infrastructure.repositories import UserProfileRepository, UserRepository

logger = logging.getLogger(__name__)

MIN_AGE = 13
MAX_AGE = 120


def save_profile(
    session: Session,
    push_gateway: PushGateway,
    *,
    user_id: int,
    country: str,
    age: int,
    gender: str,
    height: str,
    current_weight: str,
    body_goal: str,
    target_weight: str | None = None,
    details: dict[str, Any] | None = None,
) -> UserProfile:
    """Store the profile; the first complete save earns the completion badge."""

    if UserRepository(session).get(user_id) is None:
        raise UserNotFoundError(user_id)
    if not MIN_AGE <= age <= MAX_AGE:
        raise ValueError(f"Age must be between {MIN_AGE} and {MAX_AGE}")

    repository = UserProfileRepository(session)
    existing = repository.get(user_id)
    badges = list(existing.badges) if existing else []
    earned_badge = PROFILE_COMPLETION_BADGE not in badges
    if earned_badge:
        badges.append(PROFILE_COMPLETION_BADGE)

    profile = UserProfile(
        user_id=user_id,
        country=country,
        age=age,
        gender=gender,
        height=height,
        current_weight=current_weight,
        body_goal=body_goal,
        target_weight=target_weight,
        details=dict(details or {}),
        badges=badges,
    )
    if existing:
        profile = replace(profile, created_at=existing.created_at)
    saved = repository.save(profile)

    if earned_badge:
        logger.info("User %s earned the %s badge", user_id, PROFILE_COMPLETION_BADGE)
        try:
            NotificationDispatcher(session, push_gateway).dispatch(
                user_id,
                NotificationKind.BADGE_EARNED,
                {"badge_type": PROFILE_COMPLETION_BADGE},
            )
        except NotificationStoreError:
            logger.warning("Badge notification for user %s was not stored", user_id)

    return saved
