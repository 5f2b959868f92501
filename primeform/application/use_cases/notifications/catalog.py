"""Static per-kind delivery profile for notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from primeform.domain.entities import NotificationKind, NotificationPriority
from primeform.domain.exceptions import UnknownKindError


@dataclass(frozen=True)
class KindProfile:
    """How a notification kind is prioritised, routed and delivered."""

    priority: NotificationPriority
    action_type: str | None = None
    navigate_to: str | None = None
    push_immediately: bool = True


KIND_PROFILES: dict[NotificationKind, KindProfile] = {
    # Welcome is recorded at signup but pushed only once a device registers.
    NotificationKind.WELCOME: KindProfile(
        NotificationPriority.HIGH, action_type="welcome", push_immediately=False
    ),
    NotificationKind.DIET_PLAN_CREATED: KindProfile(
        NotificationPriority.MEDIUM, action_type="diet_plan"
    ),
    NotificationKind.WORKOUT_PLAN_CREATED: KindProfile(
        NotificationPriority.MEDIUM, action_type="workout_plan"
    ),
    NotificationKind.GENERAL: KindProfile(NotificationPriority.MEDIUM),
    NotificationKind.BADGE_EARNED: KindProfile(
        NotificationPriority.HIGH, action_type="badge_earned"
    ),
    NotificationKind.DIET_REMINDER: KindProfile(
        NotificationPriority.MEDIUM, action_type="diet", navigate_to="diet"
    ),
    NotificationKind.WORKOUT_REMINDER: KindProfile(
        NotificationPriority.MEDIUM, action_type="workout", navigate_to="workout"
    ),
    NotificationKind.GYM_REMINDER: KindProfile(
        NotificationPriority.MEDIUM, action_type="gym", navigate_to="gym"
    ),
    NotificationKind.STREAK_BROKEN_REMINDER: KindProfile(
        NotificationPriority.MEDIUM, action_type="streak", navigate_to="streak"
    ),
}

_missing_profiles = set(NotificationKind) - set(KIND_PROFILES)
if _missing_profiles:  # pragma: no cover - guards future additions to the enum
    raise RuntimeError(
        "Missing delivery profile for kinds: "
        + ", ".join(sorted(kind.value for kind in _missing_profiles))
    )


def coerce_kind(kind: Any) -> NotificationKind:
    """Return ``kind`` as a :class:`NotificationKind` or raise ``UnknownKindError``."""

    if isinstance(kind, NotificationKind):
        return kind
    try:
        return NotificationKind(kind)
    except ValueError as exc:
        raise UnknownKindError(kind) from exc


def get_profile(kind: NotificationKind) -> KindProfile:
    return KIND_PROFILES[kind]


__all__ = ["KIND_PROFILES", "KindProfile", "coerce_kind", "get_profile"]
