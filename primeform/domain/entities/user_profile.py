"""Domain entity holding the fitness profile of a user."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

PROFILE_COMPLETION_BADGE = "profile_completion"


@dataclass
class UserProfile:
    """Body metrics and goals captured during onboarding."""

    user_id: int
    country: str
    age: int
    gender: str
    height: str
    current_weight: str
    body_goal: str
    target_weight: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    badges: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_badge(self, badge: str) -> bool:
        return badge in self.badges


__all__ = ["PROFILE_COMPLETION_BADGE", "UserProfile"]
