"""Domain entity representing a diet or workout plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class PlanType(str, Enum):
    """Kinds of plans a user can follow."""

    DIET = "diet"
    WORKOUT = "workout"


@dataclass
class Plan:
    """Plan generated for a user; only one plan per type is active."""

    id: int | None
    user_id: int
    plan_type: PlanType
    name: str
    details: dict[str, Any] = field(default_factory=dict)
    is_active: bool = True
    created_at: datetime | None = None


__all__ = ["Plan", "PlanType"]
