"""Plan schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from primeform.domain.entities import PlanType


class PlanCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    details: dict[str, Any] = Field(default_factory=dict)


class PlanRead(BaseModel):
    id: int
    user_id: int
    plan_type: PlanType
    name: str
    details: dict[str, Any]
    is_active: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
