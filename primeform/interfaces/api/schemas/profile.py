"""User profile schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserProfileUpdate(BaseModel):
    country: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=13, le=120)
    gender: str = Field(..., min_length=1, max_length=50)
    height: str = Field(..., min_length=1, max_length=50)
    current_weight: str = Field(..., min_length=1, max_length=50)
    body_goal: str = Field(..., min_length=1, max_length=100)
    target_weight: str | None = Field(default=None, max_length=50)
    details: dict[str, Any] = Field(default_factory=dict)


class UserProfileRead(BaseModel):
    user_id: int
    country: str
    age: int
    gender: str
    height: str
    current_weight: str
    body_goal: str
    target_weight: str | None
    details: dict[str, Any]
    badges: list[str]
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
