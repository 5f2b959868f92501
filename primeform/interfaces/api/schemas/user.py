"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class NotificationPreferencesRead(BaseModel):
    push_enabled: bool
    diet_reminders_enabled: bool
    workout_reminders_enabled: bool

    model_config = ConfigDict(from_attributes=True)


class UserRead(BaseModel):
    id: int
    full_name: str
    email: EmailStr
    language: str | None
    is_active: bool
    preferences: NotificationPreferencesRead
    last_login: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class UserSettingsUpdate(BaseModel):
    push_enabled: bool | None = None
    diet_reminders_enabled: bool | None = None
    workout_reminders_enabled: bool | None = None
    language: str | None = Field(default=None, min_length=2, max_length=10)

    model_config = ConfigDict(extra="forbid")


class PushTokenRegister(BaseModel):
    token: str = Field(..., min_length=1, max_length=4096, description="Device push token")


class PushDeliveryRead(BaseModel):
    notification_id: int | None
    status: str
    message_id: str | None = None
    error_code: str | None = None


class PushTokenRegistrationRead(BaseModel):
    """Outcome of replaying pending notifications to the new device."""

    attempted: int
    sent: int
    failed: int
    deliveries: list[PushDeliveryRead]
