"""Repository implementations for infrastructure layer."""

from .device_registration_repository import DeviceRegistrationRepository
from .notification_repository import NotificationRepository
from .plan_repository import PlanRepository
from .user_profile_repository import UserProfileRepository
from .user_repository import UserRepository

__all__ = [
    "DeviceRegistrationRepository",
    "NotificationRepository",
    "PlanRepository",
    "UserProfileRepository",
    "UserRepository",
]
