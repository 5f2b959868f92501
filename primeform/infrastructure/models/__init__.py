"""ORM models used by the application infrastructure."""

from .user import UserModel
from .device_registration import DeviceRegistrationModel
from .notification import NotificationModel
from .plan import PlanModel
from .user_profile import UserProfileModel

__all__ = [
    "DeviceRegistrationModel",
    "NotificationModel",
    "PlanModel",
    "UserModel",
    "UserProfileModel",
]
