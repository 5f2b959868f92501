from .auth import PasswordChange, SignupRequest, Token
from .notification import (
    AffectedCountRead,
    DispatchResultRead,
    NotificationBulkRequest,
    NotificationPageRead,
    NotificationRead,
    NotificationStatsRead,
    NotificationTestRequest,
    UnreadCountRead,
)
from .plan import PlanCreate, PlanRead
from .profile import UserProfileRead, UserProfileUpdate
from .reminder import DailyReminderSummaryRead, ReminderOutcomeRead
from .user import (
    NotificationPreferencesRead,
    PushDeliveryRead,
    PushTokenRegister,
    PushTokenRegistrationRead,
    UserRead,
    UserSettingsUpdate,
)

__all__ = [
    "AffectedCountRead",
    "DailyReminderSummaryRead",
    "DispatchResultRead",
    "NotificationBulkRequest",
    "NotificationPageRead",
    "NotificationPreferencesRead",
    "NotificationRead",
    "NotificationStatsRead",
    "NotificationTestRequest",
    "PasswordChange",
    "PlanCreate",
    "PlanRead",
    "PushDeliveryRead",
    "PushTokenRegister",
    "PushTokenRegistrationRead",
    "ReminderOutcomeRead",
    "SignupRequest",
    "Token",
    "UnreadCountRead",
    "UserProfileRead",
    "UserProfileUpdate",
    "UserRead",
    "UserSettingsUpdate",
]
