"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .change_password import change_password
from .create_user import create_user
from .device_tokens import clear_device_token, register_device_token
from .get_user import get_user
from .record_login import record_login
from .update_settings import update_settings

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "change_password",
    "clear_device_token",
    "create_user",
    "get_user",
    "record_login",
    "register_device_token",
    "update_settings",
]
