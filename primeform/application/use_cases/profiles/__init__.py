"""Use cases for user fitness profiles."""

from .get_profile import get_profile
from .save_profile import save_profile

__all__ = ["get_profile", "save_profile"]
