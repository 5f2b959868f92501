"""Utility helpers for reusable functionality."""

from .datetime import add_days, from_storage, storage_now, to_storage, utc_now

__all__ = [
    "add_days",
    "from_storage",
    "storage_now",
    "to_storage",
    "utc_now",
]
