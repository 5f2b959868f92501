"""Timestamp helpers.

Every timestamp is handled as an aware UTC ``datetime`` inside the
application. SQLite ``DATETIME`` columns drop the offset, so values are
written as naive UTC and marked as UTC again when read back.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def storage_now() -> datetime:
    """Return the current UTC time in the naive form stored in the database."""

    return utc_now().replace(tzinfo=None)


def to_storage(value: datetime | None) -> datetime | None:
    """Convert ``value`` to naive UTC; naive input is taken to be UTC already."""

    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def from_storage(value: datetime | None) -> datetime | None:
    """Attach UTC to a naive value read from the database."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def add_days(value: datetime, days: int) -> datetime:
    return value + timedelta(days=days)
