"""Domain entity describing the push token registered by a user's device."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class DeviceRegistration:
    """Push token currently associated with a user (one per user)."""

    user_id: int
    token: str
    registered_at: datetime | None = None

    @property
    def masked_token(self) -> str:
        """Return a shortened token that is safe to write to logs."""

        if len(self.token) <= 20:
            return self.token
        return f"{self.token[:20]}..."
