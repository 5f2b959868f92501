"""SQLAlchemy model for device push tokens."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from primeform.infrastructure.database import Base
from primeform.utils import storage_now


class DeviceRegistrationModel(Base):
    """Push token registered by the most recent device of a user."""

    __tablename__ = "device_registration"

    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True
    )
    token = Column(String(255), nullable=False)
    registered_at = Column(
        DateTime(), nullable=False, default=storage_now
    )


__all__ = ["DeviceRegistrationModel"]
