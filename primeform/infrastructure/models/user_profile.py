"""SQLAlchemy model for user fitness profiles."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String

from primeform.infrastructure.database import Base
from primeform.utils import storage_now


class UserProfileModel(Base):
    """Database representation of the onboarding profile."""

    __tablename__ = "user_profile"

    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True
    )
    country = Column(String(80), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String(20), nullable=False)
    height = Column(String(20), nullable=False)
    current_weight = Column(String(20), nullable=False)
    target_weight = Column(String(20), nullable=True)
    body_goal = Column(String(60), nullable=False)
    details = Column(JSON, nullable=False, default=dict)
    badges = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(), nullable=False, default=storage_now)
    updated_at = Column(DateTime(), nullable=True)


__all__ = ["UserProfileModel"]
