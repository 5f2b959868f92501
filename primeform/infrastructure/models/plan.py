"""SQLAlchemy model for diet and workout plans."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String

from primeform.infrastructure.database import Base
from primeform.utils import storage_now


class PlanModel(Base):
    """Database representation of a generated plan."""

    __tablename__ = "plan"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    plan_type = Column(String(20), nullable=False)
    name = Column(String(120), nullable=False)
    details = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(), nullable=False, default=storage_now)


__all__ = ["PlanModel"]
