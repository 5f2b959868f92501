"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from sqlalchemy.sql import expression

from primeform.infrastructure.database import Base


class UserModel(Base):
    """Database representation of an application user."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(50), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    language = Column(String(10), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    push_enabled = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    diet_reminders_enabled = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    workout_reminders_enabled = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())
