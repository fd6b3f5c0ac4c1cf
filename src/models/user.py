"""User model."""

from sqlalchemy import Column, DateTime, Integer, String

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Account allowed to use the pantry. Food items are shared, not owned."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # Stored lowercased
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    last_login_at = Column(DateTime(timezone=True), nullable=True)
