"""
JobTrack - Authentication Models

SQLAlchemy model for registered users.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from ..database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """User model for authentication."""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    name = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    jobs = relationship("JobApplication", back_populates="user", cascade="all, delete-orphan")
