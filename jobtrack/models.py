"""
JobTrack - SQLAlchemy ORM models

Job applications belong to exactly one user. Every query against this table
must be filtered by user_id (see repository.py).
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship

from .database import Base
from .schemas import JobStatus


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    company = Column(String, nullable=False)
    position = Column(String, nullable=False)
    email = Column(String, nullable=True)  # contact email, optional
    status = Column(
        Enum(JobStatus, name="job_status", native_enum=False, validate_strings=True),
        nullable=False,
        default=JobStatus.APPLIED,
    )
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    user = relationship("User", back_populates="jobs")
