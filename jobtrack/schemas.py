"""
JobTrack - Pydantic schemas for request/response validation.

Responses use camelCase keys (createdAt, userId) to match what the web
client reads; Python code keeps snake_case attribute names.
"""
from pydantic import BaseModel, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from typing import Optional
from enum import Enum


# --- Enums for validated fields ---

class JobStatus(str, Enum):
    APPLIED = "APPLIED"
    INTERVIEW = "INTERVIEW"
    OFFER = "OFFER"
    REJECTED = "REJECTED"


# Column/group order for the list and kanban views
STATUS_ORDER = [JobStatus.APPLIED, JobStatus.INTERVIEW, JobStatus.OFFER, JobStatus.REJECTED]


# --- Helper validators ---

def validate_required_text(v: Optional[str]) -> str:
    """Trim a required text field; blank or null is rejected."""
    if v is None:
        raise ValueError("must not be null")
    v = v.strip()
    if not v:
        raise ValueError("must not be empty")
    return v


def normalize_contact_email(v: Optional[str]) -> Optional[str]:
    """Empty string means "no contact email"."""
    if v is None:
        return None
    v = v.strip()
    return v or None


# --- Job Application Schemas ---

class JobCreate(BaseModel):
    company: str
    position: str
    status: JobStatus = JobStatus.APPLIED
    email: Optional[str] = None

    @field_validator('company', 'position')
    @classmethod
    def validate_text(cls, v):
        return validate_required_text(v)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return normalize_contact_email(v)


class JobUpdate(BaseModel):
    """
    Partial update. Only keys present in the request body are applied,
    so callers must use model_dump(exclude_unset=True).
    """
    company: Optional[str] = None
    position: Optional[str] = None
    status: Optional[JobStatus] = None
    email: Optional[str] = None

    @field_validator('company', 'position')
    @classmethod
    def validate_text(cls, v):
        return validate_required_text(v)

    @field_validator('status')
    @classmethod
    def validate_status(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return normalize_contact_email(v)


class JobResponse(BaseModel):
    id: str
    company: str
    position: str
    email: Optional[str] = None
    status: JobStatus
    created_at: datetime
    user_id: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

    @field_serializer("created_at", when_used="json")
    def serialize_created_at(self, value: datetime) -> str:
        # SQLite hands back naive values; they are stored as UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()


# --- Health ---

class HealthResponse(BaseModel):
    status: str = "ok"
