"""
JobTrack - Authentication Schemas

Pydantic schemas for auth request/response validation.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


# -----------------------------------------------------------------------------
# User Schemas
# -----------------------------------------------------------------------------

class UserCreate(BaseModel):
    """Schema for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: Optional[str] = None


class UserLogin(BaseModel):
    """Schema for user login. Any string is accepted; unknown emails fail as bad credentials."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Schema for user response (public user data)."""
    id: str
    email: str
    name: Optional[str] = None

    class Config:
        from_attributes = True


# -----------------------------------------------------------------------------
# Token Schemas
# -----------------------------------------------------------------------------

class TokenData(BaseModel):
    """Schema for decoded token data (internal use)."""
    user_id: str
    email: str
    exp: datetime


class AuthResponse(BaseModel):
    """Returned by both register and login."""
    token: str
    user: UserResponse
