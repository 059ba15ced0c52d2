"""
JobTrack - Authentication Router

API endpoints for user authentication.

Endpoints:
    POST /auth/register   - Email/password registration -> token
    POST /auth/login      - Email/password login -> token
    GET  /auth/me         - Get current user
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from .models import User
from .schemas import UserCreate, UserLogin, UserResponse, AuthResponse
from .service import auth_service
from .dependencies import get_current_user

logger = logging.getLogger("jobtrack.auth")
router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Register a new user with email and password.

    Returns a token that is immediately usable, together with the public user data.
    A registered email yields 409.
    """
    token, user = auth_service.register(
        email=user_data.email,
        password=user_data.password,
        name=user_data.name,
        db=db
    )
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
):
    """
    Login with email and password.

    Unknown email and wrong password both return 401 with the same message.
    """
    token, user = auth_service.login(
        email=credentials.email,
        password=credentials.password,
        db=db
    )
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """Get the currently authenticated user."""
    return current_user
