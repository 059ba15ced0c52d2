"""
JobTrack - Authentication Dependencies

FastAPI dependencies for route protection and user injection.

Usage in routers:
    from ..auth.dependencies import get_current_user

    @router.get("/protected")
    def protected_route(current_user: User = Depends(get_current_user)):
        return {"user_id": current_user.id}
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from ..errors import AuthError
from .models import User
from .service import auth_service

logger = logging.getLogger("jobtrack.auth")

# OAuth2 scheme for token extraction from Authorization header
# auto_error=False allows us to report missing tokens with our own error body
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Get the current authenticated user from the bearer token.

    Invalid and expired tokens produce the same 401 message so callers
    cannot tell the two apart.

    Raises:
        AuthError: 401 if the header is missing, the token does not verify,
            or the user it names no longer exists
    """
    if not token:
        logger.debug("No token provided")
        raise AuthError("Missing or invalid token")

    try:
        token_data = auth_service.verify_token(token)
    except AuthError:
        raise AuthError("Invalid or expired token")

    user = auth_service.get_user_by_id(token_data.user_id, db)
    if not user:
        logger.warning(f"Token valid but user {token_data.user_id} not found")
        raise AuthError("Invalid or expired token")

    return user


async def get_user_id(
    current_user: User = Depends(get_current_user)
) -> str:
    """Get just the user ID, for routes that only filter by owner."""
    return current_user.id
