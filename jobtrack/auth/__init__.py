"""
JobTrack - Authentication Module

Email/password accounts with short-lived JWT bearer tokens.

Usage:
    from jobtrack.auth import get_current_user, auth_service, User

    @router.get("/protected")
    def protected_route(current_user: User = Depends(get_current_user)):
        return {"user_id": current_user.id}

Configuration (environment variables):
    JOBTRACK_SECRET_KEY=<key>                 - JWT signing key (required in production)
    JOBTRACK_ACCESS_TOKEN_EXPIRE_MINUTES=15
"""

# Models
from .models import User

# Service
from .service import auth_service, AuthService

# Dependencies (for use in routers)
from .dependencies import get_current_user, get_user_id

# Router (for mounting in main.py)
from .router import router

__all__ = [
    # Models
    "User",
    # Service
    "auth_service",
    "AuthService",
    # Dependencies
    "get_current_user",
    "get_user_id",
    # Router
    "router",
]
