"""
JobTrack - Authentication Service

Core authentication logic: password hashing, JWT issuing/verification,
and the register/login flows.

Features:
- Bcrypt password hashing (passlib)
- Short-lived JWT access tokens (python-jose), no refresh tokens
- Registration with duplicate-email detection
- Login that never reveals whether an email is registered
"""
from datetime import datetime, timedelta
from typing import Optional, Tuple
import logging

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config import settings
from ..errors import (
    DuplicateEmail, ExpiredToken, InvalidCredentials, InvalidToken, ValidationError,
)
from .models import User
from .schemas import TokenData

logger = logging.getLogger("jobtrack.auth")


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class AuthService:
    """
    Authentication service for user management and JWT handling.

    Provides:
    - Password hashing with bcrypt
    - JWT access token issuing and verification
    - User registration and login
    """

    def __init__(self, rounds: int = None):
        """Initialize auth service with password context."""
        self._pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds or settings.auth.bcrypt_rounds,
        )

    # -------------------------------------------------------------------------
    # Password Hashing
    # -------------------------------------------------------------------------

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        return self._pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Returns:
            True if password matches, False otherwise (including unreadable hashes)
        """
        try:
            return self._pwd_context.verify(plain_password, hashed_password)
        except ValueError as e:
            logger.error(f"Password verification failed: {e}")
            return False

    # -------------------------------------------------------------------------
    # JWT Token Management
    # -------------------------------------------------------------------------

    def issue_token(
        self,
        user_id: str,
        email: str,
        expires_delta: Optional[timedelta] = None
    ) -> Tuple[str, datetime]:
        """
        Create a signed access token embedding the user id and email.

        Args:
            user_id: Id of the authenticated user
            email: User's email address
            expires_delta: Optional custom lifetime (defaults to the configured 15 minutes)

        Returns:
            Tuple of (token_string, expiration_datetime)
        """
        now = datetime.utcnow()
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.auth.access_token_expire_minutes)
        expire = now + expires_delta

        payload = {
            "userId": user_id,
            "email": email,
            "iat": now,
            "exp": expire,
        }

        token = jwt.encode(
            payload,
            settings.auth.secret_key,
            algorithm=settings.auth.algorithm
        )

        logger.debug(f"Issued access token for user {user_id}")
        return token, expire

    def verify_token(self, token: str) -> TokenData:
        """
        Verify and decode an access token.

        Raises:
            ExpiredToken: signature is valid but the token is past its expiry
            InvalidToken: bad signature, malformed token, or missing claims
        """
        try:
            payload = jwt.decode(
                token,
                settings.auth.secret_key,
                algorithms=[settings.auth.algorithm]
            )
        except ExpiredSignatureError:
            logger.debug("Token expired")
            raise ExpiredToken()
        except JWTError as e:
            logger.debug(f"Token verification failed: {e}")
            raise InvalidToken()

        user_id = payload.get("userId")
        email = payload.get("email")
        exp = payload.get("exp")
        if not user_id or not email or exp is None:
            logger.warning("Token missing required claims")
            raise InvalidToken()

        return TokenData(
            user_id=str(user_id),
            email=email,
            exp=datetime.utcfromtimestamp(exp)
        )

    # -------------------------------------------------------------------------
    # Registration & Login
    # -------------------------------------------------------------------------

    def register(
        self,
        email: str,
        password: str,
        name: Optional[str],
        db: Session
    ) -> Tuple[str, User]:
        """
        Create a new user and issue their first token.

        The duplicate check runs before the insert. Two concurrent registrations
        for the same email can both pass it; the unique index then rejects the
        second insert, which is reported as the same DuplicateEmail.

        Returns:
            Tuple of (token, created user)

        Raises:
            ValidationError: email or password missing
            DuplicateEmail: email already registered
        """
        email = normalize_email(email)
        if not email or not password:
            raise ValidationError("Email and password are required")

        if self.get_user_by_email(email, db):
            raise DuplicateEmail()

        user = User(
            email=email,
            hashed_password=self.hash_password(password),
            name=(name or "").strip() or None,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateEmail()
        db.refresh(user)

        logger.info(f"Created new user: {user.id} ({email})")
        token, _ = self.issue_token(user.id, user.email)
        return token, user

    def login(self, email: str, password: str, db: Session) -> Tuple[str, User]:
        """
        Authenticate by email and password and issue a token.

        Raises:
            ValidationError: email or password missing
            InvalidCredentials: unknown email or wrong password (same message for both)
        """
        email = normalize_email(email)
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.get_user_by_email(email, db)
        if not user:
            logger.debug(f"Login for unknown email: {email}")
            raise InvalidCredentials()

        if not self.verify_password(password, user.hashed_password):
            logger.debug(f"Invalid password for user: {email}")
            raise InvalidCredentials()

        logger.info(f"User authenticated: {user.id} ({email})")
        token, _ = self.issue_token(user.id, user.email)
        return token, user

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_user_by_id(self, user_id: str, db: Session) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str, db: Session) -> Optional[User]:
        return db.query(User).filter(User.email == normalize_email(email)).first()


# Global service instance
auth_service = AuthService()
