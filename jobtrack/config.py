"""
JobTrack - Application configuration.

Centralized configuration using Pydantic Settings for environment variable management.

Environment Variables:
    All settings can be overridden via environment variables with JOBTRACK_ prefix.

    Auth Settings:
        JOBTRACK_SECRET_KEY=...                   - JWT signing key (required in production)
        JOBTRACK_ACCESS_TOKEN_EXPIRE_MINUTES=15   - Lifetime of an access token

    Client Settings:
        JOBTRACK_API_URL=http://localhost:3001    - Where the client finds the API
"""
from pydantic_settings import BaseSettings


class AuthSettings(BaseSettings):
    """
    Authentication configuration settings.

    For production deployment:
        1. Generate a secret key: openssl rand -hex 32
        2. Set JOBTRACK_SECRET_KEY to the generated key

    There is no refresh token; once the access token expires the user logs in again.
    """
    secret_key: str = "development-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 15
    bcrypt_rounds: int = 12

    class Config:
        env_prefix = "JOBTRACK_"
        env_file = ".env"
        extra = "ignore"


class ClientSettings(BaseSettings):
    """Settings for the API client used by the board views."""
    api_url: str = "http://localhost:3001"
    request_timeout: float = 10.0

    class Config:
        env_prefix = "JOBTRACK_"
        env_file = ".env"
        extra = "ignore"


class Settings(BaseSettings):
    """Combined application settings."""
    auth: AuthSettings = AuthSettings()
    client: ClientSettings = ClientSettings()

    # CORS allowed origins (comma-separated, e.g. "http://localhost:5173,https://myapp.com")
    allowed_origins: str = "*"

    # Database
    database_url: str = "sqlite:///./data/jobtrack.db"
    create_tables_on_startup: bool = True

    # Database connection pool (PostgreSQL only)
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 1800

    class Config:
        env_prefix = "JOBTRACK_"
        env_file = ".env"
        extra = "ignore"


# Global settings instance
settings = Settings()
