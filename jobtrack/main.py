"""
JobTrack - FastAPI application entry point.

A personal job application tracker: register, log in, and manage your own
job applications through a small REST API.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import os

from .config import settings
from .database import init_db
from .errors import AuthError, JobTrackError
from .routers import jobs
from .auth import router as auth_router
from .schemas import HealthResponse

# --- Logging Configuration ---
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("jobtrack")


def setup_database():
    """Create tables for local SQLite installs; production uses Alembic."""
    if settings.database_url.startswith("sqlite:///./data/"):
        os.makedirs("data", exist_ok=True)
    init_db()
    logger.info("Database tables ready.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    logger.info("Starting JobTrack API...")
    if settings.create_tables_on_startup:
        setup_database()
    logger.info("JobTrack ready!")
    yield
    logger.info("Shutting down JobTrack...")


app = FastAPI(
    title="JobTrack",
    description="Personal job application tracker",
    version="0.1.0",
    lifespan=lifespan
)


# --- Error Handlers ---

@app.exception_handler(JobTrackError)
async def jobtrack_error_handler(request: Request, exc: JobTrackError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed fields are a 400, with the first problem as the message."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg", message)
    logger.debug("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


# --- Middleware ---
# Parse allowed origins from config
_allowed_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/auth", tags=["auth"])
app.include_router(jobs.router, prefix="/jobs", tags=["jobs"])


# --- API Endpoints ---

@app.get("/health", response_model=HealthResponse, tags=["system"])
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse()
