"""
JobTrack - Async API client.

Thin wrapper over httpx.AsyncClient that attaches the bearer token and
turns error responses into ApiError. A 401 on any authenticated request
means the session is over: the stored token is cleared and the
on_session_expired hook fires (the UI sends the user back to login).
Several in-flight requests may all hit this path; clearing an already
empty token and re-firing the hook is harmless.
"""
import logging
from typing import Callable, List, Optional

import httpx

from ..config import settings
from ..schemas import JobStatus
from .store import Job, Session

logger = logging.getLogger("jobtrack.client")


class ApiError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class SessionExpiredError(ApiError):
    """Authenticated request answered 401."""


class TokenStore:
    """Holds the current bearer token, like browser local storage."""

    def __init__(self, token: Optional[str] = None):
        self.token = token

    def save(self, token: str) -> None:
        self.token = token

    def clear(self) -> None:
        self.token = None


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        data = response.json()
    except ValueError:
        return default
    if isinstance(data, dict) and data.get("error"):
        return data["error"]
    return default


class JobTrackClient:
    """
    Async client for the JobTrack API.

    Usage:
        async with JobTrackClient() as client:
            await client.login("me@example.com", "secret")
            jobs = await client.list_jobs()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        on_session_expired: Optional[Callable[[], None]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self.tokens = token_store or TokenStore()
        self.on_session_expired = on_session_expired
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.client.api_url,
            transport=transport,
            timeout=timeout or settings.client.request_timeout,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def is_authenticated(self) -> bool:
        return bool(self.tokens.token)

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _expire_session(self) -> None:
        logger.info("Session expired, clearing token")
        self.tokens.clear()
        if self.on_session_expired:
            self.on_session_expired()

    async def _request(
        self,
        method: str,
        path: str,
        default_error: str,
        authenticated: bool = True,
        **kwargs
    ) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        if authenticated and self.tokens.token:
            headers["Authorization"] = f"Bearer {self.tokens.token}"

        response = await self._http.request(method, path, headers=headers, **kwargs)

        if authenticated and response.status_code == 401:
            self._expire_session()
            raise SessionExpiredError(401, "Session expired")

        if response.is_error:
            raise ApiError(response.status_code, _error_message(response, default_error))

        return response

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    async def register(self, email: str, password: str, name: Optional[str] = None) -> Session:
        payload = {"email": email, "password": password}
        if name:
            payload["name"] = name
        response = await self._request(
            "POST", "/auth/register", "Registration failed", authenticated=False, json=payload
        )
        session = Session.model_validate(response.json())
        self.tokens.save(session.token)
        return session

    async def login(self, email: str, password: str) -> Session:
        response = await self._request(
            "POST", "/auth/login", "Login failed", authenticated=False,
            json={"email": email, "password": password}
        )
        session = Session.model_validate(response.json())
        self.tokens.save(session.token)
        return session

    def logout(self) -> None:
        self.tokens.clear()

    # -------------------------------------------------------------------------
    # Jobs
    # -------------------------------------------------------------------------

    async def list_jobs(self) -> List[Job]:
        response = await self._request("GET", "/jobs", "Failed to fetch jobs")
        return [Job.model_validate(item) for item in response.json()]

    async def create_job(
        self,
        company: str,
        position: str,
        status: JobStatus = JobStatus.APPLIED,
        email: Optional[str] = None,
    ) -> Job:
        payload = {"company": company, "position": position, "status": JobStatus(status).value}
        if email:
            payload["email"] = email
        response = await self._request("POST", "/jobs", "Failed to create job", json=payload)
        return Job.model_validate(response.json())

    async def update_job(self, job_id: str, **fields) -> Job:
        """Send only the given fields; the server leaves the rest untouched."""
        payload = {
            key: (value.value if isinstance(value, JobStatus) else value)
            for key, value in fields.items()
        }
        response = await self._request(
            "PATCH", f"/jobs/{job_id}", "Failed to update job", json=payload
        )
        return Job.model_validate(response.json())

    async def delete_job(self, job_id: str) -> None:
        await self._request("DELETE", f"/jobs/{job_id}", "Failed to delete job")
