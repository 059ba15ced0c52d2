"""
JobTrack - Client package

Async API client, optimistic client-side state, and the list/kanban/detail
views built on top of it.

Usage:
    from jobtrack.client import JobTrackClient, JobBoard

    async with JobTrackClient(on_session_expired=show_login) as client:
        await client.login(email, password)
        board = JobBoard(client)
        await board.load()
        await board.change_status(job_id, "OFFER")
"""
from .api import ApiError, JobTrackClient, SessionExpiredError, TokenStore
from .board import JobBoard
from .optimistic import optimistic
from .store import Job, JobStore

__all__ = [
    "ApiError",
    "JobTrackClient",
    "SessionExpiredError",
    "TokenStore",
    "JobBoard",
    "optimistic",
    "Job",
    "JobStore",
]
