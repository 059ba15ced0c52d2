"""
JobTrack - Client-side job state.

JobStore keeps the session's list of jobs as an immutable snapshot (a tuple
of frozen Job records, newest first). Every command builds a new tuple and
notifies subscribers, which is where views re-render.
"""
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ..schemas import JobStatus


class Job(BaseModel):
    """A job as the client sees it. Locally created jobs have no created_at yet."""
    id: str
    company: str
    position: str
    email: Optional[str] = None
    status: JobStatus = JobStatus.APPLIED
    created_at: Optional[datetime] = None
    user_id: Optional[str] = None

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True


class User(BaseModel):
    id: str
    email: str
    name: Optional[str] = None


class Session(BaseModel):
    token: str
    user: User


Listener = Callable[[Tuple[Job, ...]], None]


class JobStore:
    """Immutable-snapshot container for the session's jobs."""

    def __init__(self, jobs: Iterable[Job] = ()):
        self._jobs: Tuple[Job, ...] = tuple(jobs)
        self._listeners: List[Listener] = []

    @property
    def snapshot(self) -> Tuple[Job, ...]:
        return self._jobs

    def __len__(self):
        return len(self._jobs)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a re-render callback; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, jobs: Iterable[Job]) -> None:
        self._jobs = tuple(jobs)
        for listener in list(self._listeners):
            listener(self._jobs)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, job_id: str) -> Optional[Job]:
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None

    def index_of(self, job_id: str) -> Optional[int]:
        for index, job in enumerate(self._jobs):
            if job.id == job_id:
                return index
        return None

    def by_status(self, status: JobStatus) -> Tuple[Job, ...]:
        return tuple(job for job in self._jobs if job.status == status)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def load(self, jobs: Iterable[Job]) -> None:
        self._commit(jobs)

    def insert(self, job: Job, index: int = 0) -> None:
        jobs = list(self._jobs)
        jobs.insert(index, job)
        self._commit(jobs)

    def replace(self, job_id: str, job: Job) -> None:
        """Swap the record with ``job_id`` for ``job`` in place (ids may differ)."""
        self._commit(job if existing.id == job_id else existing for existing in self._jobs)

    def update(self, job_id: str, **changes) -> Optional[Job]:
        """Copy the record with the given field changes; returns the new record."""
        current = self.get(job_id)
        if current is None:
            return None
        updated = current.model_copy(update=changes)
        self.replace(job_id, updated)
        return updated

    def remove(self, job_id: str) -> None:
        self._commit(job for job in self._jobs if job.id != job_id)

    def restore(self, job: Job, index: Optional[int] = None) -> None:
        """Put a removed job back, at its old position when known."""
        if self.get(job.id) is not None:
            self.replace(job.id, job)
            return
        position = len(self._jobs) if index is None else min(index, len(self._jobs))
        self.insert(job, position)
