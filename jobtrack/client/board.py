"""
JobTrack - Board controller.

Commands issued by the list, kanban and detail views. Each one updates the
JobStore optimistically, calls the API, and reconciles or reverts through
optimistic(). Failures never propagate out of a command: the store is
reverted and the message is kept in ``error`` for the view to show.

Drag and drop follows the pointer gesture:
    drag_start(job_id)   remember the status the card started in
    drag_over(target)    move the card locally, no API call
    drag_end(target)     persist once; on failure go back to the start status
"""
import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Set, Tuple, Union

import httpx

from ..schemas import JobStatus
from .api import ApiError, JobTrackClient
from .optimistic import Undo, optimistic
from .store import Job, JobStore
from .views import (
    DetailView, KanbanColumnView, ListView,
    build_detail_view, build_kanban_view, build_list_view,
)

logger = logging.getLogger("jobtrack.client")

EDITABLE_FIELDS = ("company", "position", "email")

# Errors a command absorbs after reverting; anything else is a bug and propagates
COMMAND_ERRORS = (ApiError, httpx.HTTPError)


@dataclass(frozen=True)
class DragState:
    job_id: str
    original_status: JobStatus


def _as_status(value) -> Optional[JobStatus]:
    try:
        return JobStatus(value)
    except ValueError:
        return None


class JobBoard:
    """State and commands behind the job views for one signed-in session."""

    def __init__(self, client: JobTrackClient, store: Optional[JobStore] = None):
        self.client = client
        self.store = store or JobStore()
        self.loading = False
        self.error: Optional[str] = None
        self.selected_job_id: Optional[str] = None
        self.collapsed: Set[JobStatus] = set()
        self.drag: Optional[DragState] = None

    # -------------------------------------------------------------------------
    # Loading & selection
    # -------------------------------------------------------------------------

    async def load(self) -> None:
        """
        Fetch the user's jobs into the store.

        Failures leave the store as it was. A 401 has already cleared the
        token and fired the session-expired hook inside the client.
        """
        self.loading = True
        try:
            self.store.load(await self.client.list_jobs())
        except COMMAND_ERRORS as exc:
            logger.warning("Failed to load jobs: %s", exc)
        finally:
            self.loading = False

    def select(self, job_id: Optional[str]) -> None:
        self.selected_job_id = job_id

    @property
    def selected_job(self) -> Optional[Job]:
        if self.selected_job_id is None:
            return None
        return self.store.get(self.selected_job_id)

    def toggle_group(self, status: JobStatus) -> None:
        status = JobStatus(status)
        if status in self.collapsed:
            self.collapsed.discard(status)
        else:
            self.collapsed.add(status)

    def _fail(self, message: str, exc: Exception) -> None:
        self.error = exc.message if isinstance(exc, ApiError) else message
        logger.warning("%s: %s", message, exc)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def list_view(self) -> ListView:
        return build_list_view(self.store.snapshot, self.selected_job_id, self.collapsed)

    def kanban_view(self) -> Tuple[KanbanColumnView, ...]:
        return build_kanban_view(self.store.snapshot)

    def detail_view(self) -> Optional[DetailView]:
        job = self.selected_job
        return build_detail_view(job) if job else None

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    async def add_job(
        self,
        company: str,
        position: str,
        status: JobStatus = JobStatus.APPLIED,
        email: Optional[str] = None,
    ) -> Optional[Job]:
        """Show the new job at the top right away, then swap in the server's record."""
        self.error = None
        company = (company or "").strip()
        position = (position or "").strip()
        email = (email or "").strip() or None
        if not company or not position:
            self.error = "Company and position are required"
            return None

        temp = Job(
            id=f"temp-{uuid.uuid4().hex}",
            company=company,
            position=position,
            status=JobStatus(status),
            email=email,
        )
        try:
            return await optimistic(
                self.store,
                temp.id,
                apply=lambda store: store.insert(temp),
                call=lambda: self.client.create_job(company, position, temp.status, email),
                reconcile=lambda store, job: store.replace(temp.id, job),
            )
        except COMMAND_ERRORS as exc:
            self._fail("Failed to create job", exc)
            return None

    async def edit_field(self, job_id: str, field: str, value: Optional[str]) -> Optional[Job]:
        """
        Edit company, position or contact email.

        Values are trimmed. A blank email clears it; a blank company or position
        is refused locally without calling the API. Unchanged values are a no-op.
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field {field!r} is not editable")

        job = self.store.get(job_id)
        if job is None:
            return None

        trimmed = (value or "").strip()
        if field == "email":
            new_value = trimmed or None
        else:
            new_value = trimmed
            if not new_value:
                return None

        if new_value == getattr(job, field):
            return None

        self.error = None
        try:
            return await optimistic(
                self.store,
                job_id,
                apply=lambda store: store.update(job_id, **{field: new_value}),
                call=lambda: self.client.update_job(job_id, **{field: new_value}),
                reconcile=lambda store, updated: store.replace(job_id, updated),
            )
        except COMMAND_ERRORS as exc:
            self._fail("Failed to update job", exc)
            return None

    async def change_status(self, job_id: str, status: JobStatus) -> Optional[Job]:
        status = JobStatus(status)
        job = self.store.get(job_id)
        if job is None or job.status == status:
            return None

        self.error = None
        try:
            return await optimistic(
                self.store,
                job_id,
                apply=lambda store: store.update(job_id, status=status),
                call=lambda: self.client.update_job(job_id, status=status),
                reconcile=lambda store, updated: store.replace(job_id, updated),
            )
        except COMMAND_ERRORS as exc:
            self._fail("Failed to update job", exc)
            return None

    async def delete_job(self, job_id: str) -> bool:
        """Remove the job at once; it comes back in its old position if the API refuses."""
        if self.store.get(job_id) is None:
            return False

        if self.selected_job_id == job_id:
            self.selected_job_id = None

        self.error = None
        try:
            await optimistic(
                self.store,
                job_id,
                apply=lambda store: store.remove(job_id),
                call=lambda: self.client.delete_job(job_id),
            )
        except COMMAND_ERRORS as exc:
            self._fail("Failed to delete job", exc)
            return False
        return True

    # -------------------------------------------------------------------------
    # Drag and drop (kanban)
    # -------------------------------------------------------------------------

    def drag_start(self, job_id: str) -> None:
        job = self.store.get(job_id)
        self.drag = DragState(job_id, job.status) if job else None

    def _resolve_target(self, target: Union[JobStatus, str, None]) -> Optional[JobStatus]:
        """A drop target is a column (status) or a card, meaning that card's column."""
        if target is None:
            return None
        status = _as_status(target)
        if status is not None:
            return status
        over_job = self.store.get(target)
        return over_job.status if over_job else None

    def _move(self, job_id: str, target: Union[JobStatus, str, None]) -> None:
        status = self._resolve_target(target)
        job = self.store.get(job_id)
        if status is None or job is None or job.status == status:
            return
        self.store.update(job.id, status=status)

    def drag_over(self, target: Union[JobStatus, str, None]) -> None:
        if self.drag is not None:
            self._move(self.drag.job_id, target)

    async def drag_end(self, target: Union[JobStatus, str, None]) -> Optional[Job]:
        """
        Finish the gesture and persist the move once.

        Dropping outside every column puts the card back where it started. A
        failed save also reverts to the drag-start status, not to whichever
        column the card passed over last.
        """
        drag, self.drag = self.drag, None
        if drag is None:
            return None

        job = self.store.get(drag.job_id)
        if job is None:
            return None

        if target is None:
            if job.status != drag.original_status:
                self.store.update(job.id, status=drag.original_status)
            return None

        self._move(drag.job_id, target)

        job = self.store.get(drag.job_id)
        if job.status == drag.original_status:
            return None

        undo = Undo(
            job_id=job.id,
            previous=job.model_copy(update={"status": drag.original_status}),
            index=self.store.index_of(job.id),
        )
        self.error = None
        try:
            return await optimistic(
                self.store,
                job.id,
                apply=lambda store: None,
                call=lambda: self.client.update_job(job.id, status=job.status),
                reconcile=lambda store, updated: store.replace(job.id, updated),
                undo=undo,
            )
        except COMMAND_ERRORS as exc:
            self._fail("Failed to update job", exc)
            return None
