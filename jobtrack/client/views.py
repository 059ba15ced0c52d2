"""
JobTrack - View models and text rendering.

The same store snapshot drives three views:

    list    jobs grouped by status, groups collapsible, one job selected
    kanban  one column per status, cards show company and position
    detail  the selected job's fields

Building a view is a pure function of the snapshot, so views can simply be
rebuilt from a JobStore subscriber after every change.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Tuple

from ..schemas import JobStatus, STATUS_ORDER
from .store import Job


@dataclass(frozen=True)
class StatusGroupView:
    status: JobStatus
    jobs: Tuple[Job, ...]
    collapsed: bool = False

    @property
    def count(self) -> int:
        return len(self.jobs)


@dataclass(frozen=True)
class ListView:
    groups: Tuple[StatusGroupView, ...]
    selected_job_id: Optional[str] = None


@dataclass(frozen=True)
class KanbanColumnView:
    status: JobStatus
    cards: Tuple[Job, ...]

    @property
    def count(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class DetailView:
    job_id: str
    title: str
    company: str
    email: Optional[str]
    status: JobStatus
    created: str


def _jobs_with_status(jobs: Sequence[Job], status: JobStatus) -> Tuple[Job, ...]:
    return tuple(job for job in jobs if job.status == status)


def build_list_view(
    jobs: Sequence[Job],
    selected_job_id: Optional[str] = None,
    collapsed: Iterable[JobStatus] = (),
) -> ListView:
    collapsed = set(collapsed)
    groups = tuple(
        StatusGroupView(status, _jobs_with_status(jobs, status), status in collapsed)
        for status in STATUS_ORDER
    )
    return ListView(groups=groups, selected_job_id=selected_job_id)


def build_kanban_view(jobs: Sequence[Job]) -> Tuple[KanbanColumnView, ...]:
    return tuple(KanbanColumnView(status, _jobs_with_status(jobs, status)) for status in STATUS_ORDER)


def format_created(created_at: Optional[datetime]) -> str:
    """e.g. "March 5, 2026 at 02:30 PM" in local time; unsaved jobs show "Saving..."."""
    if created_at is None:
        return "Saving..."
    created_at = created_at.astimezone()
    return f"{created_at:%B} {created_at.day}, {created_at.year} at {created_at:%I:%M %p}"


def build_detail_view(job: Job) -> DetailView:
    return DetailView(
        job_id=job.id,
        title=job.position,
        company=job.company,
        email=job.email,
        status=job.status,
        created=format_created(job.created_at),
    )


# -----------------------------------------------------------------------------
# Text rendering
# -----------------------------------------------------------------------------

def render_list(view: ListView) -> str:
    lines: List[str] = []
    for group in view.groups:
        marker = "+" if group.collapsed else "-"
        lines.append(f"{marker} {group.status.value} ({group.count})")
        if group.collapsed:
            continue
        if not group.jobs:
            lines.append("    No jobs")
        for job in group.jobs:
            pointer = ">" if job.id == view.selected_job_id else " "
            lines.append(f"  {pointer} {job.company} - {job.position}")
    return "\n".join(lines)


def render_kanban(columns: Sequence[KanbanColumnView], width: int = 24) -> str:
    def cell(text: str) -> str:
        if len(text) > width:
            text = text[: width - 3] + "..."
        return text.ljust(width)

    header = " | ".join(cell(f"{column.status.value} ({column.count})") for column in columns)
    rule = "-+-".join("-" * width for _ in columns)
    rows = [header, rule]

    depth = max((column.count for column in columns), default=0)
    for row in range(depth):
        company_line, position_line = [], []
        for column in columns:
            card = column.cards[row] if row < column.count else None
            company_line.append(cell(card.company if card else ""))
            position_line.append(cell(card.position if card else ""))
        rows.append(" | ".join(company_line).rstrip())
        rows.append(" | ".join(position_line).rstrip())
    return "\n".join(rows)


def render_detail(view: DetailView) -> str:
    return "\n".join([
        view.title,
        view.company,
        "",
        f"Status:        {view.status.value}",
        f"Company:       {view.company}",
        f"Position:      {view.title}",
        f"Contact Email: {view.email or 'No email'}",
        f"Created:       {view.created}",
    ])
