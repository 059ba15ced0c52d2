"""
JobTrack - Job application persistence.

All operations take the owner's id first and never touch rows owned by
anyone else. Listing is a full scan of the owner's rows per call; there is
no pagination.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from .errors import ValidationError
from .models import JobApplication
from .query_helpers import owner_query, get_owned_or_404
from .schemas import JobStatus

logger = logging.getLogger("jobtrack.jobs")

UPDATABLE_FIELDS = ("company", "position", "status", "email")


def _coerce_status(value) -> JobStatus:
    try:
        return JobStatus(value)
    except ValueError:
        raise ValidationError(f"Invalid status: {value!r}")


class JobRepository:
    """CRUD for job applications, scoped to a single owner per call."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        owner_id: str,
        company: str,
        position: str,
        status: JobStatus = JobStatus.APPLIED,
        email: Optional[str] = None,
    ) -> JobApplication:
        job = JobApplication(
            company=company,
            position=position,
            status=_coerce_status(status),
            email=email or None,
            user_id=owner_id,
        )
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        logger.info(f"Created job {job.id} for user {owner_id}")
        return job

    def list_by_owner(self, owner_id: str) -> List[JobApplication]:
        """Newest first."""
        return owner_query(self.db, JobApplication, owner_id).order_by(
            JobApplication.created_at.desc(),
            JobApplication.id.desc()
        ).all()

    def get(self, owner_id: str, job_id: str) -> JobApplication:
        return get_owned_or_404(self.db, JobApplication, job_id, owner_id, "Job")

    def update(self, owner_id: str, job_id: str, fields: dict) -> JobApplication:
        """
        Apply only the keys present in ``fields``; absent keys are left untouched.

        An empty email clears the contact email. Company and position must
        remain non-empty after the update.
        """
        job = self.get(owner_id, job_id)

        changes = {}
        for key, value in fields.items():
            if key not in UPDATABLE_FIELDS:
                continue
            if key == "email":
                value = value or None
            elif key in ("company", "position") and not (value or "").strip():
                raise ValidationError(f"{key.capitalize()} must not be empty")
            elif key == "status":
                value = _coerce_status(value)
            changes[key] = value

        for key, value in changes.items():
            setattr(job, key, value)

        self.db.commit()
        self.db.refresh(job)
        logger.debug(f"Updated job {job_id} fields {sorted(fields)}")
        return job

    def delete(self, owner_id: str, job_id: str) -> None:
        job = self.get(owner_id, job_id)
        self.db.delete(job)
        self.db.commit()
        logger.info(f"Deleted job {job_id} for user {owner_id}")
