"""
JobTrack - CRUD API for job applications.

Every endpoint requires a bearer token and only ever sees the caller's own
jobs. Someone else's job id answers 404, never 403.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..schemas import JobCreate, JobUpdate, JobResponse
from ..repository import JobRepository
from ..auth.dependencies import get_user_id

router = APIRouter()


def get_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


@router.get("", response_model=List[JobResponse])
def list_jobs(
    repo: JobRepository = Depends(get_repository),
    user_id: str = Depends(get_user_id)
):
    """List the caller's jobs, newest first."""
    return repo.list_by_owner(user_id)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    job: JobCreate,
    repo: JobRepository = Depends(get_repository),
    user_id: str = Depends(get_user_id)
):
    """Create a new job application."""
    return repo.create(user_id, **job.model_dump())


@router.get("/{job_id}", response_model=JobResponse)
def get_job(
    job_id: str,
    repo: JobRepository = Depends(get_repository),
    user_id: str = Depends(get_user_id)
):
    """Get a specific job application."""
    return repo.get(user_id, job_id)


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    job: JobUpdate,
    repo: JobRepository = Depends(get_repository),
    user_id: str = Depends(get_user_id)
):
    """Update the fields present in the body; everything else stays as it was."""
    return repo.update(user_id, job_id, job.model_dump(exclude_unset=True))


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: str,
    repo: JobRepository = Depends(get_repository),
    user_id: str = Depends(get_user_id)
):
    """Delete a job application. Deleting it again answers 404."""
    repo.delete(user_id, job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
