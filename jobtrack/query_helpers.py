"""
Reusable query helpers for owner-scoped data isolation.

A record owned by another user is reported exactly like a missing one,
so callers cannot probe for ids that belong to someone else.
"""
from sqlalchemy.orm import Session

from .errors import NotFoundError


def owner_query(db: Session, model, owner_id: str):
    """Return a query filtered to the given owner's records."""
    return db.query(model).filter(model.user_id == owner_id)


def get_owned_or_404(db: Session, model, record_id: str, owner_id: str, label: str = "Record"):
    """Fetch a record by id and user_id, or raise NotFoundError."""
    record = owner_query(db, model, owner_id).filter(model.id == record_id).first()
    if not record:
        raise NotFoundError(f"{label} not found")
    return record
