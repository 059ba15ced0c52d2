"""
JobTrack - Optimistic update helper.

Every mutating command runs through optimistic():

    1. capture an undo snapshot of the one record being changed
    2. apply the tentative change to the store
    3. await the API call
    4. success: reconcile the store with the server's record
       failure: restore the captured snapshot, then re-raise

The snapshot covers a single record, so reverting one failed command does not
undo unrelated changes made meanwhile. Two overlapping commands on the same
record are last-write-wins locally.
"""
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from .store import Job, JobStore

logger = logging.getLogger("jobtrack.client")

T = TypeVar("T")


@dataclass(frozen=True)
class Undo:
    """How a record looked before a tentative change (None: it did not exist)."""
    job_id: str
    previous: Optional[Job]
    index: Optional[int]


def capture(store: JobStore, job_id: str) -> Undo:
    return Undo(job_id=job_id, previous=store.get(job_id), index=store.index_of(job_id))


def revert(store: JobStore, undo: Undo) -> None:
    if undo.previous is None:
        store.remove(undo.job_id)
    elif store.get(undo.job_id) is not None:
        store.replace(undo.job_id, undo.previous)
    else:
        store.restore(undo.previous, undo.index)


async def optimistic(
    store: JobStore,
    job_id: str,
    apply: Callable[[JobStore], None],
    call: Callable[[], Awaitable[T]],
    reconcile: Optional[Callable[[JobStore, T], None]] = None,
    undo: Optional[Undo] = None,
) -> T:
    """
    Apply a tentative change, then commit or revert it based on the API call.

    Args:
        store: Store holding the record
        job_id: Id of the record the change touches
        apply: Mutates the store immediately
        call: Coroutine factory performing the API request
        reconcile: Writes the server's result into the store on success
        undo: Snapshot to revert to instead of the store's current record,
            for changes that were already applied earlier (drag-over)

    Raises:
        Whatever ``call`` raised, after the store has been reverted.
        Cancellation is reverted and re-raised the same way.
    """
    undo = undo or capture(store, job_id)
    apply(store)

    try:
        result = await call()
    except BaseException as exc:
        logger.warning("Reverting optimistic change to job %s: %s", job_id, exc)
        revert(store, undo)
        raise

    if reconcile:
        reconcile(store, result)
    return result
