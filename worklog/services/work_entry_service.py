import logging
from datetime import timedelta
from typing import Literal, Optional, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from worklog.database import session_scope
from worklog.models.work_entry import WorkEntry

logger = logging.getLogger(__name__)


def create_work_entry(task_id: int, *, db: Optional[Session] = None) -> WorkEntry:
    """
    Opens a work entry starting at the database's NOW().

    A second open entry for the same task violates uq_work_entries_open and the
    IntegrityError propagates to the caller.
    """
    with session_scope(db) as session:
        entry = WorkEntry(task_id=task_id, started_on=func.now())
        session.add(entry)
        session.flush()
        session.refresh(entry)

    logger.info("Work entry started", extra={"task_id": task_id, "work_entry_id": entry.id})
    return entry


def find_current_work_entry(
    task_id: int,
    *,
    db: Optional[Session] = None,
) -> Union[WorkEntry, Literal[False]]:
    with session_scope(db) as session:
        entry = (
            session.query(WorkEntry)
            .filter(
                WorkEntry.task_id == task_id,
                WorkEntry.finished_on.is_(None),
            )
            .first()
        )

    if entry is not None:
        return entry

    return False


def finish_work_entry(id: int, *, db: Optional[Session] = None) -> None:
    """Sets finished_on = NOW(). Unknown ids update zero rows and are not an error."""
    with session_scope(db) as session:
        updated = (
            session.query(WorkEntry)
            .filter(WorkEntry.id == id)
            .update({WorkEntry.finished_on: func.now()}, synchronize_session=False)
        )

    logger.info("Work entry finished", extra={"work_entry_id": id, "rows": updated})


def calculate_total_time(
    task_id: int,
    *,
    db: Optional[Session] = None,
) -> Union[timedelta, Literal[0]]:
    """
    Sum of (finished_on - started_on) over the task's closed entries.

    Returns 0 when there are no closed entries or the sum is empty.
    """
    with session_scope(db) as session:
        total_time = (
            session.query(func.sum(WorkEntry.finished_on - WorkEntry.started_on).label("total_time"))
            .filter(
                WorkEntry.task_id == task_id,
                WorkEntry.finished_on.isnot(None),
            )
            .scalar()
        )

    if total_time:
        return total_time

    return 0
