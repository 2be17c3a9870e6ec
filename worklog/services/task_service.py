import logging
from typing import List, Optional

from sqlalchemy import false
from sqlalchemy.orm import Session

from worklog.database import session_scope
from worklog.models.task import Task

logger = logging.getLogger(__name__)

UNKNOWN_TASK_ID = 0
UNKNOWN_TASK_NAME = "Unknown"


def _unknown_task() -> Task:
    # Transient, never added to a session.
    return Task(id=UNKNOWN_TASK_ID, name=UNKNOWN_TASK_NAME)


def complete_by_id(id: int, *, db: Optional[Session] = None) -> None:
    """Marks the task completed. Unknown ids update zero rows and are not an error."""
    with session_scope(db) as session:
        updated = (
            session.query(Task)
            .filter(Task.id == id)
            .update({Task.completed: True}, synchronize_session=False)
        )

    logger.info("Task completed", extra={"task_id": id, "rows": updated})


def create(name: str, *, db: Optional[Session] = None) -> Task:
    with session_scope(db) as session:
        task = Task(name=name)
        session.add(task)
        session.flush()
        # Pull the server-side default for completed.
        session.refresh(task)

    logger.info("Task created", extra={"task_id": task.id})
    return task


def find_all_non_completed_tasks(*, db: Optional[Session] = None) -> List[Task]:
    with session_scope(db) as session:
        return session.query(Task).filter(Task.completed == false()).all()


def find_by_id(id: int, *, db: Optional[Session] = None) -> Task:
    """
    Returns the task, or a placeholder with id=0 and name="Unknown" when no row matches.
    """
    with session_scope(db) as session:
        task = session.query(Task).filter(Task.id == id).first()

    if task is not None:
        return task

    return _unknown_task()
