from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from worklog.database import SessionLocal
from worklog.models.work_entry import WorkEntry
from worklog.services import work_entry_service


def test_unique_open_work_entry_prevents_duplicates(task_factory):
    task = task_factory()

    db1 = SessionLocal()
    db2 = SessionLocal()

    try:
        db1.add(WorkEntry(task_id=task.id, started_on=datetime.now(timezone.utc)))
        db2.add(WorkEntry(task_id=task.id, started_on=datetime.now(timezone.utc)))

        db1.commit()

        with pytest.raises(IntegrityError):
            db2.commit()
    finally:
        db1.rollback()
        db2.rollback()
        db1.close()
        db2.close()


def test_create_work_entry_propagates_integrity_error_for_second_open_entry(task_factory):
    task = task_factory()
    work_entry_service.create_work_entry(task.id)

    with pytest.raises(IntegrityError):
        work_entry_service.create_work_entry(task.id)

    current = work_entry_service.find_current_work_entry(task.id)
    assert current is not False


def test_new_entry_allowed_after_previous_is_finished(task_factory):
    task = task_factory()
    first = work_entry_service.create_work_entry(task.id)
    work_entry_service.finish_work_entry(first.id)

    second = work_entry_service.create_work_entry(task.id)

    assert second.id != first.id
    current = work_entry_service.find_current_work_entry(task.id)
    assert current.id == second.id
