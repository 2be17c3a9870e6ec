from __future__ import annotations

import logging
from datetime import timedelta
from typing import List, Union

from fastapi import APIRouter, HTTPException
from sqlalchemy.exc import IntegrityError

from worklog.database import SessionLocal
from worklog.models.work_entry import WorkEntry
from worklog.schemas.task import TaskCreate, TaskDetailResponse, TaskResponse, TotalTimeResponse
from worklog.schemas.work_entry import WorkEntryResponse
from worklog.services import task_service, work_entry_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def _seconds(total_time: Union[timedelta, int]) -> float:
    if isinstance(total_time, timedelta):
        return total_time.total_seconds()
    return float(total_time)


def _require_task(task_id: int, db):
    task = task_service.find_by_id(task_id, db=db)
    if task.id == task_service.UNKNOWN_TASK_ID:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.get("", response_model=List[TaskResponse])
def list_tasks():
    db = SessionLocal()
    try:
        return task_service.find_all_non_completed_tasks(db=db)
    finally:
        db.close()


@router.post("", response_model=TaskResponse)
def create_task(payload: TaskCreate):
    db = SessionLocal()
    try:
        task = task_service.create(payload.name, db=db)
        db.commit()
        return task
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@router.get("/{task_id}", response_model=TaskDetailResponse)
def get_task(task_id: int):
    db = SessionLocal()
    try:
        task = _require_task(task_id, db)
        current = work_entry_service.find_current_work_entry(task_id, db=db)
        total_time = work_entry_service.calculate_total_time(task_id, db=db)

        return TaskDetailResponse(
            id=task.id,
            name=task.name,
            completed=task.completed,
            current_entry=WorkEntryResponse.model_validate(current) if current else None,
            total_time_seconds=_seconds(total_time),
        )
    finally:
        db.close()


@router.post("/{task_id}/complete", response_model=TaskResponse)
def complete_task(task_id: int):
    db = SessionLocal()
    try:
        task_service.complete_by_id(task_id, db=db)
        db.commit()
        return _require_task(task_id, db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@router.post("/{task_id}/entries", response_model=WorkEntryResponse)
def start_work_entry(task_id: int):
    db = SessionLocal()
    try:
        _require_task(task_id, db)
        entry = work_entry_service.create_work_entry(task_id, db=db)
        db.commit()
        return entry
    except IntegrityError as exc:
        db.rollback()
        logger.info("Work entry rejected", extra={"task_id": task_id, "reason": "open_entry_exists"})
        raise HTTPException(status_code=409, detail="Open work entry already exists for task") from exc
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@router.get("/{task_id}/entries/current", response_model=WorkEntryResponse)
def get_current_work_entry(task_id: int):
    db = SessionLocal()
    try:
        entry = work_entry_service.find_current_work_entry(task_id, db=db)
        if entry is False:
            raise HTTPException(status_code=404, detail="No open work entry")
        return entry
    finally:
        db.close()


@router.post("/{task_id}/entries/{entry_id}/finish", response_model=WorkEntryResponse)
def finish_work_entry(task_id: int, entry_id: int):
    db = SessionLocal()
    try:
        entry = (
            db.query(WorkEntry)
            .filter(
                WorkEntry.id == entry_id,
                WorkEntry.task_id == task_id,
            )
            .first()
        )
        if entry is None:
            raise HTTPException(status_code=404, detail="Work entry not found")

        work_entry_service.finish_work_entry(entry.id, db=db)
        db.commit()
        db.refresh(entry)
        return entry
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@router.get("/{task_id}/total_time", response_model=TotalTimeResponse)
def get_total_time(task_id: int):
    db = SessionLocal()
    try:
        total_time = work_entry_service.calculate_total_time(task_id, db=db)
        return TotalTimeResponse(task_id=task_id, total_time_seconds=_seconds(total_time))
    finally:
        db.close()
