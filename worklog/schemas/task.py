from typing import Optional

from pydantic import BaseModel, ConfigDict

from worklog.schemas.work_entry import WorkEntryResponse


class TaskCreate(BaseModel):
    name: str


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    completed: Optional[bool]


class TaskDetailResponse(TaskResponse):
    current_entry: Optional[WorkEntryResponse] = None
    total_time_seconds: float = 0.0


class TotalTimeResponse(BaseModel):
    task_id: int
    total_time_seconds: float
