from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class WorkEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    task_id: Optional[int]
    started_on: Optional[datetime]
    finished_on: Optional[datetime]
