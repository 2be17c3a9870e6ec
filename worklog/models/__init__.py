from worklog.models.task import Task
from worklog.models.work_entry import WorkEntry

__all__ = [
    "Task",
    "WorkEntry",
]
