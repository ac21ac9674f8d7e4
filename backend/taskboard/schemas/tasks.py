from typing import List, Optional

from pydantic import ConfigDict

from .common import CamelModel, CamelPayload

TASK_STATUSES = ("pending", "in-progress", "completed")


class Task(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: int = 0
    title: str
    status: str
    user_id: int


class TaskCreate(CamelPayload):
    title: str = ""
    status: str = ""
    user_id: int = 0


class TaskUpdate(CamelPayload):
    title: Optional[str] = None
    status: Optional[str] = None
    user_id: Optional[int] = None

    def is_empty(self) -> bool:
        return self.title is None and self.status is None and self.user_id is None


class TasksResponse(CamelModel):
    tasks: List[Task]
    count: int
