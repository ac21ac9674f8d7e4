from pydantic import Field

from .common import CamelModel


class UserStats(CamelModel):
    total: int = 0


class TaskStats(CamelModel):
    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0


class Stats(CamelModel):
    users: UserStats = Field(default_factory=UserStats)
    tasks: TaskStats = Field(default_factory=TaskStats)
