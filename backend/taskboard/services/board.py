"""
Business rules for users and tasks.

The service depends on the BoardStore protocol rather than on MemoryStore,
so any backend offering the same operations can be plugged in.
"""

import logging
import re
from typing import List, Optional, Protocol

from ..core.errors import (
    EmailTakenError,
    InvalidStatusError,
    InvalidUserError,
    NoUpdateFieldsError,
    NotFoundError,
)
from ..db.store import DuplicateEmailError, TaskNotFoundError
from ..schemas.stats import Stats
from ..schemas.tasks import TASK_STATUSES, Task, TaskUpdate
from ..schemas.users import User

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


class BoardStore(Protocol):
    def list_users(self) -> List[User]: ...
    def get_user(self, user_id: int) -> Optional[User]: ...
    # raises DuplicateEmailError when the email is already in use
    def create_user(self, user: User) -> User: ...

    def list_tasks(self) -> List[Task]: ...
    def create_task(self, task: Task) -> Task: ...

    def update_task(
        self,
        task_id: int,
        *,
        title: Optional[str] = None,
        status: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> Task: ...

    def stats(self) -> Stats: ...


def parse_int(value: str) -> Optional[int]:
    """Strict decimal parse: optional sign and digits, nothing else."""
    if not _INT_RE.fullmatch(value):
        return None
    return int(value)


def is_valid_status(status: str) -> bool:
    return status in TASK_STATUSES


class BoardService:
    def __init__(self, store: BoardStore) -> None:
        self.store = store

    def list_users(self) -> List[User]:
        return self.store.list_users()

    def get_user(self, user_id: int) -> User:
        user = self.store.get_user(user_id)
        if user is None:
            raise NotFoundError(f"user {user_id} not found")
        return user

    def create_user(self, user: User) -> User:
        try:
            return self.store.create_user(user)
        except DuplicateEmailError as exc:
            raise EmailTakenError() from exc

    def list_tasks(self, status: str = "", user_id: str = "") -> List[Task]:
        tasks = self.store.list_tasks()
        if not status and not user_id:
            return tasks

        uid = None
        if user_id:
            uid = parse_int(user_id)
            # a non-numeric userId filter matches nothing
            if uid is None:
                return []

        return [
            task
            for task in tasks
            if (not status or task.status == status) and (uid is None or task.user_id == uid)
        ]

    def create_task(self, task: Task) -> Task:
        if not is_valid_status(task.status):
            logger.debug("Rejected task %r: invalid status %r", task.title, task.status)
            raise InvalidStatusError()
        if self.store.get_user(task.user_id) is None:
            logger.debug("Rejected task %r: unknown user %d", task.title, task.user_id)
            raise InvalidUserError()
        return self.store.create_task(task)

    def update_task(self, task_id: int, update: TaskUpdate) -> Task:
        if update.is_empty():
            raise NoUpdateFieldsError()
        if update.status is not None and not is_valid_status(update.status):
            logger.debug("Rejected update of task %d: invalid status %r", task_id, update.status)
            raise InvalidStatusError()
        if update.user_id is not None and self.store.get_user(update.user_id) is None:
            logger.debug("Rejected update of task %d: unknown user %d", task_id, update.user_id)
            raise InvalidUserError()

        try:
            return self.store.update_task(
                task_id,
                title=update.title,
                status=update.status,
                user_id=update.user_id,
            )
        except TaskNotFoundError as exc:
            raise NotFoundError(f"task {task_id} not found") from exc

    def stats(self) -> Stats:
        return self.store.stats()
