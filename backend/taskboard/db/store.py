"""In-memory storage for users and tasks.

All collections sit behind one ReadWriteLock. Stored entities are frozen
pydantic models, so handing them out never exposes mutable state; the lists
themselves are copied on every read.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from ..schemas.stats import Stats
from ..schemas.tasks import Task
from ..schemas.users import User

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    pass


class DuplicateEmailError(ValueError):
    pass


class ReadWriteLock:
    """Many readers or one writer. Waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


DEMO_USERS = [
    User(id=1, name="John Doe", email="john@example.com", role="developer"),
    User(id=2, name="Jane Smith", email="jane@example.com", role="designer"),
    User(id=3, name="Bob Johnson", email="bob@example.com", role="manager"),
]

DEMO_TASKS = [
    Task(id=1, title="Implement authentication", status="pending", user_id=1),
    Task(id=2, title="Design user interface", status="in-progress", user_id=2),
    Task(id=3, title="Review code changes", status="completed", user_id=3),
]


def _next_id(items) -> int:
    return max((item.id for item in items), default=0) + 1


class MemoryStore:
    def __init__(self, users: Iterable[User] = (), tasks: Iterable[Task] = ()) -> None:
        self._lock = ReadWriteLock()
        self._users: List[User] = list(users)
        self._tasks: List[Task] = list(tasks)

    @classmethod
    def seeded(cls) -> "MemoryStore":
        return cls(DEMO_USERS, DEMO_TASKS)

    # ---- users ----

    def list_users(self) -> List[User]:
        with self._lock.read():
            return list(self._users)

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock.read():
            for user in self._users:
                if user.id == user_id:
                    return user
        return None

    def create_user(self, user: User) -> User:
        """Append *user* with a fresh id. Raises DuplicateEmailError if the email is taken."""
        with self._lock.write():
            if any(existing.email == user.email for existing in self._users):
                raise DuplicateEmailError(user.email)
            stored = user.model_copy(update={"id": _next_id(self._users)})
            self._users.append(stored)
        logger.debug("Created user %d (%s)", stored.id, stored.email)
        return stored

    # ---- tasks ----

    def list_tasks(self) -> List[Task]:
        with self._lock.read():
            return list(self._tasks)

    def create_task(self, task: Task) -> Task:
        with self._lock.write():
            stored = task.model_copy(update={"id": _next_id(self._tasks)})
            self._tasks.append(stored)
        logger.debug("Created task %d for user %d", stored.id, stored.user_id)
        return stored

    def update_task(
        self,
        task_id: int,
        *,
        title: Optional[str] = None,
        status: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> Task:
        changes = {}
        if title is not None:
            changes["title"] = title
        if status is not None:
            changes["status"] = status
        if user_id is not None:
            changes["user_id"] = user_id

        with self._lock.write():
            for i, task in enumerate(self._tasks):
                if task.id != task_id:
                    continue
                updated = task.model_copy(update=changes)
                self._tasks[i] = updated
                break
            else:
                raise TaskNotFoundError(f"task {task_id} not found")
        logger.debug("Updated task %d: %s", task_id, sorted(changes))
        return updated

    def stats(self) -> Stats:
        stats = Stats()
        with self._lock.read():
            stats.users.total = len(self._users)
            stats.tasks.total = len(self._tasks)
            for task in self._tasks:
                if task.status == "pending":
                    stats.tasks.pending += 1
                elif task.status == "in-progress":
                    stats.tasks.in_progress += 1
                elif task.status == "completed":
                    stats.tasks.completed += 1
        return stats
