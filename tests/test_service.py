# tests/test_service.py

from typing import List, Optional

import pytest

from taskboard.core.errors import (
    EmailTakenError,
    InvalidStatusError,
    InvalidUserError,
    NoUpdateFieldsError,
    NotFoundError,
)
from taskboard.db.store import MemoryStore, TaskNotFoundError
from taskboard.schemas.stats import Stats
from taskboard.schemas.tasks import Task, TaskUpdate
from taskboard.schemas.users import User
from taskboard.services.board import BoardService, parse_int


class FakeStore:
    """
    Minimal BoardStore that records calls.

    Proves the service works against any object offering the store operations.
    """

    def __init__(self) -> None:
        self.users = {1: User(id=1, name="Ann", email="ann@example.com", role="dev")}
        self.tasks: List[Task] = []
        self.calls: List[str] = []

    def list_users(self) -> List[User]:
        return list(self.users.values())

    def get_user(self, user_id: int) -> Optional[User]:
        self.calls.append(f"get_user:{user_id}")
        return self.users.get(user_id)

    def create_user(self, user: User) -> User:
        return user

    def list_tasks(self) -> List[Task]:
        return list(self.tasks)

    def create_task(self, task: Task) -> Task:
        self.calls.append("create_task")
        return task.model_copy(update={"id": 100})

    def update_task(self, task_id, *, title=None, status=None, user_id=None) -> Task:
        self.calls.append("update_task")
        raise TaskNotFoundError(task_id)

    def stats(self) -> Stats:
        return Stats()


def test_parse_int() -> None:
    assert parse_int("42") == 42
    assert parse_int("-3") == -3
    assert parse_int("+7") == 7
    for bad in ("", "abc", "1.5", " 1", "1_000", "٣"):
        assert parse_int(bad) is None


def test_get_user(service: BoardService) -> None:
    assert service.get_user(3).email == "bob@example.com"
    with pytest.raises(NotFoundError):
        service.get_user(42)


def test_list_tasks_without_filters(service: BoardService) -> None:
    assert [t.id for t in service.list_tasks()] == [1, 2, 3]


def test_list_tasks_by_status(service: BoardService) -> None:
    tasks = service.list_tasks(status="completed")
    assert [t.status for t in tasks] == ["completed"]


def test_list_tasks_by_user(service: BoardService) -> None:
    service.create_task(Task(title="more", status="pending", user_id=2))
    tasks = service.list_tasks(user_id="2")
    assert {t.user_id for t in tasks} == {2}
    assert len(tasks) == 2


def test_list_tasks_by_status_and_user(service: BoardService) -> None:
    service.create_task(Task(title="more", status="pending", user_id=2))
    tasks = service.list_tasks(status="pending", user_id="2")
    assert [t.title for t in tasks] == ["more"]


def test_list_tasks_non_numeric_user_matches_nothing(service: BoardService) -> None:
    assert service.list_tasks(user_id="abc") == []
    assert service.list_tasks(status="pending", user_id="abc") == []


def test_list_tasks_unknown_status(service: BoardService) -> None:
    assert service.list_tasks(status="archived") == []


def test_create_task(service: BoardService) -> None:
    created = service.create_task(Task(title="Write docs", status="pending", user_id=1))
    assert created.id == 4


def test_create_task_invalid_status_leaves_store_untouched(store: MemoryStore, service: BoardService) -> None:
    with pytest.raises(InvalidStatusError):
        service.create_task(Task(title="x", status="done", user_id=1))
    assert len(store.list_tasks()) == 3


def test_create_task_unknown_user(store: MemoryStore, service: BoardService) -> None:
    with pytest.raises(InvalidUserError):
        service.create_task(Task(title="x", status="pending", user_id=99))
    assert len(store.list_tasks()) == 3


def test_update_requires_a_field(service: BoardService) -> None:
    with pytest.raises(NoUpdateFieldsError):
        service.update_task(1, TaskUpdate())


def test_update_rejects_invalid_status(service: BoardService) -> None:
    with pytest.raises(InvalidStatusError):
        service.update_task(1, TaskUpdate(status="blocked"))


def test_update_rejects_unknown_user(service: BoardService) -> None:
    with pytest.raises(InvalidUserError):
        service.update_task(1, TaskUpdate(userId=0))


def test_update_unknown_task(service: BoardService) -> None:
    with pytest.raises(NotFoundError):
        service.update_task(999, TaskUpdate(title="x"))


def test_update_reassigns_user(service: BoardService) -> None:
    updated = service.update_task(1, TaskUpdate(userId=3))
    assert updated.user_id == 3
    assert updated.status == "pending"


def test_service_against_fake_store() -> None:
    fake = FakeStore()
    service = BoardService(fake)

    created = service.create_task(Task(title="x", status="in-progress", user_id=1))
    assert created.id == 100
    assert fake.calls == ["get_user:1", "create_task"]

    with pytest.raises(NotFoundError):
        service.update_task(5, TaskUpdate(title="y"))
    assert fake.calls[-1] == "update_task"


def test_validation_happens_before_store_update() -> None:
    fake = FakeStore()
    service = BoardService(fake)
    with pytest.raises(InvalidUserError):
        service.update_task(5, TaskUpdate(userId=2))
    assert "update_task" not in fake.calls


def test_stats_passthrough(service: BoardService) -> None:
    assert service.stats().tasks.total == 3


def test_create_user_with_taken_email(store: MemoryStore, service: BoardService) -> None:
    with pytest.raises(EmailTakenError):
        service.create_user(User(name="Jane Again", email="jane@example.com", role="designer"))
    assert len(store.list_users()) == 3


def test_update_payload_binds_camel_case_only() -> None:
    assert TaskUpdate.model_validate({"user_id": 2}).is_empty()
    assert TaskUpdate.model_validate({"userId": 2}).user_id == 2
