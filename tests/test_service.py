# tests/test_service.py

from __future__ import annotations

import uuid
from datetime import datetime

from sqlmodel import Session

from app.db.models.tasks import Task
from app.db.repositories.tasks import TaskRepository
from app.domain.schemas import UpdateTaskRequest
from app.domain.services import TaskService


def test_to_view_projects_record() -> None:
    task = Task(id=uuid.uuid4(), title="Buy milk", completed=True, created_at=datetime(2025, 1, 1, 10, 0))

    view = TaskService.to_view(task)

    assert view.id == task.id
    assert view.title == "Buy milk"
    assert view.completed is True
    assert view.created_at == "2025-01-01T10:00:00Z"


def test_to_view_without_timestamp() -> None:
    task = Task(title="draft", created_at=None)

    assert TaskService.to_view(task).created_at is None


def test_update_ignores_unset_and_null_fields(session: Session) -> None:
    svc = TaskService(TaskRepository(session))
    created = svc.create("Buy milk")

    view = svc.update(UpdateTaskRequest(id=created.id, title=None, completed=True))

    assert view.title == "Buy milk"
    assert view.completed is True
    assert [v.id for v in svc.list()] == [created.id]
