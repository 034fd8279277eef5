# app/db/repositories/tasks.py
import logging
import uuid
from typing import List

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.tasks import Task

logger = logging.getLogger(__name__)


class TaskRepository(BaseRepository[Task]):
    """Store des tâches : find-all, create, update-by-fields, delete-by-id."""
    model = Task

    def find_all(self) -> List[Task]:
        stmt = select(Task).order_by(Task.created_at, Task.id)
        with self._guard("find all tasks"):
            return list(self.session.exec(stmt).all())

    def create_task(self, title: str) -> Task:
        task = self.create(title=title)
        logger.debug("Task %s created", task.id)
        return task

    def update_task(self, task_id: uuid.UUID, **changes) -> Task:
        """
        Applique seulement les champs fournis (title, completed).
        Lève NotFoundError si l'id n'existe pas.
        """
        task = self.get_or_raise(task_id)
        if not changes:
            return task
        task = self.update(task, **changes)
        logger.debug("Task %s updated: %s", task_id, sorted(changes))
        return task

    def delete_task(self, task_id: uuid.UUID) -> None:
        task = self.get_or_raise(task_id)
        self.delete(task)
        logger.debug("Task %s deleted", task_id)
