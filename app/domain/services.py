"""
➡️ But : Faire le lien entre le store et l'API.

TaskService : appelle le TaskRepository puis projette chaque Task en TaskView.

Ne connaît ni HTTP ni JSON : les erreurs du store (StoreError) remontent telles quelles,
c'est la route qui décide du code HTTP.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import uuid
from typing import List

from app.db.models.tasks import Task
from app.db.repositories.tasks import TaskRepository
from app.domain.schemas import TaskView, UpdateTaskRequest
from app.utils.timestamps import to_rfc3339

class TaskService:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    @staticmethod
    def to_view(task: Task) -> TaskView:
        return TaskView(
            id=task.id,
            title=task.title,
            completed=task.completed,
            created_at=to_rfc3339(task.created_at),
        )

    def list(self) -> List[TaskView]:
        return [self.to_view(t) for t in self.repo.find_all()]

    def create(self, title: str) -> TaskView:
        return self.to_view(self.repo.create_task(title))

    def update(self, payload: UpdateTaskRequest) -> TaskView:
        # champ absent ou null = inchangé
        changes = {
            k: v
            for k, v in payload.model_dump(exclude={"id"}, exclude_unset=True).items()
            if v is not None
        }
        return self.to_view(self.repo.update_task(payload.id, **changes))

    def delete(self, task_id: uuid.UUID) -> None:
        self.repo.delete_task(task_id)
