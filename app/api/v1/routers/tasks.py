"""
➡️ But : Définir les endpoints de l’API des tâches.

Chaque route suit le même pipeline : décodage du corps → appel du store → encodage.

Sortie anticipée :

corps refusé → DecodeError (400, ou 500 si non classé)

échec du store → 500 avec un message fixe (un id inconnu est aussi un échec du store)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.v1.decoding import json_body, json_body_openapi
from app.api.v1.dependencies import get_task_service
from app.api.v1.encoding import empty_response, encode_tasks
from app.core.errors import ApiError
from app.db.repositories.base import StoreError
from app.domain.schemas import CreateTaskRequest, DeleteTaskRequest, TaskView, UpdateTaskRequest
from app.domain.services import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["tasks"],
    responses={
        400: {"description": "Corps de requête invalide (texte brut)"},
        500: {"description": "Erreur du store ou d'encodage (texte brut)"},
    },
)


def _store_failure(message: str) -> ApiError:
    logger.exception(message)
    return ApiError(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get(
    "/tasks",
    summary="Lister les tâches",
    response_model=List[TaskView],
)
def list_tasks(svc: TaskService = Depends(get_task_service)) -> Response:
    try:
        tasks = svc.list()
    except StoreError:
        raise _store_failure("Failed to select all tasks")
    return encode_tasks(tasks, status.HTTP_200_OK)


@router.post(
    "/task",
    summary="Créer une tâche",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskView,
    openapi_extra=json_body_openapi(CreateTaskRequest),
)
def create_task(
    payload: CreateTaskRequest = Depends(json_body(CreateTaskRequest)),
    svc: TaskService = Depends(get_task_service),
) -> Response:
    try:
        task = svc.create(payload.title)
    except StoreError:
        raise _store_failure("Failed to create new task")
    return encode_tasks(task, status.HTTP_201_CREATED)


@router.put(
    "/task",
    summary="Mettre à jour une tâche",
    response_model=TaskView,
    openapi_extra=json_body_openapi(UpdateTaskRequest),
)
@router.patch(
    "/task",
    summary="Mettre à jour une tâche (partiel)",
    response_model=TaskView,
    openapi_extra=json_body_openapi(UpdateTaskRequest),
)
def update_task(
    payload: UpdateTaskRequest = Depends(json_body(UpdateTaskRequest)),
    svc: TaskService = Depends(get_task_service),
) -> Response:
    try:
        task = svc.update(payload)
    except StoreError:
        raise _store_failure("Failed to update task")
    return encode_tasks(task, status.HTTP_200_OK)


@router.delete(
    "/task",
    summary="Supprimer une tâche",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    openapi_extra=json_body_openapi(DeleteTaskRequest),
)
def delete_task(
    payload: DeleteTaskRequest = Depends(json_body(DeleteTaskRequest)),
    svc: TaskService = Depends(get_task_service),
) -> Response:
    try:
        svc.delete(payload.id)
    except StoreError:
        raise _store_failure("Failed to delete task")
    return empty_response(status.HTTP_204_NO_CONTENT)
