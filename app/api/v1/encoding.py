"""
➡️ But : Sérialiser une TaskView (ou une liste) en réponse JSON avec le code HTTP voulu.

Le corps est entièrement sérialisé AVANT de construire la réponse :
si la sérialisation échoue, le client reçoit un seul statut (500) et non un 200 suivi d'une erreur.
"""

import logging
from typing import List, Sequence, Union

from fastapi import Response, status
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from app.core.errors import ApiError
from app.domain.schemas import TaskView

logger = logging.getLogger(__name__)

MSG_ENCODE_FAILED = "Failed to marshal task response"

_task_list = TypeAdapter(List[TaskView])


def encode_tasks(data: Union[TaskView, Sequence[TaskView]], status_code: int) -> Response:
    try:
        if isinstance(data, TaskView):
            body = data.model_dump_json().encode("utf-8")
        else:
            body = _task_list.dump_json(list(data))
    except (PydanticSerializationError, TypeError, ValueError):
        logger.error("Could not serialize task response", exc_info=True)
        raise ApiError(MSG_ENCODE_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(content=body, status_code=status_code, media_type="application/json")


def empty_response(status_code: int = status.HTTP_204_NO_CONTENT) -> Response:
    return Response(status_code=status_code)
