"""
➡️ But : Décoder le corps JSON brut d'une requête vers un modèle Pydantic.

Un seul validateur partagé par les trois formes de requête (create / update / delete) :
le modèle cible porte la liste des champs requis/optionnels, decode_request() classe les échecs.

Classement des erreurs :

content-type présent mais pas JSON → 400

corps vide → 500 (échec de décodage non classé)

JSON mal formé → 400

champ inconnu → 400 (prioritaire sur les autres erreurs de champ)

mauvais type de champ → 400

champ requis manquant / valeur refusée → 400

le reste → 500
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Type, TypeVar

from fastapi import Request, status
from pydantic import BaseModel, ValidationError

from app.core.errors import DecodeError

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)

MSG_BAD_CONTENT_TYPE = "content-Type must be application/json"
MSG_MALFORMED_JSON = "invalid JSON format: malformed JSON structure"
MSG_INVALID_TYPE = "invalid field type"
MSG_UNKNOWN_FIELD = "invalid request format"
MSG_INVALID_VALUE = "missing or invalid field value"
MSG_DECODE_FAILED = "failed to unmarshall request"

_VALUE_ERRORS = {"missing", "string_too_short", "string_too_long", "value_error"}


def _is_type_error(err_type: str) -> bool:
    return err_type.endswith("_type") or err_type.endswith("_parsing")


def _classify(exc: ValidationError) -> DecodeError:
    types = {e["type"] for e in exc.errors()}
    bad_request = status.HTTP_400_BAD_REQUEST

    if "json_invalid" in types:
        return DecodeError(MSG_MALFORMED_JSON, bad_request)
    if "extra_forbidden" in types:
        return DecodeError(MSG_UNKNOWN_FIELD, bad_request)
    if any(_is_type_error(t) for t in types):
        return DecodeError(MSG_INVALID_TYPE, bad_request)
    if types <= _VALUE_ERRORS:
        return DecodeError(MSG_INVALID_VALUE, bad_request)
    return DecodeError(MSG_DECODE_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)


def decode_request(model: Type[RequestT], body: bytes, content_type: Optional[str]) -> RequestT:
    """
    Retourne une instance de `model` remplie depuis `body`, ou lève DecodeError.
    Un content-type absent est accepté ; s'il est présent il doit commencer par application/json.
    """
    if content_type and not content_type.strip().lower().startswith("application/json"):
        logger.info("Rejected %s body: content-type %r", model.__name__, content_type)
        raise DecodeError(MSG_BAD_CONTENT_TYPE, status.HTTP_400_BAD_REQUEST)

    if not body.strip():
        logger.info("Rejected %s body: empty", model.__name__)
        raise DecodeError(MSG_DECODE_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        err = _classify(exc)
        logger.info("Rejected %s body: %s (%d error(s))", model.__name__, err.message, exc.error_count())
        raise err


def json_body(model: Type[RequestT]) -> Callable[[Request], Awaitable[RequestT]]:
    """
    Dépendance FastAPI : lit le corps brut et le décode via decode_request().
    Utilisation :
        def route(payload: CreateTaskRequest = Depends(json_body(CreateTaskRequest))):
            ...
    """

    async def dependency(request: Request) -> RequestT:
        body = await request.body()
        return decode_request(model, body, request.headers.get("content-type"))

    return dependency


def json_body_openapi(model: Type[BaseModel]) -> Dict[str, Any]:
    """Le corps n'étant pas un paramètre FastAPI, on publie son schéma dans openapi_extra."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
