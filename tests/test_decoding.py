# tests/test_decoding.py

from __future__ import annotations

import uuid

import pytest

from app.api.v1.decoding import (
    MSG_BAD_CONTENT_TYPE,
    MSG_DECODE_FAILED,
    MSG_INVALID_TYPE,
    MSG_INVALID_VALUE,
    MSG_MALFORMED_JSON,
    MSG_UNKNOWN_FIELD,
    decode_request,
)
from app.core.errors import DecodeError
from app.domain.schemas import CreateTaskRequest, DeleteTaskRequest, UpdateTaskRequest

JSON = "application/json"


def _reject(model, body: bytes, content_type: str | None = JSON) -> DecodeError:
    with pytest.raises(DecodeError) as exc_info:
        decode_request(model, body, content_type)
    return exc_info.value


def test_decodes_create_request() -> None:
    req = decode_request(CreateTaskRequest, b'{"title": "Buy milk"}', JSON)
    assert req.title == "Buy milk"


@pytest.mark.parametrize("content_type", [None, "", "application/json; charset=utf-8"])
def test_accepts_missing_or_parameterized_content_type(content_type: str | None) -> None:
    req = decode_request(CreateTaskRequest, b'{"title": "x"}', content_type)
    assert req.title == "x"


@pytest.mark.parametrize("content_type", ["text/plain", "application/x-www-form-urlencoded"])
def test_rejects_non_json_content_type(content_type: str) -> None:
    err = _reject(CreateTaskRequest, b'{"title": "x"}', content_type)
    assert err.status_code == 400
    assert err.message == MSG_BAD_CONTENT_TYPE


@pytest.mark.parametrize("body", [b'{"title": ', b"{title: 'x'}", b'{"title": "x"} trailing'])
def test_rejects_malformed_json(body: bytes) -> None:
    err = _reject(CreateTaskRequest, body)
    assert err.status_code == 400
    assert err.message == MSG_MALFORMED_JSON


def test_unknown_field_wins_over_other_field_errors() -> None:
    err = _reject(CreateTaskRequest, b'{"title": 5, "priority": 1}')
    assert err.status_code == 400
    assert err.message == MSG_UNKNOWN_FIELD


def test_unknown_field_on_otherwise_valid_body() -> None:
    body = ('{"id": "%s", "description": "nope"}' % uuid.uuid4()).encode()
    err = _reject(DeleteTaskRequest, body)
    assert err.status_code == 400
    assert err.message == MSG_UNKNOWN_FIELD


@pytest.mark.parametrize(
    "model, body",
    [
        (CreateTaskRequest, b'{"title": 5}'),
        (CreateTaskRequest, b'{"title": null}'),
        (CreateTaskRequest, b'["title"]'),
        (DeleteTaskRequest, b'{"id": 42}'),
        (DeleteTaskRequest, b'{"id": "not-a-uuid"}'),
        (UpdateTaskRequest, ('{"id": "%s", "completed": "true"}' % uuid.uuid4()).encode()),
    ],
)
def test_rejects_type_mismatch(model, body: bytes) -> None:
    err = _reject(model, body)
    assert err.status_code == 400
    assert err.message == MSG_INVALID_TYPE


def test_rejects_missing_required_field() -> None:
    err = _reject(DeleteTaskRequest, b"{}")
    assert err.status_code == 400
    assert err.message == MSG_INVALID_VALUE


def test_empty_body_is_an_internal_error() -> None:
    err = _reject(CreateTaskRequest, b"  ")
    assert err.status_code == 500
    assert err.message == MSG_DECODE_FAILED


def test_client_error_messages_are_distinct() -> None:
    messages = [MSG_BAD_CONTENT_TYPE, MSG_MALFORMED_JSON, MSG_INVALID_TYPE, MSG_UNKNOWN_FIELD, MSG_INVALID_VALUE]
    assert len(set(messages)) == len(messages)


def test_update_keeps_track_of_provided_fields() -> None:
    task_id = uuid.uuid4()
    req = decode_request(UpdateTaskRequest, ('{"id": "%s", "completed": true}' % task_id).encode(), JSON)
    assert req.id == task_id
    assert req.completed is True
    assert req.title is None
    assert req.model_fields_set == {"id", "completed"}
