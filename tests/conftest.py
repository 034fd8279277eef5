# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.db.session import get_session, init_db
from app.main import app


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """
    In-memory SQLite shared by every connection of the test (StaticPool),
    so the tables created here are visible to the request sessions.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine: Engine) -> Iterator[TestClient]:
    """
    TestClient wired to the in-memory engine.

    Used without the context manager on purpose: the startup hook (logging
    setup + init_db on the configured database) must not run in tests.
    """

    def _get_session() -> Iterator[Session]:
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
