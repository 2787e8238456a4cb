"""Pytest fixtures: an in-memory SQLite store shared by the app and the tests.

``StaticPool`` keeps a single connection so every session sees the same
in-memory database. The app's ``get_db`` dependency is overridden to hand out
sessions bound to that engine.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from budgetbook.database import get_db, init_db
from budgetbook.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def alice(client) -> dict:
    """A stored user."""
    resp = client.post("/users", json={"username": "alice", "name": "Alice", "pin": 1234})
    assert resp.status_code == 200
    return resp.json()
