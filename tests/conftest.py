"""
tests/conftest.py
"""
from __future__ import annotations

from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from blogdesk import create_app


@pytest.fixture(params=["testing", "testing-database"], ids=["local", "database"])
def app(request: pytest.FixtureRequest) -> Flask:
    """
    Every API test runs against both storage backends:
    the in-memory localStorage snapshot and an in-memory SQLite database.
    """
    return create_app(request.param)


@pytest.fixture
def local_app() -> Flask:
    """Only the snapshot backend (for tests that poke at raw storage keys)."""
    return create_app("testing")


@pytest.fixture
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    with app.test_client() as client:
        yield client


@pytest.fixture
def ctx(app: Flask) -> Generator[Flask, None, None]:
    """Application context for calling services directly."""
    with app.app_context():
        yield app


@pytest.fixture
def make_post(client: FlaskClient):
    """POST /api/posts and return the created record."""
    def _make(**fields) -> dict:
        payload = {"title": "Hello World", "content": "Some words here."}
        payload.update(fields)
        rv = client.post("/api/posts", json=payload)
        assert rv.status_code == 201, rv.get_json()
        return rv.get_json()["post"]
    return _make
