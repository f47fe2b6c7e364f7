"""Shared fixtures: an app over in-memory SQLite with injected settings."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from balance_tracker.core.config import Settings, StartupPolicy
from balance_tracker.main import create_app

ADMIN_PASSWORD = "chalkboard"


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite://",
        "admin_password": ADMIN_PASSWORD,
        "startup_policy": StartupPolicy.NONE,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def settings() -> Settings:
    return make_settings()


@pytest.fixture()
def client(settings: Settings):
    """Client over an empty database."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture()
def seeded_client():
    """Client over a database seeded with the demo students."""
    with TestClient(create_app(make_settings(startup_policy=StartupPolicy.SEED_IF_EMPTY))) as test_client:
        yield test_client


@pytest.fixture()
def session(client: TestClient):
    """A session bound to the same database the client uses."""
    db = client.app.state.context.session_factory()
    try:
        yield db
    finally:
        db.close()


def create(client: TestClient, code, name="Noa Friedman", balance=0):
    return client.post("/api/create-student", json={"id": code, "name": name, "balance": balance}).json()


def roster(client: TestClient) -> list[dict]:
    return client.get("/api/students").json()
