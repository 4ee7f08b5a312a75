"""Pytest fixtures for the Task Tracker API tests."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.config import Settings
from app.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a private in-memory SQLite database."""
    return Settings(app_env="test", database_url="sqlite://", create_tables=True)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create a test client for the API; the lifespan creates the schema."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session(client: TestClient, app: FastAPI) -> Iterator[Session]:
    """A session on the same database the client talks to."""
    with Session(app.state.engine) as db_session:
        yield db_session
