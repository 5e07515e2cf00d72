"""Pytest configuration and fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from usermgmt.config import Settings
from usermgmt.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings independent of any local .env file."""
    return Settings(_env_file=None, environment="test", ui_url="http://localhost:5173")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Fresh application with an empty store."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def alice_payload() -> dict:
    return {"id": 1, "name": "Alice", "email": "alice@example.com"}


@pytest.fixture
def bob_payload() -> dict:
    return {"id": 2, "name": "Bob", "email": "bob@example.com"}
