"""Pytest configuration for common-py tests."""

import pytest
from usermgmt_common.models.user import User
from usermgmt_common.services.user_store import InMemoryUserStore


@pytest.fixture
def alice() -> User:
    return User(id=1, name="Alice", email="alice@example.com")


@pytest.fixture
def bob() -> User:
    return User(id=2, name="Bob", email="bob@example.com")


@pytest.fixture
def store() -> InMemoryUserStore:
    """Empty in-memory store."""
    return InMemoryUserStore()
