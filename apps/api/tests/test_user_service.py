"""Tests for the explicit-result user service."""

import pytest
from usermgmt.services.user_service import ID_MISMATCH, UserOutcome, UserService
from usermgmt_common.models.user import User
from usermgmt_common.services.user_store import InMemoryUserStore

pytestmark = pytest.mark.unit

ALICE = User(id=1, name="Alice", email="alice@example.com")


@pytest.fixture
def service() -> UserService:
    return UserService(InMemoryUserStore())


def test_create_then_get(service: UserService) -> None:
    created = service.create_user(ALICE)

    assert created.ok
    assert service.get_user(1).user == ALICE


def test_create_invalid_user_reports_errors(service: UserService) -> None:
    result = service.create_user(User(id=1, name="", email="alice@example.com"))

    assert result.outcome is UserOutcome.INVALID
    assert [error.property_name for error in result.errors] == ["name"]
    assert service.store.count() == 0


def test_create_duplicate_is_conflict(service: UserService) -> None:
    service.create_user(ALICE)

    assert service.create_user(ALICE).outcome is UserOutcome.CONFLICT
    assert service.store.count() == 1


def test_replace_missing_user_is_not_found(service: UserService) -> None:
    assert service.replace_user(1, ALICE).outcome is UserOutcome.NOT_FOUND


def test_replace_reports_id_mismatch_with_other_errors(service: UserService) -> None:
    service.create_user(ALICE)

    result = service.replace_user(1, User(id=2, name="Alice", email="broken"))

    assert result.outcome is UserOutcome.INVALID
    assert [(error.property_name, error.error_message) for error in result.errors][-1] == ("id", ID_MISMATCH)
    assert len(result.errors) == 2


def test_remove_user(service: UserService) -> None:
    service.create_user(ALICE)

    assert service.remove_user(1).ok
    assert service.get_user(1).outcome is UserOutcome.NOT_FOUND
    assert service.remove_user(1).outcome is UserOutcome.NOT_FOUND
