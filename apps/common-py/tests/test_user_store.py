"""Tests for the in-memory user store."""

import pytest
from pydantic import ValidationError
from usermgmt_common.models.user import User
from usermgmt_common.services.user_store import InMemoryUserStore


@pytest.mark.unit
def test_add_then_get_returns_equal_record(store: InMemoryUserStore, alice: User) -> None:
    """Test a stored user can be fetched by id."""
    store.add_user(alice)

    assert store.get_user(1) == alice


@pytest.mark.unit
def test_get_missing_user_returns_none(store: InMemoryUserStore) -> None:
    assert store.get_user(42) is None


@pytest.mark.unit
def test_list_users_preserves_insertion_order(store: InMemoryUserStore, alice: User, bob: User) -> None:
    store.add_user(bob)
    store.add_user(alice)

    assert store.list_users() == [bob, alice]


@pytest.mark.unit
def test_list_users_second_page(store: InMemoryUserStore, alice: User, bob: User) -> None:
    """Test page 2 of size 1 holds exactly the second-added user."""
    store.add_user(alice)
    store.add_user(bob)

    assert store.list_users(page=2, page_size=1) == [bob]


@pytest.mark.unit
def test_list_users_page_past_end_is_empty(store: InMemoryUserStore, alice: User) -> None:
    store.add_user(alice)

    assert store.list_users(page=3, page_size=10) == []


@pytest.mark.unit
@pytest.mark.parametrize(("page", "page_size"), [(0, 10), (-1, 10), (1, 0), (1, -5)])
def test_list_users_non_positive_arguments_are_empty(
    store: InMemoryUserStore, alice: User, bob: User, page: int, page_size: int
) -> None:
    """Test non-positive paging never wraps around to the end of the list."""
    store.add_user(alice)
    store.add_user(bob)

    assert store.list_users(page=page, page_size=page_size) == []


@pytest.mark.unit
def test_add_user_accepts_duplicate_ids(store: InMemoryUserStore, alice: User) -> None:
    """Test the store itself does not enforce id uniqueness."""
    store.add_user(alice)
    store.add_user(User(id=1, name="Alice Again", email="again@example.com"))

    assert store.count() == 2
    assert store.get_user(1) == alice


@pytest.mark.unit
def test_update_user_replaces_in_place(store: InMemoryUserStore, alice: User, bob: User) -> None:
    store.add_user(alice)
    store.add_user(bob)
    renamed = User(id=1, name="Alicia", email="alicia@example.com")

    store.update_user(1, renamed)

    assert store.list_users() == [renamed, bob]


@pytest.mark.unit
def test_update_missing_user_does_nothing(store: InMemoryUserStore, alice: User) -> None:
    store.add_user(alice)

    store.update_user(99, User(id=99, name="Nobody", email="nobody@example.com"))

    assert store.list_users() == [alice]


@pytest.mark.unit
def test_delete_user_removes_all_duplicates(store: InMemoryUserStore, alice: User, bob: User) -> None:
    store.add_user(alice)
    store.add_user(bob)
    store.add_user(User(id=1, name="Alice Again", email="again@example.com"))

    store.delete_user(1)

    assert store.get_user(1) is None
    assert store.list_users() == [bob]


@pytest.mark.unit
def test_delete_missing_user_is_a_no_op(store: InMemoryUserStore, alice: User) -> None:
    store.add_user(alice)

    store.delete_user(7)

    assert store.count() == 1


@pytest.mark.unit
def test_user_is_immutable(alice: User) -> None:
    with pytest.raises(ValidationError):
        alice.name = "Mallory"
