"""User store with an in-memory implementation."""

import logging
from abc import ABC, abstractmethod

from usermgmt_common.models.user import User

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Abstract interface for user storage.

    Store operations never raise for missing records: absence is reported as
    ``None`` or an empty list.
    """

    @abstractmethod
    def list_users(self, page: int = 1, page_size: int = 10) -> list[User]:
        """List one page of users in insertion order."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Get the first user with the given ID."""
        pass

    @abstractmethod
    def add_user(self, user: User) -> None:
        """Add a user."""
        pass

    @abstractmethod
    def update_user(self, user_id: int, user: User) -> None:
        """Replace the user with the given ID."""
        pass

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Delete every user with the given ID."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored users."""
        pass


class InMemoryUserStore(UserStore):
    """List-backed implementation of UserStore.

    Records live for the lifetime of the owning application. There is no
    locking; callers on a single event loop never interleave inside a call.
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: list[User] = list(users or [])

    def list_users(self, page: int = 1, page_size: int = 10) -> list[User]:
        """List one page of users.

        Args:
            page: 1-based page number
            page_size: Maximum number of users on the page

        Returns:
            Users from offset ``(page - 1) * page_size``; empty when the page
            is past the end or either argument is not positive
        """
        if page < 1 or page_size < 1:
            return []
        start = (page - 1) * page_size
        return self._users[start : start + page_size]

    def get_user(self, user_id: int) -> User | None:
        return next((user for user in self._users if user.id == user_id), None)

    def add_user(self, user: User) -> None:
        self._users.append(user)
        logger.debug("Added user %s (total=%d)", user.id, len(self._users))

    def update_user(self, user_id: int, user: User) -> None:
        for index, existing in enumerate(self._users):
            if existing.id == user_id:
                self._users[index] = user
                logger.debug("Updated user %s at position %d", user_id, index)
                return

    def delete_user(self, user_id: int) -> None:
        before = len(self._users)
        self._users = [user for user in self._users if user.id != user_id]
        logger.debug("Deleted %d record(s) for user %s", before - len(self._users), user_id)

    def count(self) -> int:
        return len(self._users)
