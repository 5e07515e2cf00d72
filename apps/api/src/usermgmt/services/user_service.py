"""User service: validation and store access with explicit results."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from usermgmt_common.models.user import FieldError, User
from usermgmt_common.services.user_store import UserStore
from usermgmt_common.services.validation import validate_user

logger = logging.getLogger(__name__)

ID_MISMATCH = "Id in body must match id in path."


class UserOutcome(str, Enum):
    """How a user operation ended."""

    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    CONFLICT = "conflict"


@dataclass
class UserResult:
    """Result of a user operation."""

    outcome: UserOutcome
    user: User | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome is UserOutcome.OK


class UserService:
    """Applies validation and existence checks around a UserStore.

    Failures are returned as ``UserResult`` values; nothing here raises for
    a missing or invalid user.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def list_users(self, page: int, page_size: int) -> list[User]:
        return self.store.list_users(page, page_size)

    def get_user(self, user_id: int) -> UserResult:
        user = self.store.get_user(user_id)
        if user is None:
            return UserResult(UserOutcome.NOT_FOUND)
        return UserResult(UserOutcome.OK, user=user)

    def create_user(self, user: User) -> UserResult:
        """Validate and add a new user.

        Args:
            user: User to add

        Returns:
            ``INVALID`` with field errors, ``CONFLICT`` if the ID is taken,
            otherwise ``OK`` with the stored user
        """
        errors = validate_user(user)
        if errors:
            return UserResult(UserOutcome.INVALID, errors=errors)

        if self.store.get_user(user.id) is not None:
            logger.info("Rejected duplicate user id %s", user.id)
            return UserResult(UserOutcome.CONFLICT, user=user)

        self.store.add_user(user)
        return UserResult(UserOutcome.OK, user=user)

    def replace_user(self, user_id: int, user: User) -> UserResult:
        """Replace an existing user wholesale.

        Existence is checked before validation, so an unknown ID is reported
        as ``NOT_FOUND`` even when the body is also invalid.
        """
        if self.store.get_user(user_id) is None:
            return UserResult(UserOutcome.NOT_FOUND)

        errors = validate_user(user)
        if user.id != user_id:
            errors.append(FieldError(property_name="id", error_message=ID_MISMATCH))
        if errors:
            return UserResult(UserOutcome.INVALID, errors=errors)

        self.store.update_user(user_id, user)
        return UserResult(UserOutcome.OK, user=user)

    def remove_user(self, user_id: int) -> UserResult:
        if self.store.get_user(user_id) is None:
            return UserResult(UserOutcome.NOT_FOUND)

        self.store.delete_user(user_id)
        return UserResult(UserOutcome.OK)
