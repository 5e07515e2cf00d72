"""Common services package."""

from usermgmt_common.services.user_store import InMemoryUserStore, UserStore
from usermgmt_common.services.validation import validate_user

__all__ = [
    "InMemoryUserStore",
    "UserStore",
    "validate_user",
]
