"""Common models package."""

from usermgmt_common.models.user import FieldError, User

__all__ = [
    "FieldError",
    "User",
]
