"""Service initialization and dependency injection."""

from fastapi import Depends, Request
from usermgmt.config import Settings
from usermgmt.services.user_service import UserService
from usermgmt_common.services.user_store import UserStore


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings


def get_user_store(request: Request) -> UserStore:
    """Get the user store owned by the running application.

    Args:
        request: Incoming request

    Returns:
        UserStore created by ``create_app``
    """
    return request.app.state.user_store


def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    """Get a user service bound to the application's store.

    Args:
        store: User store

    Returns:
        UserService instance
    """
    return UserService(store)
