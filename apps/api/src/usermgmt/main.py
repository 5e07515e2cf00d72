"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from usermgmt.config import Settings, get_settings
from usermgmt.exceptions import register_exception_handlers
from usermgmt.middleware import setup_middleware
from usermgmt.routes import api_router
from usermgmt_common.services.user_store import InMemoryUserStore, UserStore

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    app_settings: Settings = app.state.settings
    logger.info(f"{app_settings.app_name} v{app_settings.app_version} started")
    logger.info(f"Environment: {app_settings.environment}")
    logger.info(f"Log level: {app_settings.log_level}")

    yield

    logger.info(f"{app_settings.app_name} shutting down ({app.state.user_store.count()} users discarded)")


def create_app(app_settings: Settings | None = None, store: UserStore | None = None) -> FastAPI:
    """Create a FastAPI application that owns its own user store.

    Args:
        app_settings: Settings to use, defaults to the module settings
        store: User store to serve, defaults to a new empty in-memory store

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description="User Management API - in-memory user CRUD service",
        version=app_settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = app_settings
    app.state.user_store = store if store is not None else InMemoryUserStore()

    # Setup middleware (must be before exception handlers)
    setup_middleware(app, app_settings)
    register_exception_handlers(app)

    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "usermgmt.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment.lower() == "development",
        log_level=settings.log_level.lower(),
    )
