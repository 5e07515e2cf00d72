"""Middleware setup for the FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from usermgmt.config import Settings
from usermgmt.exceptions import ProblemResponseMiddleware
from usermgmt.logging_middleware import RequestResponseLoggingMiddleware

logger = logging.getLogger(__name__)

DEV_ENVIRONMENTS = {"development", "dev", "local"}


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Get list of allowed CORS origins based on configuration.

    Args:
        ui_url: URL of the UI application
        environment: Environment name (development, production, etc.)

    Returns:
        List of allowed origin URLs
    """
    allowed_origins: list[str] = []

    if ui_url:
        allowed_origins.append(ui_url.rstrip("/"))

    if environment.lower() in DEV_ENVIRONMENTS:
        allowed_origins.extend(["http://localhost:5173", "http://localhost:3000"])

    # Deduplicate while preserving order
    return list(dict.fromkeys(allowed_origins))


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup middleware for the FastAPI application.

    Starlette wraps each added middleware around the previous ones. The
    problem layer goes innermost so CORS headers and logging apply to 500
    responses too; the logging middleware goes outermost so it sees every
    request and response, including CORS preflight replies.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    allowed_origins = get_allowed_origins(settings.ui_url, settings.environment)

    app.add_middleware(ProblemResponseMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )
    app.add_middleware(RequestResponseLoggingMiddleware, log_bodies=settings.log_request_bodies)

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, settings.environment)
