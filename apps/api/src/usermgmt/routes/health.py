"""Health check routes."""

from fastapi import APIRouter, Depends
from usermgmt.config import Settings
from usermgmt.models.health import HealthCheckResponse
from usermgmt.services import get_app_settings, get_user_store
from usermgmt_common.services.user_store import UserStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    store: UserStore = Depends(get_user_store),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and the number of stored users
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        user_count=store.count(),
    )
