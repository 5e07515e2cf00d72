"""Route initialization module."""

from fastapi import APIRouter
from usermgmt.routes.health import router as health_router
from usermgmt.routes.root import router as root_router
from usermgmt.routes.user import router as user_router

# Routes are served at the root; there is no /api prefix.
api_router = APIRouter()

api_router.include_router(root_router)
api_router.include_router(health_router)
api_router.include_router(user_router)


__all__ = ["api_router"]
