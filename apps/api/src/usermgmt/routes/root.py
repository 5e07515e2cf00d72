"""Greeting and error fallback routes."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from usermgmt.config import Settings
from usermgmt.exceptions import ERROR_PATH, problem_response
from usermgmt.models.problem import ProblemDetail
from usermgmt.services import get_app_settings

router = APIRouter(tags=["root"])

GENERIC_ERROR_DETAIL = "An unexpected error occurred."


@router.get("/", response_class=PlainTextResponse)
async def root(settings: Settings = Depends(get_app_settings)) -> str:
    """Return the static greeting."""
    return settings.root_message


@router.api_route(
    ERROR_PATH,
    methods=["GET", "POST", "PUT", "DELETE"],
    response_model=ProblemDetail,
    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    include_in_schema=False,
)
async def error(request: Request) -> JSONResponse:
    """Problem response for the exception that was caught, if any.

    Failed requests are re-dispatched here with the exception on
    ``request.state.error``; a direct request gets the generic message.
    """
    exc = getattr(request.state, "error", None)
    return problem_response(str(exc) if exc is not None else GENERIC_ERROR_DETAIL)
