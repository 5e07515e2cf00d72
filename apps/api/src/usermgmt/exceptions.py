"""Exception handling and error response builders."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from usermgmt.models.problem import ProblemDetail
from usermgmt_common.models.user import FieldError

logger = logging.getLogger(__name__)

ERROR_PATH = "/error"


def problem_response(detail: str, headers: dict[str, str] | None = None) -> JSONResponse:
    """Build a 500 problem response carrying ``detail``."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ProblemDetail(detail=detail).model_dump(),
        headers=headers,
    )


def validation_error_response(errors: list[FieldError]) -> JSONResponse:
    """Build a 400 response listing field errors."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[error.to_response() for error in errors],
    )


class ProblemResponseMiddleware:
    """ASGI middleware that turns unhandled exceptions into 500 problem responses.

    The failed request is re-dispatched as ``GET /error`` with the exception
    on ``request.state.error``, so the error route builds the response. It
    sits inside the CORS and logging middleware, so the 500 gets CORS
    headers and is logged like any other response.

    Args:
        app: Next ASGI app in the chain
        error_path: Route that renders the problem response
    """

    def __init__(self, app: ASGIApp, error_path: str = ERROR_PATH) -> None:
        self.app = app
        self.error_path = error_path

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
        except Exception as exc:
            logger.error("Unhandled exception: %s", exc, exc_info=True)
            if response_started:
                raise
            await self._render_problem(scope, exc, send)

    async def _render_problem(self, scope: Scope, exc: Exception, send: Send) -> None:
        error_scope = {
            **scope,
            "method": "GET",
            "path": self.error_path,
            "raw_path": self.error_path.encode(),
            "query_string": b"",
            "state": {**scope.get("state", {}), "error": exc},
        }

        async def empty_receive() -> Message:
            return {"type": "http.request", "body": b"", "more_body": False}

        try:
            await self.app(error_scope, empty_receive, send)
        except Exception:
            logger.error("Error route failed while handling: %s", exc)
            await problem_response(str(exc))(scope, empty_receive, send)


def _field_errors_from_request(exc: RequestValidationError) -> list[FieldError]:
    errors = []
    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        property_name = str(loc[-1]) if loc else "body"
        if property_name == "user_id":
            property_name = "id"
        errors.append(FieldError(property_name=property_name, error_message=error.get("msg", "Invalid value.")))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Register the request-validation handler on ``app``."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed ids, query values and bodies as field errors."""
        errors = _field_errors_from_request(exc)
        logger.info("Rejected malformed request to %s: %d error(s)", request.url.path, len(errors))
        return validation_error_response(errors)
