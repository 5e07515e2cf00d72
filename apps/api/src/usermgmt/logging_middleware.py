"""Request/response logging middleware.

Logs the request line and body before the request is handled, and the
response status and body after it is handled. Starlette sends a response as
a start message followed by one or more body messages; the middleware hands
the downstream app a buffering ``send``, collects the whole response, logs
it, then forwards it unchanged to the client.
"""

import logging

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger("usermgmt.access")


class RequestResponseLoggingMiddleware:
    """ASGI middleware that logs full request and response bodies.

    Args:
        app: Next ASGI app in the chain
        log_bodies: Include body text in the log lines
    """

    def __init__(self, app: ASGIApp, log_bodies: bool = True) -> None:
        self.app = app
        self.log_bodies = log_bodies

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        body = await self._read_body(receive)
        request_line = format_request(scope, body if self.log_bodies else b"")
        logger.info("Incoming Request: %s", request_line)

        replayed = False

        async def replay_receive() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            # Body already delivered; anything further is a disconnect.
            return await receive()

        start_message: Message | None = None
        chunks: list[bytes] = []

        async def buffering_send(message: Message) -> None:
            nonlocal start_message
            if message["type"] == "http.response.start":
                start_message = message
            elif message["type"] == "http.response.body":
                chunks.append(message.get("body", b""))
            else:
                await send(message)

        try:
            await self.app(scope, replay_receive, buffering_send)
        except Exception as exc:
            logger.error("Request failed: %s (%s)", request_line, exc)
            raise

        if start_message is None:
            # Downstream app finished without responding.
            return

        response_body = b"".join(chunks)
        logger.info(
            "Outgoing Response: %s",
            format_response(start_message["status"], response_body if self.log_bodies else b""),
        )

        await send(start_message)
        await send({"type": "http.response.body", "body": response_body, "more_body": False})

    @staticmethod
    async def _read_body(receive: Receive) -> bytes:
        chunks: list[bytes] = []
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                break
            chunks.append(message.get("body", b""))
            more_body = message.get("more_body", False)
        return b"".join(chunks)


def format_request(scope: Scope, body: bytes) -> str:
    """Format ``{scheme} {host}{path} {query} {body}`` for a request."""
    headers = dict(scope.get("headers") or [])
    host = headers.get(b"host", b"").decode("latin-1")
    if not host and scope.get("server"):
        server_host, server_port = scope["server"]
        host = f"{server_host}:{server_port}"
    query = scope.get("query_string", b"").decode("latin-1")
    query = f"?{query}" if query else ""
    text = body.decode("utf-8", errors="replace")
    return f"{scope.get('scheme', 'http')} {host}{scope['path']} {query} {text}"


def format_response(status_code: int, body: bytes) -> str:
    """Format ``{status}: {body}`` for a response."""
    return f"{status_code}: {body.decode('utf-8', errors='replace')}"
