"""Request logging middleware applied per route.

Each logged route emits exactly one line after its handler returns:
`<METHOD> <PATH> - <STATUS> - <CLIENT_IP> - <DURATION>`.
"""

import logging
import time
from collections.abc import Callable

from starlette.datastructures import Headers
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route, request_response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from hello_service.domain import domain_resolve_client_ip

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = 200


class ResponseStatusCapture:
    """Set-once holder for the first status code sent downstream.

    Attributes:
        status_code: First recorded status, or the default when none was sent.
    """

    def __init__(self, default_status_code: int = DEFAULT_STATUS_CODE) -> None:
        self._status_code = default_status_code
        self._recorded = False

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def recorded(self) -> bool:
        return self._recorded

    def status_record(self, status_code: int) -> None:
        """Record the status code unless one was already recorded.

        Args:
            status_code: HTTP status code written by the downstream handler.
        """

        if self._recorded:
            return
        self._status_code = status_code
        self._recorded = True


def api_format_remote_address(client: tuple[str, int] | None) -> str:
    """Render an ASGI client pair as `host:port` text.

    Args:
        client: ASGI scope `client` value.

    Returns:
        str: Address text with IPv6 hosts bracketed, or empty when unknown.
    """

    if client is None:
        return ""
    host, port = client
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def api_format_duration(elapsed_seconds: float) -> str:
    """Render elapsed seconds as milliseconds text."""

    return f"{elapsed_seconds * 1000:.3f}ms"


class RequestLoggingMiddleware:
    """ASGI wrapper logging method, path, status, client IP and duration.

    Exceptions raised by the wrapped application propagate unchanged and no
    line is logged for that request.
    """

    def __init__(self, app: ASGIApp, request_logger: logging.Logger | None = None) -> None:
        self.app = app
        self.request_logger = request_logger or logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started_at = time.perf_counter()
        status_capture = ResponseStatusCapture()

        async def send_with_status_capture(message: Message) -> None:
            if message["type"] == "http.response.start":
                status_capture.status_record(message["status"])
            await send(message)

        await self.app(scope, receive, send_with_status_capture)

        elapsed_seconds = time.perf_counter() - started_at
        client_ip = domain_resolve_client_ip(
            Headers(scope=scope),
            api_format_remote_address(scope.get("client")),
        )
        self.request_logger.info(
            "%s %s - %d - %s - %s",
            scope["method"],
            scope["path"],
            status_capture.status_code,
            client_ip,
            api_format_duration(elapsed_seconds),
        )


def api_create_logged_route(path: str, endpoint: Callable[[Request], Response], name: str) -> Route:
    """Create a route that dispatches every HTTP method to a logged handler.

    The endpoint is wrapped into an ASGI application before registration, so
    Starlette applies no method filtering and the handler decides on 405.

    Args:
        path: Exact request path.
        endpoint: Handler taking a request and returning a response.
        name: Route name.

    Returns:
        Route: Route whose application is wrapped by `RequestLoggingMiddleware`.
    """

    return Route(path, endpoint=RequestLoggingMiddleware(request_response(endpoint)), name=name)
