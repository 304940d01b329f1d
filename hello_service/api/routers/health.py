"""Health endpoint route composition."""

from dataclasses import asdict

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response
from starlette.routing import Route

from hello_service.api.middleware import api_create_logged_route
from hello_service.domain import HealthStatus


def api_health_check(request: Request) -> Response:
    """Return static liveness payload for GET, 405 otherwise.

    Returns:
        Response: `{"status":"ok"}` JSON or an empty 405 response.
    """

    if request.method != "GET":
        return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

    return JSONResponse(content=asdict(HealthStatus(status="ok")), status_code=status.HTTP_200_OK)


def api_create_health_route() -> Route:
    """Create the logged `/health-check` route.

    Returns:
        Route: Route accepting every method and answering through `api_health_check`.
    """

    return api_create_logged_route("/health-check", api_health_check, name="health_check")
