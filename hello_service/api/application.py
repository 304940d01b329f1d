"""FastAPI application factory for the greeting service."""

from fastapi import FastAPI

from hello_service.config import AppSettings

from .routers import api_create_greeting_route, api_create_health_route


def create_api_application(settings: AppSettings) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Only `/health-check` and `/hello-world` are routed. Documentation routes
    and trailing-slash redirects are disabled so every other path falls
    through to the default 404.

    Args:
        settings: Validated application settings.

    Returns:
        FastAPI: Framework application instance with both routes registered.
    """

    return FastAPI(
        title="Hello Service",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        routes=[
            api_create_health_route(),
            api_create_greeting_route(greeting_message=settings.server_hello),
        ],
    )
