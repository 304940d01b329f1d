"""Greeting endpoint route composition."""

from fastapi import Request, status
from fastapi.responses import Response
from starlette.routing import Route

from hello_service.api.middleware import api_create_logged_route


def api_create_greeting_route(greeting_message: str) -> Route:
    """Create the logged `/hello-world` route serving a fixed message.

    Args:
        greeting_message: Message returned verbatim, followed by a newline.
            May be empty.

    Returns:
        Route: Route accepting every method and answering with the greeting.

    Raises:
        ValueError: Raised when greeting_message is None.
    """

    if greeting_message is None:
        raise ValueError("greeting_message must not be None")

    response_body = f"{greeting_message}\n"

    def api_hello_world(request: Request) -> Response:
        """Return the configured greeting for GET, 405 otherwise.

        Returns:
            Response: Plain text greeting or an empty 405 response.
        """

        if request.method != "GET":
            return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)

        # Explicit header keeps Starlette from appending a charset.
        return Response(
            content=response_body,
            status_code=status.HTTP_200_OK,
            headers={"Content-Type": "text/plain"},
        )

    return api_create_logged_route("/hello-world", api_hello_world, name="hello_world")
