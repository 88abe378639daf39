"""
Route handlers.

Placeholder handlers bound to ``/``, ``/healthz`` and ``/example``. The
default handler also answers every path no other route claims. Handlers
report failures by raising an ``HTTPError``; they never write an error
response themselves.
"""

from fastapi import FastAPI
from starlette.responses import Response

from helps.shared.errors import internal_error

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class ServerBrokenError(Exception):
    """Internal failure raised by the example handler."""


def healthz_handler() -> Response:
    return Response()


def example_handler() -> Response:
    """Always fail with an internal error."""
    raise internal_error(ServerBrokenError("example_handler: server broken"))


def default_handler() -> Response:
    return Response()


ROUTES = (
    ("/healthz", healthz_handler),
    ("/example", example_handler),
    ("/", default_handler),
    ("/{path:path}", default_handler),
)


def register_routes(app: FastAPI) -> None:
    """Add every route directly on ``app``.

    Routes live on the application itself, not an included router, so the
    rate limiter middleware can resolve the endpoint of each request.

    Args:
        app: The FastAPI application instance.
    """
    for path, endpoint in ROUTES:
        app.add_api_route(
            path, endpoint, methods=ALL_METHODS, include_in_schema=False
        )
