"""
Centralized error handlers for FastAPI.

Routes every failure through the error reporter so that no stack trace or
internal detail reaches a client. All error responses carry an error id.
"""

from fastapi import FastAPI, Request
from slowapi.errors import RateLimitExceeded
from starlette.responses import Response

from helps.shared.errors.http_error import HTTPError, internal_error, too_many_requests
from helps.shared.errors.reporter import get_error_reporter
from helps.shared.security.headers import apply_security_headers


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers on the FastAPI application.

    ``app.state.error_reporter`` must be set before the first request.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(HTTPError)
    async def handle_http_error(request: Request, exc: HTTPError) -> Response:
        """Report an error raised by a route handler."""
        return get_error_reporter(request).report(exc)

    @app.exception_handler(RateLimitExceeded)
    def handle_rate_limited(request: Request, exc: RateLimitExceeded) -> Response:
        """Report a rate limit rejection as a 429.

        Synchronous: slowapi middleware calls it directly.
        """
        return get_error_reporter(request).report(too_many_requests(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals.

        Runs outside every user middleware, so security headers are set here.
        """
        response = get_error_reporter(request).report(internal_error(exc))
        return apply_security_headers(response)
