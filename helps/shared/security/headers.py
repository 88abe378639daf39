"""
Secure HTTP headers middleware.

Adds restrictive security headers to every response, error responses
included. Pure cross-cutting concern.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'",
    "Cache-Control": "no-store",
}


def apply_security_headers(response: Response) -> Response:
    """Set ``SECURE_HEADERS`` on ``response`` without overriding existing ones.

    Responses built by the catch-all error handler bypass the middleware
    stack and must call this themselves.
    """
    for header_name, header_value in SECURE_HEADERS.items():
        response.headers.setdefault(header_name, header_value)
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that sets ``SECURE_HEADERS`` on every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        return apply_security_headers(response)
