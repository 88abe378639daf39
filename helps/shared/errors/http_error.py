"""
Dual-view HTTP error.

An ``HTTPError`` carries an internal cause for the server log and an
external message template for the client. The two views are separate
methods so every call site picks one explicitly:

- ``public_message()``: the template rendered with its args. The only
  part ever written to a response body.
- ``diagnostic()``: status, raw template, args and the cause. Log only.

No framework imports allowed.
"""

from typing import Any, Optional

HTTP_400 = 400
HTTP_404 = 404
HTTP_429 = 429
HTTP_500 = 500

INTERNAL_SERVER_ERROR = "internal server error"
RATE_LIMIT_EXCEEDED = "rate limit exceeded"


class HTTPError(Exception):
    """Error raised by a route handler and reported to client and log.

    Attributes:
        cause: The underlying internal error. Never shown to clients.
        status_code: HTTP status returned to the client.
        message: printf-style template for the client-facing message.
        args: Values substituted into ``message``.
    """

    def __init__(
        self,
        cause: Optional[BaseException],
        status_code: int,
        message: str,
        *args: Any,
    ) -> None:
        super().__init__(message)
        self._cause = cause
        self._status_code = status_code
        self._message = message
        self._args = tuple(args)

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def args(self) -> tuple:
        return self._args

    def public_message(self) -> str:
        """Render the client-facing message.

        The template is used verbatim when there are no args.

        Raises:
            TypeError, ValueError: If the template does not match the args.
                Errors raised while converting an arg propagate as well.
        """
        if not self._args:
            return self._message
        return self._message % self._args

    def diagnostic(self) -> str:
        """Return the full internal description for the server log."""
        return (
            f"status={self._status_code} msg={self._message!r} "
            f"args={self._args!r} cause={self._cause!r}"
        )

    def __str__(self) -> str:
        return self.diagnostic()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.diagnostic()})"


def internal_error(cause: Optional[BaseException]) -> HTTPError:
    """Build a 500 error. The client only ever sees a generic message."""
    return HTTPError(cause, HTTP_500, INTERNAL_SERVER_ERROR)


def bad_request(cause: Optional[BaseException], message: str, *args: Any) -> HTTPError:
    """Build a 400 error for malformed or missing caller input."""
    return HTTPError(cause, HTTP_400, message, *args)


def not_found(cause: Optional[BaseException], message: str, *args: Any) -> HTTPError:
    """Build a 404 error for a referenced resource that does not exist."""
    return HTTPError(cause, HTTP_404, message, *args)


def too_many_requests(cause: Optional[BaseException]) -> HTTPError:
    """Build a 429 error for a caller over its rate limit."""
    return HTTPError(cause, HTTP_429, RATE_LIMIT_EXCEEDED)
