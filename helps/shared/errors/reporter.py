"""
Correlated error reporter.

The single place where an ``HTTPError`` becomes a response. The client gets
the status code, an error id header and ``{"err": <public message>}``. The
server log gets the same error id next to the full diagnostic, so an
operator can go from a client report to the internal failure.

Reporting never raises. A broken random source degrades to an empty error
id and a failed body render degrades to an empty body; both are logged.
"""

import json
import logging
from typing import Callable, Union

from starlette.requests import Request
from starlette.responses import Response

from helps.shared.errors.correlation import RandomSourceUnavailable, gen_error_id
from helps.shared.errors.http_error import HTTPError

DEFAULT_ERROR_ID_HEADER = "X-Error-Id"
REPORTING_FAILED = "error while reporting API error"
JSON_MEDIA_TYPE = "application/json"

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


class ErrorReporter:
    """Write error responses and the matching log lines.

    Args:
        logger: Destination for error log lines.
        gen_id: Error id factory. Raises ``RandomSourceUnavailable``
            when no id can be produced.
        header: Name of the response header carrying the error id.
    """

    def __init__(
        self,
        logger: LoggerLike,
        gen_id: Callable[[], str] = gen_error_id,
        header: str = DEFAULT_ERROR_ID_HEADER,
    ) -> None:
        self._logger = logger
        self._gen_id = gen_id
        self._header = header

    def report(self, err: HTTPError) -> Response:
        """Build the client response for ``err`` and log it.

        The returned response is complete; the caller must return it as-is.

        Args:
            err: The error raised or built by a route handler.

        Returns:
            A response with ``err.status_code``, the error id header and,
            unless rendering failed, a JSON body holding the public message.
        """
        try:
            error_id = self._gen_id()
        except RandomSourceUnavailable as gen_err:
            self._logger.error("genErr=%s, msg=%r", gen_err, REPORTING_FAILED)
            # still report the error, with an empty error id
            error_id = ""

        headers = {self._header: error_id}

        try:
            body = self.render_body(err)
        except Exception as encode_err:
            self._logger.error(
                "errID=%r, err=%s, encodeErr=%r, msg=%s",
                error_id,
                safe_diagnostic(err),
                encode_err,
                REPORTING_FAILED,
            )
            return Response(status_code=err.status_code, headers=headers)

        self._logger.error("errID=%r, err=%s", error_id, safe_diagnostic(err))
        return Response(
            content=body,
            status_code=err.status_code,
            headers=headers,
            media_type=JSON_MEDIA_TYPE,
        )

    @staticmethod
    def render_body(err: HTTPError) -> bytes:
        """Serialize the public view of ``err`` as a compact JSON line."""
        payload = json.dumps(
            {"err": err.public_message()},
            ensure_ascii=False,
            separators=(",", ":"),
        )
        return (payload + "\n").encode("utf-8")


def get_error_reporter(request: Request) -> ErrorReporter:
    """FastAPI dependency returning the reporter built at startup."""
    return request.app.state.error_reporter


def safe_diagnostic(err: HTTPError) -> str:
    """Return ``err.diagnostic()``, or the parts that can be rendered.

    Template args are arbitrary objects whose ``repr`` may raise.
    """
    try:
        return err.diagnostic()
    except Exception as repr_err:
        return (
            f"status={err.status_code} msg={err.message!r} "
            f"args=<unrepresentable: {type(repr_err).__name__}> "
            f"cause={type(err.cause).__name__}"
        )
