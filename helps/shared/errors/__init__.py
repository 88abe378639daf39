"""
Shared error handling package.

Builds dual-view HTTP errors and reports them: a rendered message and an
error id for the client, the full cause and the same id for the log.
"""

from helps.shared.errors.correlation import RandomSourceUnavailable, gen_error_id
from helps.shared.errors.http_error import (
    HTTPError,
    bad_request,
    internal_error,
    not_found,
    too_many_requests,
)
from helps.shared.errors.reporter import ErrorReporter, get_error_reporter

__all__ = [
    "ErrorReporter",
    "HTTPError",
    "RandomSourceUnavailable",
    "bad_request",
    "gen_error_id",
    "get_error_reporter",
    "internal_error",
    "not_found",
    "too_many_requests",
]
