"""
Logging configuration for the application.

Every line is prefixed with the service name, carries a UTC timestamp and
the full path of the emitting source file. Logging must not change program
behavior. Each record is written under the handler lock, so concurrent
requests never interleave within a line.
"""

import logging
import sys
import time

LOGGER_NAME = "helps"
LOG_FORMAT = "helps: %(asctime)s %(pathname)s:%(lineno)d: %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class UTCFormatter(logging.Formatter):
    """Formatter that renders ``asctime`` in UTC."""

    converter = time.gmtime


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(UTCFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)


def get_logger() -> logging.Logger:
    """Return the application logger handed to components at startup."""
    return logging.getLogger(LOGGER_NAME)
