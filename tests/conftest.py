"""Shared fixtures for the helps test suite."""

import logging
import re
from typing import Callable

import pytest

from helps.core.config import Settings


@pytest.fixture
def error_id_pattern() -> re.Pattern[str]:
    """Pattern matching a well-formed error id."""
    return re.compile(
        r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
    )


@pytest.fixture
def test_logger() -> logging.Logger:
    """Logger injected into the reporter; records reach caplog via root."""
    return logging.getLogger("helps.tests")


@pytest.fixture
def test_settings() -> Settings:
    return Settings(rate_limit_enabled=False, debug=False)


@pytest.fixture
def error_lines(caplog: pytest.LogCaptureFixture) -> Callable[[], list[str]]:
    """Return a callable listing the messages of captured ERROR records."""
    caplog.set_level(logging.ERROR)

    def _lines() -> list[str]:
        return [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]

    return _lines
