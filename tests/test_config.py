"""
Tests for settings, logging setup and the CLI parser.
"""

import logging
import sys

import pytest

from helps.cli import build_parser
from helps.core.config import Settings
from helps.shared.logging import LOGGER_NAME, UTCFormatter, configure_logging, get_logger


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("HELPS_PORT", "HELPS_HOST", "HELPS_ERROR_ID_HEADER"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.port == 9090
        assert settings.host == "0.0.0.0"
        assert settings.error_id_header == "X-Error-Id"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HELPS_PORT", "8081")
        monkeypatch.setenv("HELPS_ERROR_ID_HEADER", "X-Errid")
        settings = Settings()
        assert settings.port == 8081
        assert settings.error_id_header == "X-Errid"


class TestLogging:
    """Tests for process logging configuration."""

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configure_installs_utc_stdout_handler(self) -> None:
        configure_logging("debug")
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout
        assert isinstance(handler.formatter, UTCFormatter)

    def test_line_format(self) -> None:
        configure_logging("info")
        formatter = logging.getLogger().handlers[0].formatter
        record = logging.LogRecord(
            LOGGER_NAME, logging.ERROR, "/srv/helps/reporter.py", 42,
            "errID=%r", ("abc",), None,
        )
        line = formatter.format(record)
        assert line.startswith("helps: ")
        assert line.endswith("/srv/helps/reporter.py:42: errID='abc'")

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("verbose")
        assert logging.getLogger().level == logging.INFO

    def test_application_logger_name(self) -> None:
        assert get_logger().name == "helps"


class TestCli:
    """Tests for the CLI argument parser."""

    def test_serve_defaults(self) -> None:
        args = build_parser().parse_args(["serve"])
        assert args.command == "serve"
        assert isinstance(args.port, int)

    def test_serve_overrides(self) -> None:
        args = build_parser().parse_args(["serve", "--host", "127.0.0.1", "--port", "8080"])
        assert args.host == "127.0.0.1"
        assert args.port == 8080

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
