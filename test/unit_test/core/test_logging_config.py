"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging

import pytest

from skillbridge.core import logging_config
from skillbridge.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)
from skillbridge.server.core.config import settings


def _console_handler():
    return next(
        (h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler),
        None,
    )


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("debug", logging.DEBUG),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        setup_logging(log_level=log_level, enable_file=False)

        handler = _console_handler()
        assert handler is not None
        assert handler.level == expected_level

    def test_root_captures_everything(self):
        setup_logging(log_level="ERROR", enable_file=False)

        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        setup_logging(log_format=log_format, enable_file=False)

        assert _console_handler().formatter._fmt == expected_format


class TestSetupLoggingHandlers:
    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        stream_handlers = [h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1

    def test_file_logging(self, tmp_path):
        setup_logging(enable_file=True, log_dir=tmp_path)

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        try:
            assert len(file_handlers) == 1
            assert (tmp_path / "skillbridge.log").exists()
        finally:
            for handler in file_handlers:
                logging.getLogger().removeHandler(handler)
                handler.close()

    def test_file_logging_disabled_by_argument(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "enable_file_logging", True)
        monkeypatch.setattr(settings, "log_file_dir", str(tmp_path))

        setup_logging(enable_file=False)

        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
        assert not (tmp_path / "skillbridge.log").exists()


class TestSettingsDefaults:
    def test_file_logging_follows_settings(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "enable_file_logging", True)
        monkeypatch.setattr(settings, "log_file_dir", str(tmp_path / "nested"))

        setup_logging()

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        try:
            assert len(file_handlers) == 1
            assert (tmp_path / "nested" / "skillbridge.log").exists()
        finally:
            for handler in file_handlers:
                logging.getLogger().removeHandler(handler)
                handler.close()

    def test_format_and_level_follow_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "log_format", "simple")
        monkeypatch.setattr(settings, "log_level", "warning")

        setup_logging(enable_file=False)

        handler = _console_handler()
        assert handler.formatter._fmt == SIMPLE_FORMAT
        assert handler.level == logging.WARNING

    def test_settings_are_read_per_call(self, monkeypatch):
        monkeypatch.setattr(settings, "log_format", "json")
        setup_logging(enable_file=False)
        assert _console_handler().formatter._fmt == JSON_FORMAT

        monkeypatch.setattr(settings, "log_format", "detailed")
        setup_logging(enable_file=False)
        assert _console_handler().formatter._fmt == DETAILED_FORMAT

    def test_no_module_level_copies(self):
        for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE_DIR", "ENABLE_FILE_LOGGING"):
            assert not hasattr(logging_config, name)


class TestModuleLevels:
    def test_module_levels_applied(self):
        setup_logging(enable_file=False)

        for name, level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(name).level == logging.getLevelName(level)

    def test_sqlalchemy_is_quiet(self):
        assert MODULE_LOG_LEVELS["sqlalchemy.engine"] == "WARNING"

    def test_get_logger(self):
        assert get_logger("skillbridge.test").name == "skillbridge.test"
