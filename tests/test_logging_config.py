# Area: Shared Tests
"""Tests for logging setup, formatters and quiet mode."""

import json
import logging
import pytest

from tron_racing._shared.logging_config import (
    JSONFormatter,
    QuietFilter,
    TerminalFormatter,
    disable_quiet_mode,
    enable_quiet_mode,
    is_quiet_mode_enabled,
    setup_logging,
)


def make_record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("tron_racing.test", level, __file__, 1, msg, None, None)


class TestQuietMode:
    """Tests for quiet mode toggling."""

    def test_toggle(self):
        """Test enable/disable flip the flag and the filter."""
        quiet_filter = QuietFilter()
        enable_quiet_mode()
        try:
            assert is_quiet_mode_enabled() is True
            assert quiet_filter.filter(make_record()) is False
        finally:
            disable_quiet_mode()
        assert quiet_filter.filter(make_record()) is True


class TestFormatters:
    """Tests for the terminal and JSON formatters."""

    def test_terminal_formatter_does_not_mutate_record(self):
        """Test coloring leaves the original record's level name alone."""
        record = make_record(logging.WARNING)
        text = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[33mWARNING\033[0m hello" == text
        assert record.levelname == "WARNING"

    def test_json_formatter(self):
        """Test the JSON line fields."""
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "tron_racing.test"
        assert data["message"] == "hello"
        assert "timestamp" in data


@pytest.fixture
def clean_package_logger():
    yield
    pkg_logger = logging.getLogger("tron_racing")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


@pytest.mark.usefixtures("clean_package_logger")
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler_writes_json(self, tmp_path):
        """Test a log file receives JSON lines."""
        log_file = tmp_path / "logs" / "racing.log"
        setup_logging(str(log_file), level="DEBUG")
        logging.getLogger("tron_racing.test").info("round started")
        for handler in logging.getLogger("tron_racing").handlers:
            handler.flush()

        lines = log_file.read_text().splitlines()
        assert json.loads(lines[-1])["message"] == "round started"

    def test_no_file_handler_when_path_empty(self):
        """Test an empty path only installs the terminal handler."""
        setup_logging("")
        pkg_logger = logging.getLogger("tron_racing")
        assert len(pkg_logger.handlers) == 1
        assert pkg_logger.propagate is False

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        """Test calling setup twice does not stack handlers."""
        setup_logging(str(tmp_path / "a.log"))
        setup_logging(str(tmp_path / "b.log"))
        assert len(logging.getLogger("tron_racing").handlers) == 2
