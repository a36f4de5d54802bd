#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for CLI logging setup."""

import logging
from pathlib import Path

import pytest

from mdsnow.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Test combining the logging flags into one level."""

    def test_default(self) -> None:
        """Test the WARNING default."""
        assert resolve_log_level() == logging.WARNING

    def test_named_level(self) -> None:
        """Test a level name in any case."""
        assert resolve_log_level("info") == logging.INFO

    def test_verbose(self) -> None:
        """Test that --verbose lowers the default level."""
        assert resolve_log_level("WARNING", verbose=True) == logging.DEBUG

    def test_explicit_level_beats_verbose(self) -> None:
        """Test that an explicit non-default level wins over --verbose."""
        assert resolve_log_level("ERROR", verbose=True) == logging.ERROR

    def test_trace_wins(self) -> None:
        """Test that --trace always means DEBUG."""
        assert resolve_log_level("CRITICAL", verbose=False, trace=True) == logging.DEBUG

    def test_unknown_level_raises(self) -> None:
        """Test an invalid level name."""
        with pytest.raises(ValueError):
            resolve_log_level("LOUD")


@pytest.mark.unit
class TestConfigureLogging:
    """Test handler installation on the package logger."""

    def test_sets_level_and_handler(self) -> None:
        """Test that one stderr handler is installed."""
        logger = configure_logging("INFO")
        assert logger.name == PACKAGE_LOGGER_NAME
        assert logger.level == logging.INFO
        assert sum(isinstance(h, logging.StreamHandler) for h in logger.handlers) >= 1

    def test_reconfigure_replaces_handlers(self) -> None:
        """Test that calling twice does not duplicate handlers."""
        before = len(logging.getLogger(PACKAGE_LOGGER_NAME).handlers)
        configure_logging("INFO")
        configure_logging("DEBUG")
        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        assert len(logger.handlers) == before + 1
        assert logger.level == logging.DEBUG

    def test_log_file(self, tmp_path: Path) -> None:
        """Test that records are written to the log file."""
        log_path = tmp_path / "run.log"
        logger = configure_logging(logging.INFO, log_file=str(log_path))
        logging.getLogger("mdsnow.api").info("hello from the pipeline")
        for handler in logger.handlers:
            handler.flush()
        content = log_path.read_text(encoding="utf-8")
        assert "Logging to file" in content
        assert "INFO: hello from the pipeline" in content

    def test_trace_format(self, tmp_path: Path) -> None:
        """Test that trace mode includes logger names."""
        log_path = tmp_path / "trace.log"
        configure_logging(logging.DEBUG, log_file=str(log_path), trace_mode=True)
        logging.getLogger("mdsnow.alerts").debug("traced")
        assert "[DEBUG] [mdsnow.alerts] traced" in log_path.read_text(encoding="utf-8")

    def test_unwritable_log_file_warns(self, tmp_path: Path, capsys) -> None:
        """Test that a bad log file path degrades to console logging."""
        configure_logging("WARNING", log_file=str(tmp_path / "missing" / "x.log"))
        assert "Could not create log file" in capsys.readouterr().err
