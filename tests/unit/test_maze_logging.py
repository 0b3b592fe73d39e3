"""
Unit tests for the MazeMaker logging infrastructure.
"""

import concurrent.futures
import logging

import pytest

from mazemaker.mazes import generate_maze
from mazemaker.utils.maze_logging import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_logging,
    get_logger,
    log_generation_configuration,
)


class TestMazeLogger:
    """Test logger creation and configuration."""

    def test_loggers_are_cached(self):
        assert get_logger("mazemaker.test.cached") is get_logger("mazemaker.test.cached")

    def test_default_name_is_caller_module(self):
        logger = get_logger()

        assert logger.name == __name__

    def test_single_console_handler(self):
        logger = get_logger("mazemaker.test.handlers")
        configure_logging(level="INFO", use_colors=False)
        configure_logging(level="DEBUG", use_colors=False)

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    def test_thread_safe_creation(self):
        """Test that concurrent creation never duplicates handlers."""

        def create(i):
            return get_logger(f"mazemaker.test.thread_{i % 3}")

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            loggers = list(executor.map(create, range(30)))

        for logger in loggers:
            assert len(logger.handlers) == 1
        assert {f"mazemaker.test.thread_{i}" for i in range(3)} <= set(MazeLogger._loggers)

    def test_file_logging(self, tmp_path):
        """Test that file logs are written without color codes."""
        log_file = tmp_path / "logs" / "maze.log"
        configure_logging(level="DEBUG", log_to_file=True, log_file_path=log_file, use_colors=True)

        generate_maze(4, seed=1)

        content = log_file.read_text()
        assert "Generating maze with 4 pillars per side" in content
        assert "Growth finished for size 7" in content
        assert "\x1b[" not in content

    def test_level_filters_messages(self, tmp_path):
        log_file = tmp_path / "quiet.log"
        configure_logging(level="WARNING", log_to_file=True, log_file_path=log_file, use_colors=False)

        generate_maze(3, seed=1)

        assert log_file.read_text() == ""

    def test_integer_level(self):
        configure_logging(level=logging.ERROR, use_colors=False)

        assert get_logger("mazemaker.test.int_level").level == logging.ERROR


class TestMazeFormatter:
    """Test record formatting."""

    def _record(self):
        return logging.LogRecord("mazemaker.test", logging.INFO, "grid.py", 12, "hello", None, None)

    def test_plain_format(self):
        output = MazeFormatter(use_colors=False).format(self._record())

        assert "mazemaker.test" in output
        assert "INFO" in output
        assert output.endswith("hello")

    def test_location(self):
        output = MazeFormatter(use_colors=False, include_location=True).format(self._record())

        assert output.endswith("[grid.py:12]")

    def test_colors(self):
        formatter = MazeFormatter(use_colors=True)
        output = formatter.format(self._record())

        assert "hello" in output
        assert "mazemaker.test" in output
        assert formatter.colored_formatter is not None


class TestLoggingHelpers:
    """Test LoggedOperation and structured helpers with a propagating logger."""

    def test_logged_operation_success(self, caplog):
        logger = logging.getLogger("tests.logged_operation")

        with caplog.at_level(logging.INFO, logger="tests.logged_operation"):
            with LoggedOperation(logger, "carving") as op:
                pass

        assert "Starting carving" in caplog.text
        assert "Completed carving" in caplog.text
        assert op.duration is not None and op.duration >= 0.0

    def test_logged_operation_does_not_suppress(self, caplog):
        logger = logging.getLogger("tests.logged_operation")

        with caplog.at_level(logging.INFO, logger="tests.logged_operation"):
            with pytest.raises(RuntimeError):
                with LoggedOperation(logger, "carving"):
                    raise RuntimeError("boom")

        assert "Failed carving" in caplog.text
        assert "boom" in caplog.text

    def test_log_generation_configuration(self, caplog):
        logger = logging.getLogger("tests.configuration")

        with caplog.at_level(logging.INFO, logger="tests.configuration"):
            log_generation_configuration(logger, "generate", {"n": 5, "seed": None, "extra": {"a": 1}, "rng": object()})

        assert "=== generate Configuration ===" in caplog.text
        assert "n: 5" in caplog.text
        assert "seed: None" in caplog.text
        assert "extra: 1 parameters" in caplog.text
        assert "rng: object" in caplog.text
