"""Shared utilities: structured exceptions and logging."""

from __future__ import annotations

from .exceptions import ConfigurationError, MazeError, MazeVerificationError, validate_maze_size
from .maze_logging import LoggedOperation, configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "LoggedOperation",
    "MazeError",
    "MazeVerificationError",
    "configure_logging",
    "get_logger",
    "validate_maze_size",
]
