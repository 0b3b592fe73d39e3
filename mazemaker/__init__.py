"""
MazeMaker: perfect maze generation by randomized frontier growth.

Quick start:
    >>> from mazemaker import generate_maze, render_lines
    >>> grid = generate_maze(8, seed=42)
    >>> print(render_lines(grid))
"""

from __future__ import annotations

__version__ = "1.0.0"

from mazemaker.config import LoggingConfig, MazeConfig, load_config
from mazemaker.mazes import (
    CellState,
    Coord,
    Direction,
    Frontier,
    GrowthEngine,
    GrowthStats,
    MazeGrid,
    MazeStyle,
    generate_maze,
    get,
    print_maze,
    print_maze_lines,
    render,
    render_lines,
    render_raw,
    try_extend,
    verify_perfect_maze,
)
from mazemaker.utils.exceptions import ConfigurationError, MazeError, MazeVerificationError
from mazemaker.utils.maze_logging import configure_logging, get_logger

__all__ = [
    "CellState",
    "ConfigurationError",
    "Coord",
    "Direction",
    "Frontier",
    "GrowthEngine",
    "GrowthStats",
    "LoggingConfig",
    "MazeConfig",
    "MazeError",
    "MazeGrid",
    "MazeStyle",
    "MazeVerificationError",
    "__version__",
    "configure_logging",
    "generate_maze",
    "get",
    "get_logger",
    "load_config",
    "print_maze",
    "print_maze_lines",
    "render",
    "render_lines",
    "render_raw",
    "try_extend",
    "verify_perfect_maze",
]
