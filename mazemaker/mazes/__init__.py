"""
Maze generation, verification and rendering.

Examples
--------
>>> from mazemaker.mazes import generate_maze, render_lines
>>> grid = generate_maze(10, seed=7)
>>> print(render_lines(grid))
"""

from .grid import ALL_DIRECTIONS, CellState, Coord, Direction, Frontier, Grid, MazeGrid, get
from .growth import GrowthEngine, GrowthStats, generate_maze, try_extend
from .rendering import MazeStyle, print_maze, print_maze_lines, render, render_lines, render_raw
from .verification import border_matches_pattern, verify_perfect_maze

__all__ = [
    # Grid model
    "ALL_DIRECTIONS",
    "CellState",
    "Coord",
    "Direction",
    "Frontier",
    "Grid",
    "MazeGrid",
    "get",
    # Growth
    "GrowthEngine",
    "GrowthStats",
    "generate_maze",
    "try_extend",
    # Rendering
    "MazeStyle",
    "print_maze",
    "print_maze_lines",
    "render",
    "render_lines",
    "render_raw",
    # Verification
    "border_matches_pattern",
    "verify_perfect_maze",
]
