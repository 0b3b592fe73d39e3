"""
ASCII rendering of finished grids.

Two styles:
- raw: one character per cell state (X wall, O passage, space blank)
- lines: line art where each occupied cell becomes '-', '|' or '+'
  depending on which of its neighbours are occupied
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from mazemaker.mazes.grid import CellState, Direction, get

if TYPE_CHECKING:
    from collections.abc import Sequence


class MazeStyle(str, Enum):
    """Available output styles."""

    RAW = "raw"
    LINES = "lines"
    BOTH = "both"


def _occupied(state: CellState | None) -> bool:
    return state is not None and state.occupied


def _neighbor(grid: Sequence[Sequence[CellState]], x: int, y: int, direction: Direction) -> CellState | None:
    dx, dy = direction.vector
    return get(grid, x + dx, y + dy)


def line_character(grid: Sequence[Sequence[CellState]], x: int, y: int) -> str:
    """Line-art character for the cell at (x, y)."""
    if grid[x][y] is CellState.BLANK:
        return " "

    n = _occupied(_neighbor(grid, x, y, Direction.N))
    s = _occupied(_neighbor(grid, x, y, Direction.S))
    e = _occupied(_neighbor(grid, x, y, Direction.E))
    w = _occupied(_neighbor(grid, x, y, Direction.W))

    if n and s and not e and not w:
        return "-"
    if e and w and not n and not s:
        return "|"
    return "+"


def render_raw(grid: Sequence[Sequence[CellState]]) -> str:
    """Render one line per row using the cell-state characters, then a blank line."""
    lines = ["".join(state.value for state in row) for row in grid]
    return "".join(line + "\n" for line in lines) + "\n"


def render_lines(grid: Sequence[Sequence[CellState]]) -> str:
    """Render the grid as line art, then a blank line."""
    lines = ["".join(line_character(grid, x, y) for y in range(len(row))) for x, row in enumerate(grid)]
    return "".join(line + "\n" for line in lines) + "\n"


def render(grid: Sequence[Sequence[CellState]], style: MazeStyle | str = MazeStyle.LINES) -> str:
    """
    Render the grid in the requested style.

    Args:
        grid: Finished grid
        style: raw, lines, or both (raw followed by lines)

    Returns:
        Rendered text
    """
    style = MazeStyle(style)
    if style is MazeStyle.RAW:
        return render_raw(grid)
    if style is MazeStyle.LINES:
        return render_lines(grid)
    return render_raw(grid) + render_lines(grid)


def print_maze(grid: Sequence[Sequence[CellState]], file: TextIO | None = None) -> None:
    """Write the raw rendering to file (default stdout)."""
    (file or sys.stdout).write(render_raw(grid))


def print_maze_lines(grid: Sequence[Sequence[CellState]], file: TextIO | None = None) -> None:
    """Write the line-art rendering to file (default stdout)."""
    (file or sys.stdout).write(render_lines(grid))
