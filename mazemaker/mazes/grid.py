"""
Grid model for frontier-growth maze generation.

The grid is a square array of side ``2n - 1`` for ``n`` pillars per side.
Pillars (maze graph nodes) live at even/even positions; the cells strictly
between two adjacent pillars carry the edge between them.

Example n=3 (after generation)::

    XOXOX
    O   O
    X XOX
    O   O
    XOXOX

Positions are indexed ``grid[x][y]``: ``x`` is the printed row and ``y`` the
printed column. Direction vectors are ``(dx, dy)`` on that indexing.
"""

from __future__ import annotations

import random
from collections import Counter
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from numpy.typing import NDArray


class CellState(Enum):
    """State of a single grid position. Values are the raw-render characters."""

    WALL = "X"
    PASSAGE = "O"
    BLANK = " "

    @property
    def occupied(self) -> bool:
        """True for WALL and PASSAGE."""
        return self is not CellState.BLANK


# Integer codes used by MazeGrid.to_numpy_array()
CELL_CODES: dict[CellState, int] = {
    CellState.BLANK: 0,
    CellState.WALL: 1,
    CellState.PASSAGE: 2,
}


class Direction(Enum):
    """Compass directions as unit (dx, dy) steps."""

    N = (0, -1)
    S = (0, 1)
    E = (1, 0)
    W = (-1, 0)

    @property
    def vector(self) -> tuple[int, int]:
        return self.value


ALL_DIRECTIONS: tuple[Direction, ...] = (Direction.N, Direction.S, Direction.E, Direction.W)


class Coord(NamedTuple):
    """Grid coordinate."""

    x: int
    y: int

    def step(self, direction: Direction, distance: int = 1) -> Coord:
        dx, dy = direction.vector
        return Coord(self.x + dx * distance, self.y + dy * distance)


Grid = list[list[CellState]]


def get(grid: Sequence[Sequence[CellState]], x: int, y: int) -> CellState | None:
    """
    Bounds-checked lookup.

    Args:
        grid: Square or rectangular grid of cell states
        x: Row index
        y: Column index

    Returns:
        Cell state at (x, y), or None when the coordinate is out of range
    """
    if 0 <= x < len(grid):
        row = grid[x]
        if 0 <= y < len(row):
            return row[y]
    return None


class Frontier:
    """
    Set of pillar coordinates still eligible for growth.

    Backed by a list plus a position index so that add, discard, membership
    and uniform random choice are all O(1). Iteration order depends only on
    the sequence of operations, which keeps seeded runs reproducible.
    """

    def __init__(self, coords: Iterator[Coord] | Sequence[Coord] = ()):
        self._items: list[Coord] = []
        self._index: dict[Coord, int] = {}
        for coord in coords:
            self.add(coord)

    def add(self, coord: Coord) -> None:
        if coord not in self._index:
            self._index[coord] = len(self._items)
            self._items.append(coord)

    def discard(self, coord: Coord) -> None:
        position = self._index.pop(coord, None)
        if position is None:
            return
        last = self._items.pop()
        if position < len(self._items):
            # Move the former last element into the vacated slot
            self._items[position] = last
            self._index[last] = position

    def choice(self, rng: random.Random) -> Coord:
        """Pick a member uniformly at random. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("Cannot choose from an empty frontier")
        return self._items[rng.randrange(len(self._items))]

    def __contains__(self, coord: object) -> bool:
        return coord in self._index

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Coord]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Frontier({len(self._items)} coords)"


class MazeGrid:
    """
    Grid of cell states plus the growth frontier.

    Construction pre-carves the border as an alternating WALL/PASSAGE ring and
    seeds the frontier with every non-corner border pillar. Construction is
    deterministic; randomness enters only during growth.
    """

    def __init__(self, size: int):
        """
        Initialize grid.

        Args:
            size: Side length (2n - 1 for n pillars per side)
        """
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")

        self.size = size
        self.cells: Grid = [[CellState.BLANK] * size for _ in range(size)]
        self.frontier = Frontier()
        self._carve_border()

    @classmethod
    def from_pillars(cls, n: int) -> MazeGrid:
        """Create the grid for n pillars per side."""
        return cls(2 * n - 1)

    def _carve_border(self) -> None:
        last = self.size - 1
        is_wall = True
        for i in range(self.size):
            state = CellState.WALL if is_wall else CellState.PASSAGE
            for coord in (Coord(0, i), Coord(i, 0), Coord(last, i), Coord(i, last)):
                self.cells[coord.x][coord.y] = state
                # Corners are pillars but never grow
                if is_wall and i != 0 and i != last:
                    self.frontier.add(coord)
            is_wall = not is_wall

    def get(self, x: int, y: int) -> CellState | None:
        return get(self.cells, x, y)

    def __getitem__(self, coord: tuple[int, int]) -> CellState:
        x, y = coord
        return self.cells[x][y]

    def __setitem__(self, coord: tuple[int, int], state: CellState) -> None:
        x, y = coord
        self.cells[x][y] = state

    @property
    def pillars_per_side(self) -> int:
        return (self.size + 1) // 2

    def counts(self) -> Counter[CellState]:
        """Number of cells in each state."""
        return Counter(state for row in self.cells for state in row)

    def to_numpy_array(self) -> NDArray[np.int8]:
        """
        Convert grid to numpy array representation.

        Returns:
            int8 array of shape (size, size): 0 = blank, 1 = wall, 2 = passage
        """
        return np.array([[CELL_CODES[state] for state in row] for row in self.cells], dtype=np.int8).reshape(
            self.size, self.size
        )

    def __repr__(self) -> str:
        return f"MazeGrid(size={self.size}, frontier={len(self.frontier)})"
