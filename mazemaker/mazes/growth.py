"""
Frontier-growth maze generation.

Algorithm:
1. Start with the bounding box of n pillars per side (border pre-carved)
2. Pick a random pillar from the frontier
3. Try the four directions in random order; in the first direction where
   both the next cell and the pillar beyond it are blank, mark a passage
   then a new pillar, and add the new pillar to the frontier
4. If no direction works, the pillar is exhausted and leaves the frontier
5. Repeat from 2 until the frontier is empty

A move only ever claims a blank pillar, so no passage joins two pillars that
were already part of the maze: the interior walls form trees hanging off the
border, and the open floor between them is a perfect maze.

Walkthrough n=4::

    XOXOXOX
    O   O O
    X X X X
    O O   O
    XOX XOX
    O     O
    XOXOXOX
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass

from mazemaker.mazes.grid import ALL_DIRECTIONS, CellState, Coord, Grid, MazeGrid, get
from mazemaker.mazes.verification import verify_perfect_maze
from mazemaker.utils.exceptions import MazeVerificationError, validate_maze_size
from mazemaker.utils.maze_logging import get_logger

logger = get_logger(__name__)


@dataclass
class GrowthStats:
    """Counters collected during one generation run."""

    steps: int = 0
    extensions: int = 0
    exhaustions: int = 0
    elapsed: float = 0.0


def try_extend(maze: MazeGrid, start: Coord, rng: random.Random) -> Coord | None:
    """
    Try to grow the maze one pillar outward from ``start``.

    Args:
        maze: Grid being grown (mutated on success)
        start: Frontier pillar to grow from
        rng: Random source for the direction order

    Returns:
        The newly claimed pillar, or None when every direction is blocked
    """
    assert maze[start] is CellState.WALL, f"frontier coordinate {start} is {maze[start]}, expected WALL"

    directions = list(ALL_DIRECTIONS)
    rng.shuffle(directions)

    for direction in directions:
        passage = start.step(direction)
        pillar = start.step(direction, 2)
        if (
            get(maze.cells, passage.x, passage.y) is CellState.BLANK
            and get(maze.cells, pillar.x, pillar.y) is CellState.BLANK
        ):
            maze[passage] = CellState.PASSAGE
            maze[pillar] = CellState.WALL
            return pillar

    return None


class GrowthEngine:
    """
    Runs frontier growth on a MazeGrid until the frontier is empty.

    Each pillar moves through not-yet-created -> in-frontier -> exhausted,
    never backwards. Every successful step claims a blank pillar, so the run
    ends after a bounded number of steps.
    """

    def __init__(self, maze: MazeGrid, rng: random.Random | None = None):
        self.maze = maze
        self.rng = rng if rng is not None else random.Random()
        self.stats = GrowthStats()

    def step(self) -> bool:
        """
        Perform one growth step.

        Returns:
            False if the frontier was already empty, True otherwise
        """
        frontier = self.maze.frontier
        if not frontier:
            return False

        start = frontier.choice(self.rng)
        self.stats.steps += 1

        new_pillar = try_extend(self.maze, start, self.rng)
        if new_pillar is not None:
            frontier.add(new_pillar)
            self.stats.extensions += 1
        else:
            frontier.discard(start)
            self.stats.exhaustions += 1

        return True

    def run(self) -> GrowthStats:
        """Grow until the frontier is empty and return the run statistics."""
        start_time = time.perf_counter()
        while self.step():
            pass
        self.stats.elapsed = time.perf_counter() - start_time

        logger.debug(
            f"Growth finished for size {self.maze.size}: {self.stats.steps} steps, "
            f"{self.stats.extensions} extensions, {self.stats.exhaustions} exhaustions "
            f"in {self.stats.elapsed:.3f}s"
        )
        return self.stats


def generate_maze(
    n: int,
    rng: random.Random | None = None,
    seed: int | None = None,
    verify: bool = False,
) -> Grid:
    """
    Generate a perfect maze with n pillars per side.

    Args:
        n: Pillars per side (>= 1); the grid side is 2n - 1
        rng: Random source; takes precedence over seed
        seed: Seed for a fresh random.Random when rng is not given
        verify: Check the finished grid and raise if it is not perfect

    Returns:
        The finished grid as a list of rows of CellState

    Raises:
        ConfigurationError: If n is not an integer >= 1
        MazeVerificationError: If verify is set and the maze is not perfect

    Example:
        >>> grid = generate_maze(3, seed=42)
        >>> len(grid), len(grid[0])
        (5, 5)
    """
    n = validate_maze_size(n, component="generate_maze")

    if rng is None:
        rng = random.Random(seed)

    maze = MazeGrid.from_pillars(n)
    logger.info(f"Generating maze with {n} pillars per side (grid {maze.size}x{maze.size})")

    GrowthEngine(maze, rng).run()

    if verify:
        verification = verify_perfect_maze(maze.cells)
        if not verification["is_perfect"]:
            raise MazeVerificationError(verification)

    return maze.cells
