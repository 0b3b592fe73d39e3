"""
Perfect-maze verification for finished grids.

The pre-carved border is a closed ring of pillars and passages, so the wall
graph of a finished maze has exactly one cycle (the ring) for n >= 2 and no
others. Seen from the floor, the open rooms at odd/odd positions form a
spanning tree: every room is reachable and there are exactly rooms - 1
openings between them.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from mazemaker.mazes.grid import CellState, get

if TYPE_CHECKING:
    from collections.abc import Sequence

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _count_components(nodes: list[tuple[int, int]], linked) -> tuple[int, int]:
    """
    Breadth-first search over nodes two cells apart.

    Args:
        nodes: Node coordinates
        linked: Callable (x, y) -> bool telling whether the midpoint cell joins two nodes

    Returns:
        (number of components, size of the component containing nodes[0])
    """
    remaining = set(nodes)
    components = 0
    first_size = 0

    for origin in nodes:
        if origin not in remaining:
            continue
        components += 1
        remaining.discard(origin)
        queue = deque([origin])
        size = 1
        while queue:
            x, y = queue.popleft()
            for dx, dy in _STEPS:
                neighbor = (x + 2 * dx, y + 2 * dy)
                if neighbor in remaining and linked(x + dx, y + dy):
                    remaining.discard(neighbor)
                    queue.append(neighbor)
                    size += 1
        if components == 1:
            first_size = size

    return components, first_size


def border_matches_pattern(grid: Sequence[Sequence[CellState]]) -> bool:
    """Check that every border cell alternates WALL/PASSAGE from the corners."""
    size = len(grid)
    last = size - 1
    for i in range(size):
        expected = CellState.WALL if i % 2 == 0 else CellState.PASSAGE
        for x, y in ((0, i), (i, 0), (last, i), (i, last)):
            if grid[x][y] is not expected:
                return False
    return True


def verify_perfect_maze(grid: Sequence[Sequence[CellState]]) -> dict[str, Any]:
    """
    Verify that a finished grid is a perfect maze.

    Args:
        grid: Finished square grid of side 2n - 1

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: All walls form one component
        - is_no_loops: The only wall cycle is the border ring
        - border_intact: Border matches the alternating pattern
        - rooms_connected: Every open room is reachable
        - wall_count, passage_count, blank_count
        - tree_edges: Edges of a spanning tree over the walls
        - cycle_count, expected_cycles
        - room_count, opening_count
    """
    size = len(grid)
    if size == 0 or any(len(row) != size for row in grid) or size % 2 == 0:
        raise ValueError(f"Expected a non-empty square grid of odd side, got {size} rows")

    pillars_per_side = (size + 1) // 2

    wall_count = passage_count = blank_count = 0
    misplaced = 0
    for x, row in enumerate(grid):
        for y, state in enumerate(row):
            if state is CellState.WALL:
                wall_count += 1
                if x % 2 or y % 2:
                    misplaced += 1
            elif state is CellState.PASSAGE:
                passage_count += 1
                if (x + y) % 2 == 0:
                    misplaced += 1
            else:
                blank_count += 1

    pillars = [(x, y) for x in range(0, size, 2) for y in range(0, size, 2)]
    all_pillars_claimed = all(grid[x][y] is CellState.WALL for x, y in pillars)

    wall_components, reached = _count_components(
        pillars, lambda x, y: get(grid, x, y) is CellState.PASSAGE
    )
    is_connected = all_pillars_claimed and wall_components == 1 and reached == wall_count

    # Cyclomatic number of the wall graph
    cycle_count = passage_count - wall_count + wall_components
    expected_cycles = 1 if pillars_per_side >= 2 else 0
    is_no_loops = cycle_count == expected_cycles and misplaced == 0

    rooms = [(x, y) for x in range(1, size, 2) for y in range(1, size, 2)]
    opening_count = sum(
        1
        for x in range(1, size - 1)
        for y in range(1, size - 1)
        if (x + y) % 2 == 1 and grid[x][y] is CellState.BLANK
    )
    if rooms:
        room_components, _ = _count_components(rooms, lambda x, y: get(grid, x, y) is CellState.BLANK)
        rooms_connected = room_components == 1
    else:
        rooms_connected = True
    rooms_form_tree = rooms_connected and opening_count == max(len(rooms) - 1, 0)

    border_intact = border_matches_pattern(grid)

    return {
        "is_perfect": is_connected and is_no_loops and border_intact and rooms_form_tree,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "border_intact": border_intact,
        "rooms_connected": rooms_connected,
        "size": size,
        "pillars_per_side": pillars_per_side,
        "wall_count": wall_count,
        "passage_count": passage_count,
        "blank_count": blank_count,
        "wall_components": wall_components,
        "tree_edges": wall_count - wall_components,
        "cycle_count": cycle_count,
        "expected_cycles": expected_cycles,
        "room_count": len(rooms),
        "opening_count": opening_count,
    }
