#!/usr/bin/env python3
"""Print raw and line-art mazes for a range of sizes, with verification results."""

import random

from mazemaker import configure_logging, generate_maze, print_maze, print_maze_lines, verify_perfect_maze

configure_logging(level="INFO", use_colors=True)

rng = random.Random(42)

for n in range(1, 9):
    grid = generate_maze(n, rng=rng)
    verification = verify_perfect_maze(grid)

    print(f"n={n} ({len(grid)}x{len(grid)}) perfect={verification['is_perfect']}")
    print_maze(grid)
    print_maze_lines(grid)
