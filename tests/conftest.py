"""
Pytest configuration and shared fixtures for the MazeMaker test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import random

import pytest

from mazemaker.mazes import CellState
from mazemaker.utils.maze_logging import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore quiet, uncolored logging after each test."""
    yield
    configure_logging(level="WARNING", use_colors=False)


# =============================================================================
# Grid Fixtures
# =============================================================================


def parse_grid(text: str) -> list[list[CellState]]:
    """Build a grid from raw-render text (X, O, space)."""
    rows = text.strip("\n").split("\n")
    return [[CellState(ch) for ch in row] for row in rows]


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def ring_grid():
    """Finished n=2 maze: the bare border ring."""
    return parse_grid("XOX\nO O\nXOX")


@pytest.fixture
def small_maze_grid():
    """A finished n=3 maze with one interior pillar hanging off the east side."""
    return parse_grid("XOXOX\nO   O\nX XOX\nO   O\nXOXOX")


@pytest.fixture
def grid_from_text():
    """Factory turning raw-render text into a grid."""
    return parse_grid
