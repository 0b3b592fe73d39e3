#!/usr/bin/env python3
"""
Unit tests for mazemaker/utils/exceptions.py

Tests the structured exception hierarchy:
- MazeError (base exception)
- ConfigurationError (invalid parameters)
- MazeVerificationError (imperfect mazes)
- validate_maze_size
"""

import pytest

from mazemaker.utils.exceptions import ConfigurationError, MazeError, MazeVerificationError, validate_maze_size

# =============================================================================
# Test MazeError (Base Exception)
# =============================================================================


@pytest.mark.unit
def test_maze_error_basic():
    """Test basic MazeError creation."""
    error = MazeError("Test error message", component="TestComponent")

    assert "TestComponent" in str(error)
    assert "Test error message" in str(error)
    assert error.component == "TestComponent"


@pytest.mark.unit
def test_maze_error_default_component():
    error = MazeError("Something happened")

    assert str(error).startswith("[MazeMaker] Something happened")


@pytest.mark.unit
def test_maze_error_full_message():
    """Test MazeError with suggestion, code and diagnostics."""
    error = MazeError(
        "Error occurred",
        component="Engine",
        suggested_action="Try a smaller maze",
        error_code="TEST_CODE",
        diagnostic_data={"size": 5, "frontier": 0},
    )

    error_str = str(error)
    assert "Suggestion: Try a smaller maze" in error_str
    assert "Error Code: TEST_CODE" in error_str
    assert "Diagnostic Information:" in error_str
    assert "size: 5" in error_str
    assert "frontier: 0" in error_str


# =============================================================================
# Test ConfigurationError
# =============================================================================


@pytest.mark.unit
def test_configuration_error_is_value_error():
    error = ConfigurationError("n", 0, valid_range=(1, None))

    assert isinstance(error, MazeError)
    assert isinstance(error, ValueError)
    assert error.parameter_name == "n"
    assert error.provided_value == 0


@pytest.mark.unit
def test_configuration_error_range_suggestion():
    error = ConfigurationError("n", 0, valid_range=(1, None))

    assert "Increase n to at least 1" in str(error)
    assert "INVALID_CONFIGURATION" in str(error)


@pytest.mark.unit
def test_configuration_error_type_suggestion():
    error = ConfigurationError("n", "four", expected_type=int)

    assert "Convert n to int" in str(error)
    assert "expected_type: int" in str(error)


@pytest.mark.unit
def test_configuration_error_reason():
    error = ConfigurationError("seed", -1, reason="seed must be non-negative")

    assert "reason: seed must be non-negative" in str(error)
    assert "Check seed value and try again" in str(error)


# =============================================================================
# Test MazeVerificationError
# =============================================================================


@pytest.mark.unit
def test_verification_error_lists_failures():
    verification = {"is_perfect": False, "is_connected": True, "is_no_loops": False, "border_intact": False}

    error = MazeVerificationError(verification)

    assert "is_no_loops" in str(error)
    assert "border_intact" in str(error)
    assert "MAZE_NOT_PERFECT" in str(error)
    assert error.verification is verification


# =============================================================================
# Test validate_maze_size
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("n", [1, 2, 60])
def test_validate_maze_size_accepts(n):
    assert validate_maze_size(n) == n


@pytest.mark.unit
@pytest.mark.parametrize("n", [0, -1, 1.0, "3", None, False, True])
def test_validate_maze_size_rejects(n):
    with pytest.raises(ConfigurationError):
        validate_maze_size(n)


@pytest.mark.unit
def test_validate_maze_size_component():
    with pytest.raises(ConfigurationError, match=r"\[generate_maze\]"):
        validate_maze_size(0, component="generate_maze")
