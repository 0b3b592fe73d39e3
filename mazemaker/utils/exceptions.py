"""
Enhanced exception classes for MazeMaker with helpful error messages and user guidance.

This module provides specialized exception classes that give users clear,
actionable error messages with suggested solutions.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze generation errors with helpful context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "MazeMaker"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class ConfigurationError(MazeError, ValueError):
    """Exception raised when a generation parameter is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        component: str | None = None,
        reason: str | None = None,
    ):
        self.parameter_name = parameter_name
        self.provided_value = provided_value
        self.valid_range = valid_range

        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        if reason:
            diagnostic_data["reason"] = reason

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range
        )

        message = f"Invalid configuration for parameter '{parameter_name}'"

        super().__init__(
            message=message,
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class MazeVerificationError(MazeError):
    """Exception raised when a finished grid is not a perfect maze."""

    def __init__(self, verification: dict[str, Any], component: str | None = None):
        self.verification = verification

        failed = [key for key in ("is_connected", "is_no_loops", "border_intact") if not verification.get(key, True)]

        super().__init__(
            message=f"Generated maze is not perfect (failed: {', '.join(failed) or 'unknown'})",
            component=component or "GrowthEngine",
            suggested_action="Report the seed and size; a perfect maze is expected for every input",
            error_code="MAZE_NOT_PERFECT",
            diagnostic_data=dict(verification),
        )


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)) and not isinstance(provided_value, bool):
        if valid_range[0] is not None and provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif valid_range[1] is not None and provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


def validate_maze_size(n: Any, parameter_name: str = "n", component: str | None = None) -> int:
    """
    Validate the number of pillars per side.

    Args:
        n: Requested pillars per side
        parameter_name: Name used in the error message
        component: Component reporting the error

    Returns:
        The validated size as int

    Raises:
        ConfigurationError: If n is not an integer or is smaller than 1
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ConfigurationError(parameter_name, n, expected_type=int, valid_range=(1, None), component=component)

    if n < 1:
        raise ConfigurationError(
            parameter_name,
            n,
            valid_range=(1, None),
            component=component,
            reason="a maze needs at least one pillar per side",
        )

    return n
