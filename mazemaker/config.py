"""
Generation configuration.

Configurations describe one maze run: its size, entropy source, output
style and logging. They can be built in Python or loaded from a JSON file,
with command-line options layered on top.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from mazemaker.mazes.rendering import MazeStyle
from mazemaker.utils.exceptions import ConfigurationError

DEFAULT_PILLARS = 60


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
        Logging level (default: WARNING)
    use_colors : bool
        Colored console output (default: True)
    log_file : str | None
        Also write logs to this file (default: None)
    include_location : bool
        Append [file:line] to each record (default: False)
    """

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    use_colors: bool = True
    log_file: str | None = None
    include_location: bool = False


class MazeConfig(BaseModel):
    """
    Configuration for a single maze run.

    Attributes
    ----------
    n : int
        Pillars per side, >= 1 (default: 60)
    seed : int | None
        Random seed; None draws fresh entropy (default: None)
    style : MazeStyle
        Output style (default: lines)
    verify : bool
        Verify the finished maze before rendering (default: False)
    logging : LoggingConfig
        Logging settings
    """

    model_config = ConfigDict(extra="forbid")

    n: int = Field(default=DEFAULT_PILLARS, ge=1)
    seed: int | None = None
    style: MazeStyle = MazeStyle.LINES
    verify: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_seed(self) -> MazeConfig:
        """Seeds must be non-negative so runs can be reproduced from the CLI."""
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative")
        return self

    @property
    def size(self) -> int:
        """Grid side length."""
        return 2 * self.n - 1

    def with_overrides(self, **overrides: Any) -> MazeConfig:
        """
        Return a validated copy with the given fields replaced.

        None values are ignored so unset command-line options keep the
        configured value.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        data = self.model_dump()
        log_updates = updates.pop("logging", None)
        data.update(updates)
        if log_updates:
            data["logging"] = {**data["logging"], **log_updates}
        return build_config(data)


def _configuration_error(error: ValidationError) -> ConfigurationError:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "config"
    return ConfigurationError(
        location,
        first.get("input"),
        component="MazeConfig",
        reason=first["msg"],
    )


def build_config(data: dict[str, Any]) -> MazeConfig:
    """
    Validate a plain dictionary into a MazeConfig.

    Raises:
        ConfigurationError: If any field is invalid
    """
    try:
        return MazeConfig.model_validate(data)
    except ValidationError as e:
        raise _configuration_error(e) from e


def load_config(path: str | Path) -> MazeConfig:
    """
    Load a JSON configuration file.

    Args:
        path: Path to a JSON file with MazeConfig fields

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file is not valid JSON or a field is invalid
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError("config", str(path), component="load_config", reason=str(e)) from e

    if not isinstance(data, dict):
        raise ConfigurationError("config", type(data).__name__, expected_type=dict, component="load_config")

    return build_config(data)


def save_config(config: MazeConfig, path: str | Path) -> Path:
    """Write a configuration as JSON and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2))
    return path
