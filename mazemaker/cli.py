"""
Command-line interface for MazeMaker.

Generates perfect mazes and prints them as ASCII art, or checks that a batch
of generated mazes is perfect.
"""

from __future__ import annotations

import random

import click

from mazemaker import __version__
from mazemaker.config import MazeConfig, load_config
from mazemaker.mazes import MazeStyle, generate_maze, render, verify_perfect_maze
from mazemaker.utils.exceptions import ConfigurationError, MazeError
from mazemaker.utils.maze_logging import LoggedOperation, configure_logging, get_logger, log_generation_configuration

logger = get_logger("mazemaker.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _apply_logging(config: MazeConfig) -> None:
    configure_logging(
        level=config.logging.level,
        log_to_file=config.logging.log_file is not None,
        log_file_path=config.logging.log_file,
        use_colors=config.logging.use_colors,
        include_location=config.logging.include_location,
    )


def _resolve_config(config_path, **overrides) -> MazeConfig:
    try:
        base = load_config(config_path) if config_path else MazeConfig()
        return base.with_overrides(**overrides)
    except ConfigurationError as e:
        hint = "N" if e.parameter_name == "n" else e.parameter_name
        raise click.BadParameter(str(e), param_hint=hint) from e


@click.group()
@click.version_option(version=__version__, prog_name="mazemaker")
def main():
    """
    MazeMaker: perfect maze generator

    Grows a maze from its border by random frontier extension and prints it
    as raw cell states or as line art.
    """


@main.command()
@click.argument("n", type=int, required=False)
@click.option(
    "--style",
    "-s",
    type=click.Choice([style.value for style in MazeStyle]),
    default=None,
    help="Output style: raw cell states, line art, or both",
)
@click.option("--seed", type=int, default=None, help="Random seed for a reproducible maze")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON config file")
@click.option("--verify/--no-verify", default=None, help="Check that the maze is perfect before printing")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None, help="Logging level")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write logs to this file")
@click.option("--no-color", is_flag=True, help="Disable colored log output")
def generate(n, style, seed, config_path, verify, log_level, log_file, no_color):
    """
    Generate a maze with N pillars per side (default 60) and print it.

    Examples:
        mazemaker generate 10
        mazemaker generate 8 --style both --seed 42
        mazemaker generate --config maze.json --log-level INFO
    """
    logging_overrides = {
        "level": log_level.upper() if log_level else None,
        "log_file": log_file,
        "use_colors": False if no_color else None,
    }
    config = _resolve_config(
        config_path,
        n=n,
        style=style,
        seed=seed,
        verify=verify,
        logging={key: value for key, value in logging_overrides.items() if value is not None},
    )
    _apply_logging(config)
    log_generation_configuration(
        logger,
        "generate",
        {"n": config.n, "size": config.size, "seed": config.seed, "style": config.style.value},
    )

    try:
        with LoggedOperation(logger, f"maze generation (n={config.n})"):
            grid = generate_maze(config.n, seed=config.seed, verify=config.verify)
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="N") from e
    except MazeError as e:
        raise click.ClickException(str(e)) from e

    click.echo(render(grid, config.style), nl=False)


@main.command()
@click.argument("n", type=click.IntRange(min=1))
@click.option("--seed", type=int, default=None, help="Seed of the first trial; trial i uses seed + i")
@click.option("--trials", "-t", type=click.IntRange(min=1), default=10, show_default=True, help="Number of mazes")
@click.option("--verbose", "-v", is_flag=True, help="Print full verification details")
def verify(n, seed, trials, verbose):
    """
    Generate TRIALS mazes with N pillars per side and check each is perfect.

    Exits with status 1 if any maze fails.
    """
    failures = 0
    for trial in range(trials):
        rng = random.Random(seed + trial) if seed is not None else random.Random()
        grid = generate_maze(n, rng=rng)
        result = verify_perfect_maze(grid)

        status = "PERFECT" if result["is_perfect"] else "FAILED"
        click.echo(
            f"trial {trial + 1}/{trials}: {status} "
            f"(walls={result['wall_count']}, passages={result['passage_count']}, "
            f"rooms={result['room_count']}, openings={result['opening_count']})"
        )
        if verbose:
            for key, value in result.items():
                click.echo(f"    {key}: {value}")
        if not result["is_perfect"]:
            failures += 1

    click.echo(f"{trials - failures}/{trials} mazes perfect")
    if failures:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
