"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their runners.
"""

from __future__ import annotations

from pathlib import Path

import click

from QuerySieve.cli.runner import CommandRunner
from QuerySieve.config import DEFAULT_CONFIG_PATH, load_config_with_defaults


@click.group(help="QuerySieve: compile free-text search queries into predicates.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file, merged over config/default.yml when that exists.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group: load configuration into the context."""
    default_path = DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else config_path
    try:
        ctx.obj = load_config_with_defaults(config_path, default_path=default_path)
    except (OSError, TypeError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="--config") from e


@cli.command("parse")
@click.argument("queries", nargs=-1)
@click.pass_context
def parse_cmd(ctx: click.Context, queries: tuple[str, ...]) -> None:
    """Parse QUERIES (or the configured `queries`) and render the predicates."""
    runner = CommandRunner(ctx.obj)
    runner.run_parse(action=ctx.command.name, queries=queries)
