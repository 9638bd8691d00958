"""Command runner for coordinating CLI execution.

Configures logging, builds components and turns failures into a clean abort.
"""

from __future__ import annotations

from typing import Sequence

import click

from QuerySieve.cli.commands import ParseCommand
from QuerySieve.config import AppConfig
from QuerySieve.renderers import create_output_writer
from QuerySieve.utils.log import configure_logging, log


class CommandRunner:
    """Run CLI commands against one loaded configuration."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_parse(self, action: str, queries: Sequence[str]) -> None:
        """Parse the given queries, or the configured ones when none are given.

        Args:
            action: The CLI command name (e.g., 'parse').
            queries: Queries from the command line.

        Raises:
            click.UsageError: When there is nothing to parse.
            click.Abort: When parsing or output fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        selected = tuple(queries) or self.config.queries
        if not selected:
            raise click.UsageError("No queries given and none configured under `queries`")

        try:
            output_writer = create_output_writer(self.config)
            command = ParseCommand(queries=selected, output_writer=output_writer)
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Parse failed: %s", e)
            raise click.Abort from e
