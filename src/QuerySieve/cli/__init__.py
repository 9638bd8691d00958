"""CLI package for QuerySieve.

Splits click wiring (`ui`), resource setup (`runner`) and the parse loop
(`commands`) into separate modules.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from QuerySieve.cli.runner import CommandRunner
from QuerySieve.cli.ui import cli


def main() -> None:
    """Run the QuerySieve CLI.

    Entry point referenced by the console script in pyproject.toml.
    """
    cli()
