"""Output renderers for parse results.

Exports the OutputWriter base class and a factory that instantiates writers
from configuration.
"""

from __future__ import annotations

from QuerySieve.config import AppConfig
from QuerySieve.renderers.base import MultiOutputWriter, OutputWriter, ParseResult
from QuerySieve.renderers.console import ConsoleOutputWriter, render_text
from QuerySieve.renderers.json import JsonFileWriter, load_predicates, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create the output writer for the configured formats.

    Raises:
        ValueError: If no writer is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ParseResult",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "load_predicates",
    "create_output_writer",
]
