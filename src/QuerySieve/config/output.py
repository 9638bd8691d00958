"""Output configuration: where and how parse results are rendered."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from QuerySieve.config.common import expect_str, expect_str_list, get_required_value, get_section

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        base_dir: Directory that file writers write under.
        formats: Enabled writers, in configured order.
    """

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Read the `output` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "output", required=True)
    formats: list[str] = []
    for item in expect_str_list(get_required_value(section, "formats", "output.formats"), "output.formats"):
        fmt = item.strip().lower()
        if fmt and fmt not in formats:
            formats.append(fmt)

    return OutputConfig(
        base_dir=expect_str(get_required_value(section, "base_dir", "output.base_dir"), "output.base_dir"),
        formats=tuple(formats),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output constraints.

    Raises:
        ValueError: On an empty base dir, no formats, or unknown formats.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")

    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {sorted(unknown)}")

    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
