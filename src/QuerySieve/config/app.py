from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from QuerySieve.config.common import expect_str_list
from QuerySieve.config.output import OutputConfig, check_output, load_output
from QuerySieve.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration.

    Attributes:
        runtime: Logging settings.
        output: Output writer settings.
        queries: Queries parsed when the CLI is given none.
    """

    runtime: RuntimeConfig
    output: OutputConfig
    queries: tuple[str, ...] = ()


def load_queries(raw: Mapping[str, Any]) -> tuple[str, ...]:
    """Read the optional top-level `queries` list.

    A single string is accepted as a one-item list.
    """
    value = raw.get("queries")
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(expect_str_list(value, "queries"))


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse a merged mapping into AppConfig."""
    runtime = load_runtime(raw)
    output = load_output(raw)
    queries = load_queries(raw)

    check_runtime(runtime)
    check_output(output)

    return AppConfig(runtime=runtime, output=output, queries=queries)


def load_config(path: Path) -> AppConfig:
    """Load one YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = DEFAULT_CONFIG_PATH,
    *,
    defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults with an override file.

    Args:
        config_path: Override file.
        default_path: Defaults file, ignored when `defaults_text` is given.
        defaults_text: Inline YAML defaults.
    """
    if defaults_text is None:
        if config_path == default_path:
            return load_config(config_path)
        defaults_text = default_path.read_text(encoding="utf-8")
    base = parse_yaml(defaults_text)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings; lists and scalars in `override` replace."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
