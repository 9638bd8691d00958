from __future__ import annotations

"""Public configuration API for QuerySieve."""

from QuerySieve.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from QuerySieve.config.output import OutputConfig
from QuerySieve.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
