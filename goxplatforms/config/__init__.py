"""Configuration module for goxplatforms.

This module provides YAML configuration parsing and validation for
goxplatforms.yaml.
"""

from goxplatforms.config.parser import (
    DEFAULT_CONFIG_NAME,
    TargetsConfig,
    GoxPlatformsConfig,
    parse_config,
    parse_config_data,
    find_config,
)
from goxplatforms.core.exceptions import ConfigError

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "TargetsConfig",
    "GoxPlatformsConfig",
    "ConfigError",
    "parse_config",
    "parse_config_data",
    "find_config",
]
