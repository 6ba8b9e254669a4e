"""YAML configuration parser for goxplatforms.

This module provides parsing and validation for goxplatforms.yaml files,
which hold a default Go version and default target filters for the CLI.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import logging

import yaml

from goxplatforms.core.exceptions import ConfigError, PlatformSyntaxError
from goxplatforms.cross.selection import PlatformFilter, split_tokens

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "goxplatforms.yaml"

SUPPORTED_CONFIG_VERSION = 1


@dataclass
class TargetsConfig:
    """Default target filters."""

    os: List[str] = field(default_factory=list)
    arch: List[str] = field(default_factory=list)
    osarch: List[str] = field(default_factory=list)
    all: bool = False

    def to_filter(self) -> PlatformFilter:
        return PlatformFilter.parse(os=self.os, arch=self.arch, osarch=self.osarch)


@dataclass
class GoxPlatformsConfig:
    """Complete goxplatforms configuration."""

    version: int
    go_version: Optional[str] = None
    targets: TargetsConfig = field(default_factory=TargetsConfig)


def parse_config(config_path: Path) -> GoxPlatformsConfig:
    """
    Parse goxplatforms.yaml configuration file.

    Args:
        config_path: Path to goxplatforms.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    logger.debug(f"Loading configuration from {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Failed to read configuration file {config_path}: {e}"
        ) from e

    if data is None:
        raise ConfigError("Configuration file is empty")

    return parse_config_data(data)


def parse_config_data(data) -> GoxPlatformsConfig:
    """Parse and validate configuration data already loaded from YAML."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    if "version" not in data:
        raise ConfigError("Missing required field: version")

    version = data["version"]
    # YAML true loads as a bool, which compares equal to 1.
    if isinstance(version, bool) or version != SUPPORTED_CONFIG_VERSION:
        raise ConfigError(
            f"Unsupported version: {version} "
            f"(expected {SUPPORTED_CONFIG_VERSION})"
        )

    go_version = data.get("go_version")
    if go_version is not None and not isinstance(go_version, str):
        raise ConfigError("Field 'go_version' must be a string, e.g. 'go1.12.5'")

    return GoxPlatformsConfig(
        version=data["version"],
        go_version=go_version,
        targets=_parse_targets(data.get("targets")),
    )


def _parse_targets(data) -> TargetsConfig:
    """Parse the targets section."""
    if data is None:
        return TargetsConfig()

    if not isinstance(data, dict):
        raise ConfigError("Field 'targets' must be a mapping")

    unknown = set(data) - {"os", "arch", "osarch", "all"}
    if unknown:
        raise ConfigError(
            f"Unknown field(s) in 'targets': {', '.join(sorted(unknown))}"
        )

    values = {}
    for name in ("os", "arch", "osarch"):
        value = data.get(name)
        # Unquoted numeric names such as 386 load as int.
        if isinstance(value, bool) or (
            value is not None and not isinstance(value, (str, int, list))
        ):
            raise ConfigError(f"Field 'targets.{name}' must be a string or a list")
        values[name] = split_tokens(value)

    include_all = data.get("all", False)
    if not isinstance(include_all, bool):
        raise ConfigError("Field 'targets.all' must be true or false")

    targets = TargetsConfig(all=include_all, **values)

    try:
        targets.to_filter()
    except PlatformSyntaxError as e:
        raise ConfigError(f"Invalid target in 'targets': {e}") from e

    return targets


def find_config(directory: Path) -> Optional[Path]:
    """Return the default config file in directory, if there is one."""
    candidate = directory / DEFAULT_CONFIG_NAME
    return candidate if candidate.exists() else None


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "TargetsConfig",
    "GoxPlatformsConfig",
    "parse_config",
    "parse_config_data",
    "find_config",
]
