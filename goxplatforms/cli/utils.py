"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
keep output and configuration handling consistent.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from goxplatforms.config.parser import GoxPlatformsConfig, find_config, parse_config

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def load_cli_config(args) -> Optional[GoxPlatformsConfig]:
    """
    Load the configuration selected on the command line.

    An explicit --config path must exist. Without one, goxplatforms.yaml in
    the current directory is used when present.

    Args:
        args: Parsed arguments with a config attribute

    Returns:
        Parsed configuration, or None when no config file applies

    Raises:
        ConfigError: If the config file is missing or invalid
    """
    config_path: Optional[Path] = getattr(args, "config", None)
    if config_path is None:
        config_path = find_config(Path.cwd())
        if config_path is None:
            logger.debug("No config file found, using command-line options only")
            return None

    return parse_config(config_path)


# ============================================================================
# Output Helpers
# ============================================================================


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def label_or_dash(label: str) -> str:
    """Show empty uname labels as '-'."""
    return label or "-"
