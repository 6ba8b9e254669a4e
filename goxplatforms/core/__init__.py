"""
Core functionality for goxplatforms.

This package contains the platform value type and the exception hierarchy
that the other components depend on.
"""

from .platform import (
    Platform,
    render,
    uname_os,
    uname_arch,
    platform_key,
    parse_platform,
)

from .exceptions import (
    GoxPlatformsError,
    PlatformError,
    PlatformSyntaxError,
    RegistryError,
    VersionRangeError,
    ConfigError,
)

__all__ = [
    # Platform
    "Platform",
    "render",
    "uname_os",
    "uname_arch",
    "platform_key",
    "parse_platform",
    # Exceptions
    "GoxPlatformsError",
    "PlatformError",
    "PlatformSyntaxError",
    "RegistryError",
    "VersionRangeError",
    "ConfigError",
]
