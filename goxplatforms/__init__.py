"""
goxplatforms - Go cross-compilation platforms by toolchain version.

Maps a Go toolchain version string to the OS/arch pairs that release can
cross-compile for, so a build tool can enumerate targets without invoking
the toolchain.

Usage:
    from goxplatforms import resolve, PlatformFilter

    targets = PlatformFilter.parse(os="linux !plan9").select(resolve("go1.9.2"))
"""

from goxplatforms.core.platform import (
    Platform,
    render,
    uname_os,
    uname_arch,
    parse_platform,
)
from goxplatforms.core.exceptions import (
    GoxPlatformsError,
    PlatformSyntaxError,
    VersionRangeError,
    ConfigError,
)
from goxplatforms.registry.snapshots import PLATFORMS_LATEST
from goxplatforms.registry.resolver import resolve
from goxplatforms.cross.selection import PlatformFilter

__all__ = [
    "Platform",
    "render",
    "uname_os",
    "uname_arch",
    "parse_platform",
    "GoxPlatformsError",
    "PlatformSyntaxError",
    "VersionRangeError",
    "ConfigError",
    "PLATFORMS_LATEST",
    "resolve",
    "PlatformFilter",
]
