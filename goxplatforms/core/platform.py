"""
Go cross-compilation platform values.

A platform is a GOOS/GOARCH pair plus a flag saying whether it belongs to the
default build set. This module also translates Go's canonical names into the
labels `uname` reports on the corresponding systems.

Usage:
    from goxplatforms.core.platform import Platform, parse_platform

    plat = Platform("linux", "arm64", True)
    print(plat)               # linux/arm64
    print(plat.os_uname())    # Linux
    print(plat.arch_uname())  # aarch64

    plat = parse_platform("windows/386")
"""

from dataclasses import dataclass
from typing import Tuple

from goxplatforms.core.exceptions import PlatformSyntaxError

# Like `uname -s`. Mirrors go/build/syslist.go; android, nacl and zos have no
# stable uname label and are left out.
_OS_UNAME = {
    "darwin": "Darwin",
    "dragonfly": "DragonFly",
    "freebsd": "FreeBSD",
    "linux": "Linux",
    "netbsd": "NetBSD",
    "openbsd": "OpenBSD",
    "plan9": "Plan9",
    "solaris": "SunOS",
    "windows": "Windows",
}

# Like `uname -m`. amd64p32, armbe, arm64be, the mips family, ppc, s390,
# s390x, sparc and sparc64 are left out.
_ARCH_UNAME = {
    "386": "i386",
    "amd64": "x86_64",
    "arm": "arm",
    "arm64": "aarch64",
    "ppc64": "ppc64",
    "ppc64le": "ppc64le",
}


@dataclass(frozen=True)
class Platform:
    """
    A combination of OS/arch that can be built against.

    Attributes:
        os: Canonical GOOS value ('linux', 'darwin', 'windows', ...)
        arch: Canonical GOARCH value ('amd64', 'arm64', ...)
        default: Whether the platform is part of the default build set when
            no OS/arch is requested explicitly. Only popular or generally
            useful targets are defaults; Android, for example, is not, since
            it is rarely cross-compiled alongside something like Linux.
    """

    os: str
    arch: str
    default: bool = False

    def __str__(self) -> str:
        return render(self)

    def os_uname(self) -> str:
        """Return the `uname -s` label for this platform, or '' if unknown."""
        return uname_os(self.os)

    def arch_uname(self) -> str:
        """Return the `uname -m` label for this platform, or '' if unknown."""
        return uname_arch(self.arch)


def render(platform: Platform) -> str:
    """
    Format a platform as "<os>/<arch>".

    Example:
        >>> render(Platform("linux", "amd64", True))
        'linux/amd64'
    """
    return f"{platform.os}/{platform.arch}"


def uname_os(os_name: str) -> str:
    """
    Map a GOOS value to what `uname -s` reports on that system.

    Returns:
        The uname label, or an empty string for unmapped systems

    Example:
        >>> uname_os("solaris")
        'SunOS'
        >>> uname_os("android")
        ''
    """
    return _OS_UNAME.get(os_name, "")


def uname_arch(arch: str) -> str:
    """
    Map a GOARCH value to what `uname -m` reports on that architecture.

    Returns:
        The uname label, or an empty string for unmapped architectures
    """
    return _ARCH_UNAME.get(arch, "")


def platform_key(platform: Platform) -> Tuple[str, str]:
    """Identity of a platform ignoring its default flag."""
    return (platform.os, platform.arch)


def parse_platform(text: str, default: bool = False) -> Platform:
    """
    Parse an "os/arch" string into a Platform.

    Args:
        text: Platform string such as 'linux/amd64'
        default: Default flag for the resulting platform

    Returns:
        Parsed Platform

    Raises:
        PlatformSyntaxError: If text is not exactly two non-empty parts
            separated by '/', or contains a '!'
    """
    parts = text.strip().split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise PlatformSyntaxError(text)
    # Filters strip a leading '!' before parsing, so any left is misplaced.
    if "!" in text:
        raise PlatformSyntaxError(text, "has a misplaced '!'")
    return Platform(os=parts[0], arch=parts[1], default=default)


__all__ = [
    "Platform",
    "render",
    "uname_os",
    "uname_arch",
    "platform_key",
    "parse_platform",
]
