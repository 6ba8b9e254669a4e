"""
Go version to platform list resolution.

This module selects the platform snapshot matching a Go toolchain version
string such as the `go1.9.2` reported by `go version`. Resolution never
fails: unexpected or unparseable input yields the newest snapshot.

Usage:
    from goxplatforms.registry.resolver import resolve

    for platform in resolve("go1.9.2"):
        print(platform)
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import Version

from goxplatforms.core.exceptions import VersionRangeError
from goxplatforms.registry.snapshots import (
    PlatformList,
    PLATFORMS_1_0,
    PLATFORMS_1_1,
    PLATFORMS_1_3,
    PLATFORMS_1_4,
    PLATFORMS_1_5,
    PLATFORMS_1_6,
    PLATFORMS_1_7,
    PLATFORMS_1_8,
    PLATFORMS_1_9,
    PLATFORMS_1_10,
    PLATFORMS_1_11,
    PLATFORMS_1_12,
    PLATFORMS_LATEST,
)

logger = logging.getLogger(__name__)

GO_VERSION_PREFIX = "go"

# Release segments, then an optional pre-release and build metadata. Any
# hyphen suffix is a pre-release, never a post-release.
_GO_VERSION_PATTERN = re.compile(
    r"v?(?P<release>[0-9]+(?:\.[0-9]+)*?)"
    r"(?P<pre>-[0-9]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*"
    r"|-?[A-Za-z\-~]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)?"
    r"(?:\+[0-9A-Za-z\-~]+(?:\.[0-9A-Za-z\-~]+)*)?"
)


@dataclass(frozen=True)
class VersionRange:
    """
    A version constraint and the platform snapshot it selects.

    Attributes:
        constraint: Comma separated specifier, e.g. '>=1.9,<1.10'
        label: Release label of the snapshot, e.g. '1.9'
        platforms: Snapshot returned when the constraint matches
    """

    constraint: str
    label: str
    platforms: PlatformList = field(repr=False)
    specifier: SpecifierSet = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Compile the constraint; a malformed one is an authoring bug."""
        try:
            specifier = SpecifierSet(self.constraint)
        except InvalidSpecifier as e:
            raise VersionRangeError(self.constraint, str(e)) from e
        object.__setattr__(self, "specifier", specifier)

    def contains(self, version: Version) -> bool:
        """Check a version against the range. Pre-releases never match."""
        return self.specifier.contains(version, prereleases=False)


# Checked in order, first match wins.
VERSION_RANGES: Tuple[VersionRange, ...] = (
    VersionRange("<=1.0", "1.0", PLATFORMS_1_0),
    VersionRange(">=1.1,<1.3", "1.1", PLATFORMS_1_1),
    VersionRange(">=1.3,<1.4", "1.3", PLATFORMS_1_3),
    VersionRange(">=1.4,<1.5", "1.4", PLATFORMS_1_4),
    VersionRange(">=1.5,<1.6", "1.5", PLATFORMS_1_5),
    VersionRange(">=1.6,<1.7", "1.6", PLATFORMS_1_6),
    VersionRange(">=1.7,<1.8", "1.7", PLATFORMS_1_7),
    VersionRange(">=1.8,<1.9", "1.8", PLATFORMS_1_8),
    VersionRange(">=1.9,<1.10", "1.9", PLATFORMS_1_9),
    VersionRange(">=1.10,<1.11", "1.10", PLATFORMS_1_10),
    VersionRange(">=1.11,<1.12", "1.11", PLATFORMS_1_11),
    VersionRange(">=1.12", "1.12", PLATFORMS_1_12),
)


def parse_go_version(version: str) -> Optional[Version]:
    """
    Parse a Go toolchain version string.

    Pre-release suffixes such as 'beta1', 'rc2' or '-1' come back as a dev
    release of the same number so that no range contains them. Build
    metadata after '+' is ignored.

    Args:
        version: Version as reported by the toolchain, e.g. 'go1.9.2'

    Returns:
        Parsed version, or None if the string lacks the 'go' prefix or the
        remainder is not a valid version number
    """
    if not version.startswith(GO_VERSION_PREFIX):
        return None

    number = version[len(GO_VERSION_PREFIX) :]
    match = _GO_VERSION_PATTERN.fullmatch(number)
    if match is None:
        logger.warning(f"Unable to parse current go version: {number!r}")
        return None

    release = match.group("release")
    if match.group("pre") is not None:
        return Version(f"{release}.dev0")
    return Version(release)


def match_range(version: Version) -> Optional[VersionRange]:
    """
    Find the first version range containing a version.

    Pre-release versions (e.g. go1.10beta1, parsed as 1.10.dev0) match no
    range.

    Returns:
        The matching VersionRange, or None
    """
    for version_range in VERSION_RANGES:
        if version_range.contains(version):
            return version_range
    return None


def resolve(version: str) -> PlatformList:
    """
    Return the platforms a Go toolchain version can cross-compile for.

    Args:
        version: Toolchain version string, e.g. 'go1.9.2'. Any string is
            accepted.

    Returns:
        The platform snapshot for that version. The latest snapshot is
        returned when the prefix is missing, the version cannot be parsed
        or no range matches.

    Example:
        >>> from goxplatforms.core.platform import Platform
        >>> platforms = resolve("go1.12.5")
        >>> Platform("aix", "ppc64", True) in platforms
        True
    """
    current = parse_go_version(version)
    if current is None:
        logger.debug(f"Using latest platforms for version string: {version!r}")
        return PLATFORMS_LATEST

    version_range = match_range(current)
    if version_range is None:
        logger.debug(f"No platform range matches go{current}, assuming latest")
        return PLATFORMS_LATEST

    logger.debug(f"go{current} matched {version_range.constraint!r}")
    return version_range.platforms


__all__ = [
    "GO_VERSION_PREFIX",
    "VersionRange",
    "VERSION_RANGES",
    "parse_go_version",
    "match_range",
    "resolve",
]
