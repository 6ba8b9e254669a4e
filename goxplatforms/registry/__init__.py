"""
Versioned Go platform registry.

Holds the per-release platform snapshots and resolves a Go version string to
the matching snapshot.
"""

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
    SNAPSHOTS,
)
from goxplatforms.registry.resolver import (
    GO_VERSION_PREFIX,
    VersionRange,
    VERSION_RANGES,
    parse_go_version,
    match_range,
    resolve,
)

__all__ = [
    "PlatformList",
    "PLATFORMS_1_0",
    "PLATFORMS_1_1",
    "PLATFORMS_1_3",
    "PLATFORMS_1_4",
    "PLATFORMS_1_5",
    "PLATFORMS_1_6",
    "PLATFORMS_1_7",
    "PLATFORMS_1_8",
    "PLATFORMS_1_9",
    "PLATFORMS_1_10",
    "PLATFORMS_1_11",
    "PLATFORMS_1_12",
    "PLATFORMS_LATEST",
    "SNAPSHOTS",
    "GO_VERSION_PREFIX",
    "VersionRange",
    "VERSION_RANGES",
    "parse_go_version",
    "match_range",
    "resolve",
]
