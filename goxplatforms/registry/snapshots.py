"""
Platform lists for each Go release that changed the set of supported targets.

Every snapshot is a tuple built from an earlier snapshot plus the platforms
that release added, so snapshots never share mutable storage. The lists are
hand-curated release history and are kept as-is, duplicates included.
"""

from collections import OrderedDict
from typing import Tuple

from goxplatforms.core.platform import Platform

PlatformList = Tuple[Platform, ...]

PLATFORMS_1_0: PlatformList = (
    Platform("darwin", "386", True),
    Platform("darwin", "amd64", True),
    Platform("linux", "386", True),
    Platform("linux", "amd64", True),
    Platform("linux", "arm", True),
    Platform("freebsd", "386", True),
    Platform("freebsd", "amd64", True),
    Platform("openbsd", "386", True),
    Platform("openbsd", "amd64", True),
    Platform("windows", "386", True),
    Platform("windows", "amd64", True),
)

PLATFORMS_1_1: PlatformList = PLATFORMS_1_0 + (
    Platform("freebsd", "arm", True),
    Platform("netbsd", "386", True),
    Platform("netbsd", "amd64", True),
    Platform("netbsd", "arm", True),
    Platform("plan9", "386", False),
)

PLATFORMS_1_3: PlatformList = PLATFORMS_1_1 + (
    Platform("dragonfly", "386", False),
    Platform("dragonfly", "amd64", False),
    Platform("nacl", "amd64", False),
    Platform("nacl", "amd64p32", False),
    Platform("nacl", "arm", False),
    Platform("solaris", "amd64", False),
)

PLATFORMS_1_4: PlatformList = PLATFORMS_1_3 + (
    Platform("android", "arm", False),
    Platform("plan9", "amd64", False),
)

PLATFORMS_1_5: PlatformList = PLATFORMS_1_4 + (
    Platform("darwin", "arm", False),
    Platform("darwin", "arm64", False),
    Platform("linux", "arm64", False),
    Platform("linux", "ppc64", False),
    Platform("linux", "ppc64le", False),
)

PLATFORMS_1_6: PlatformList = PLATFORMS_1_5 + (
    Platform("android", "386", False),
    Platform("linux", "mips64", False),
    Platform("linux", "mips64le", False),
)

# Built from 1.5, not 1.6: the 1.6 additions are repeated here with mips64
# and mips64le promoted to defaults.
PLATFORMS_1_7: PlatformList = PLATFORMS_1_5 + (
    # While not fully supported s390x is generally useful
    Platform("linux", "s390x", True),
    Platform("plan9", "arm", False),
    Platform("android", "386", False),
    Platform("linux", "mips64", True),
    Platform("linux", "mips64le", True),
)

PLATFORMS_1_8: PlatformList = PLATFORMS_1_7 + (
    Platform("linux", "mips", True),
    Platform("linux", "mipsle", True),
    Platform("linux", "arm64", True),
)

PLATFORMS_1_9: PlatformList = PLATFORMS_1_8 + (
    Platform("linux", "riscv64", True),
    Platform("freebsd", "riscv64", True),
    Platform("freebsd", "arm64", True),
    Platform("freebsd", "arm", True),
    Platform("openbsd", "arm64", True),
    Platform("openbsd", "arm", True),
    Platform("openbsd", "riscv64", True),
    Platform("windows", "arm", True),
    Platform("windows", "arm64", True),
    Platform("js", "wasm", True),
)

# No new platforms in 1.10
PLATFORMS_1_10: PlatformList = PLATFORMS_1_9

PLATFORMS_1_11: PlatformList = PLATFORMS_1_10 + (
    Platform("js", "wasm", True),
    Platform("linux", "arm64", True),
)

PLATFORMS_1_12: PlatformList = PLATFORMS_1_11 + (
    Platform("linux", "ppc64", True),
    Platform("windows", "arm", True),
    Platform("aix", "ppc64", True),
)

PLATFORMS_LATEST: PlatformList = PLATFORMS_1_12

# Release label -> snapshot, oldest first.
SNAPSHOTS = OrderedDict(
    [
        ("1.0", PLATFORMS_1_0),
        ("1.1", PLATFORMS_1_1),
        ("1.3", PLATFORMS_1_3),
        ("1.4", PLATFORMS_1_4),
        ("1.5", PLATFORMS_1_5),
        ("1.6", PLATFORMS_1_6),
        ("1.7", PLATFORMS_1_7),
        ("1.8", PLATFORMS_1_8),
        ("1.9", PLATFORMS_1_9),
        ("1.10", PLATFORMS_1_10),
        ("1.11", PLATFORMS_1_11),
        ("1.12", PLATFORMS_1_12),
    ]
)
