"""
Versions command implementation.

Shows the version range table used to resolve platform lists.
"""

from goxplatforms.registry.resolver import VERSION_RANGES


def run(args) -> int:
    """
    Run the versions command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    width = max(len(r.constraint) for r in VERSION_RANGES)
    print(f"{'CONSTRAINT':<{width}}  GO    PLATFORMS  DEFAULTS")
    for version_range in VERSION_RANGES:
        defaults = sum(1 for p in version_range.platforms if p.default)
        print(
            f"{version_range.constraint:<{width}}  "
            f"{version_range.label:<4}  "
            f"{len(version_range.platforms):>9}  "
            f"{defaults:>8}"
        )
    return 0
