"""
List command implementation.

Resolves the platform list for a Go version, applies target filters and
prints the selected build targets.
"""

import json
import logging

from goxplatforms.cli.utils import load_cli_config, print_error
from goxplatforms.cross.selection import PlatformFilter
from goxplatforms.registry.resolver import resolve

logger = logging.getLogger(__name__)


def _platform_filter(args, config) -> PlatformFilter:
    """Command-line filters replace configured ones when any is given."""
    if args.os or args.arch or args.osarch:
        return PlatformFilter.parse(os=args.os, arch=args.arch, osarch=args.osarch)
    if config is not None:
        return config.targets.to_filter()
    return PlatformFilter()


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_cli_config(args)

    go_version = args.go_version or (config.go_version if config else None)
    if not go_version:
        print_error(
            "No Go version given",
            "Pass GO_VERSION or set go_version in goxplatforms.yaml",
        )
        return 1

    include_all = args.all
    if include_all is None:
        include_all = config.targets.all if config else False

    platform_filter = _platform_filter(args, config)
    if platform_filter.is_empty():
        logger.debug("No target filters given, selecting default platforms")
    selected = platform_filter.select(resolve(go_version), include_all=include_all)
    logger.info(f"{len(selected)} target(s) for {go_version}")

    if args.format == "json":
        print(
            json.dumps(
                [
                    {
                        "os": p.os,
                        "arch": p.arch,
                        "default": p.default,
                        "uname_os": p.os_uname(),
                        "uname_arch": p.arch_uname(),
                    }
                    for p in selected
                ],
                indent=2,
            )
        )
    else:
        for platform in selected:
            print(platform)

    return 0
