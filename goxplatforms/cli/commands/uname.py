"""
Uname command implementation.

Prints the `uname -s` and `uname -m` labels for an os/arch pair.
"""

from goxplatforms.cli.utils import label_or_dash
from goxplatforms.core.platform import parse_platform


def run(args) -> int:
    """
    Run the uname command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    platform = parse_platform(args.platform)
    os_label = label_or_dash(platform.os_uname())
    arch_label = label_or_dash(platform.arch_uname())
    print(f"{platform}\t{os_label}\t{arch_label}")
    return 0
