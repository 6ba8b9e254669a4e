"""
goxplatforms CLI argument parser.

This module implements the command-line interface for goxplatforms using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from goxplatforms.core.exceptions import GoxPlatformsError

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("goxplatforms")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """goxplatforms command-line interface."""

    # Command name -> module exposing run(args)
    COMMANDS = {
        "list": "goxplatforms.cli.commands.list_platforms",
        "versions": "goxplatforms.cli.commands.versions",
        "uname": "goxplatforms.cli.commands.uname",
    }

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="goxplat",
            description="goxplatforms - Go cross-compilation platforms by toolchain version",
            epilog='Use "goxplat COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"goxplatforms {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./goxplatforms.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_list_command(subparsers)
        self._add_versions_command(subparsers)
        self._add_uname_command(subparsers)

        return parser

    def _add_list_command(self, subparsers):
        """Add 'list' subcommand."""
        parser = subparsers.add_parser(
            "list",
            help="List build targets for a Go version",
            description=(
                "List the platforms a Go version can cross-compile for. "
                "Filter tokens are separated by spaces or commas; prefix a "
                "token with '!' to exclude it."
            ),
        )
        parser.add_argument(
            "go_version",
            nargs="?",
            metavar="GO_VERSION",
            help="Toolchain version as printed by 'go version' (e.g., go1.12.5)",
        )
        parser.add_argument(
            "--os", metavar="LIST", help="Operating systems to build for"
        )
        parser.add_argument(
            "--arch", metavar="LIST", help="Architectures to build for"
        )
        parser.add_argument(
            "--osarch",
            metavar="LIST",
            help="os/arch pairs to build for (e.g., 'linux/amd64 !windows/386')",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            default=None,
            help="Include non-default platforms when no target is requested",
        )
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)",
        )

    def _add_versions_command(self, subparsers):
        """Add 'versions' subcommand."""
        subparsers.add_parser(
            "versions",
            help="Show the version range table",
            description="Show each Go version range and the platform list it selects",
        )

    def _add_uname_command(self, subparsers):
        """Add 'uname' subcommand."""
        parser = subparsers.add_parser(
            "uname",
            help="Show uname labels for a platform",
            description="Show the 'uname -s' and 'uname -m' labels for an os/arch pair",
        )
        parser.add_argument(
            "platform", metavar="OS/ARCH", help="Platform (e.g., linux/arm64)"
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except GoxPlatformsError as e:
            logger.error(f"Error: {e}")
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.WARNING
            format_str = "%(levelname)s: %(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        module_name = self.COMMANDS.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
