"""
Cross-compilation target selection.

This module narrows a resolved platform list down to the targets a build
should produce, using OS, architecture and OS/arch filters. Any filter token
prefixed with '!' excludes instead of includes.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set, Tuple

from goxplatforms.core.exceptions import PlatformSyntaxError
from goxplatforms.core.platform import Platform, parse_platform, platform_key

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")

NEGATION = "!"


def split_tokens(value) -> List[str]:
    """
    Split a filter value into tokens.

    Args:
        value: A string of tokens separated by whitespace or commas, a list of
            such strings or numbers, a number, or None

    Returns:
        Non-empty tokens in order
    """
    if value is None:
        return []
    if isinstance(value, (str, int)):
        value = [value]

    tokens = []
    for item in value:
        tokens.extend(t for t in _SEPARATORS.split(str(item)) if t)
    return tokens


def _partition(tokens: Iterable[str]) -> Tuple[Set[str], Set[str]]:
    """Split tokens into (included, excluded) sets."""
    include, exclude = set(), set()
    for token in tokens:
        if token.startswith(NEGATION):
            name = token[len(NEGATION) :]
            if not name:
                raise PlatformSyntaxError(token, "has nothing after '!'")
            exclude.add(name)
        else:
            include.add(token)
    return include, exclude


@dataclass
class PlatformFilter:
    """
    OS, architecture and OS/arch filters applied to a platform list.

    Attributes:
        os: GOOS tokens, e.g. ['linux', '!plan9']
        arch: GOARCH tokens, e.g. ['amd64', 'arm64']
        osarch: 'os/arch' tokens, e.g. ['windows/386', '!linux/mips']
    """

    os: List[str] = field(default_factory=list)
    arch: List[str] = field(default_factory=list)
    osarch: List[str] = field(default_factory=list)

    @classmethod
    def parse(cls, os=None, arch=None, osarch=None) -> "PlatformFilter":
        """
        Build a filter from raw option values.

        Each value may be a whitespace/comma separated string or a list.

        Raises:
            PlatformSyntaxError: If an osarch token is not 'os/arch' or a
                token is a bare '!'
        """
        result = cls(
            os=split_tokens(os),
            arch=split_tokens(arch),
            osarch=split_tokens(osarch),
        )
        # Validate eagerly so bad input is reported before any selection
        result._pairs()
        _partition(result.os)
        _partition(result.arch)
        return result

    def is_empty(self) -> bool:
        """True when no filter tokens are set."""
        return not (self.os or self.arch or self.osarch)

    def _pairs(self) -> Tuple[Set[Tuple[str, str]], Set[Tuple[str, str]]]:
        include, exclude = _partition(self.osarch)
        return (
            {platform_key(parse_platform(p)) for p in include},
            {platform_key(parse_platform(p)) for p in exclude},
        )

    def select(
        self, supported: Iterable[Platform], include_all: bool = False
    ) -> List[Platform]:
        """
        Select build targets from a supported platform list.

        With no positive tokens the default platforms are selected (every
        platform when include_all is set). Otherwise a platform is selected
        when it matches a positive os/arch pair, or matches the positive OS
        and architecture sets that were given. Exclusions are then removed.
        Each os/arch pair is returned once, at its first position, with the
        value of its last selected entry.

        Args:
            supported: Platform list, typically from resolve()
            include_all: Ignore default flags when no positive token is set

        Returns:
            New list of selected platforms in supported-list order
        """
        include_os, exclude_os = _partition(self.os)
        include_arch, exclude_arch = _partition(self.arch)
        include_pairs, exclude_pairs = self._pairs()

        has_includes = bool(include_os or include_arch or include_pairs)

        # Keyed by os/arch; a repeated pair keeps its first position and
        # takes the later entry, which records the newer default status.
        selected: Dict[Tuple[str, str], Platform] = {}
        for platform in supported:
            key = platform_key(platform)

            if not has_includes:
                wanted = include_all or platform.default
            else:
                wanted = key in include_pairs
                if include_os or include_arch:
                    wanted = wanted or (
                        (not include_os or platform.os in include_os)
                        and (not include_arch or platform.arch in include_arch)
                    )

            if not wanted:
                continue
            if (
                platform.os in exclude_os
                or platform.arch in exclude_arch
                or key in exclude_pairs
            ):
                continue

            selected[key] = platform

        logger.debug(f"Selected {len(selected)} platform(s) with filter {self}")
        return list(selected.values())


__all__ = ["PlatformFilter", "split_tokens", "NEGATION"]
