"""
Cross-compilation support for goxplatforms.

This module provides target selection over resolved platform lists.
"""

from goxplatforms.cross.selection import PlatformFilter, split_tokens

__all__ = [
    "PlatformFilter",
    "split_tokens",
]
