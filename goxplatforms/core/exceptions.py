"""
Centralized exception hierarchy for goxplatforms.

The version resolver itself never raises; these exceptions cover target
filter parsing, configuration loading and authoring errors in the static
version range table.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GoxPlatformsError(Exception):
    """Base exception for all goxplatforms errors."""

    pass


# ============================================================================
# Platform Exceptions
# ============================================================================


class PlatformError(GoxPlatformsError):
    """Base exception for platform-related errors."""

    pass


class PlatformSyntaxError(PlatformError):
    """Raised when an os/arch pair or filter token cannot be parsed."""

    def __init__(self, value: str, reason: str = "should be os/arch"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid platform syntax: {value!r} {reason}")


# ============================================================================
# Registry Exceptions
# ============================================================================


class RegistryError(GoxPlatformsError):
    """Base exception for platform registry errors."""

    pass


class VersionRangeError(RegistryError):
    """Raised when a version range constraint in the registry is malformed."""

    def __init__(self, constraint: str, detail: str = ""):
        self.constraint = constraint
        msg = f"Malformed version constraint: {constraint!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(GoxPlatformsError):
    """Configuration parsing or validation error."""

    pass


__all__ = [
    "GoxPlatformsError",
    "PlatformError",
    "PlatformSyntaxError",
    "RegistryError",
    "VersionRangeError",
    "ConfigError",
]
