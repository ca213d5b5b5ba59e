"""Exception hierarchy for bumpwright.

Every error raised on purpose by bumpwright derives from
:class:`BumpwrightError`, so callers can catch a single type.
"""

from __future__ import annotations


class BumpwrightError(Exception):
    """Base class for all bumpwright errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(BumpwrightError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml was found."""


class ConfigValidationError(ConfigError):
    """The [tool.bumpwright] section is invalid."""


# =============================================================================
# Versions
# =============================================================================


class VersionError(BumpwrightError):
    """Version handling failed."""


class VersionParseError(VersionError):
    """A version string is not semver, even after stripping a prefix."""

    def __init__(self, version: str, message: str | None = None) -> None:
        self.version = version
        super().__init__(message or f"Invalid semantic version: {version!r}")


# =============================================================================
# Release data and remotes
# =============================================================================


class ReleaseDataError(BumpwrightError):
    """Release input data is malformed."""


class RemoteError(BumpwrightError):
    """Forge data could not be used."""


class RemotePayloadError(RemoteError):
    """A raw forge API payload does not have the expected shape."""

    def __init__(self, message: str, forge: str | None = None) -> None:
        self.forge = forge
        super().__init__(f"{forge}: {message}" if forge else message)
