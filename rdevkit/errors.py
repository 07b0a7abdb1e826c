"""Exception types raised by rdevkit routines."""

from __future__ import annotations


class RdevkitError(RuntimeError):
    """Base class for fatal rdevkit failures."""


class ConfigError(RdevkitError):
    """Raised when the configuration file cannot be parsed."""


class SourceUnavailableError(RdevkitError):
    """Raised when a tabular data source cannot be opened or used at all."""


class NotAProjectError(RdevkitError):
    """Raised when a path is not the root of an R project."""


class MissingDescriptionError(RdevkitError):
    """Raised when the package DESCRIPTION file is absent."""


class DescriptionError(RdevkitError, ValueError):
    """Raised when a DESCRIPTION file cannot be parsed."""


class ChangelogError(RdevkitError):
    """Raised when the changelog cannot be read safely."""


class VersionError(RdevkitError, ValueError):
    """Raised when a version string cannot be parsed or bumped."""


__all__ = [
    "ChangelogError",
    "ConfigError",
    "DescriptionError",
    "MissingDescriptionError",
    "NotAProjectError",
    "RdevkitError",
    "SourceUnavailableError",
    "VersionError",
]
