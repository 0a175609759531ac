"""Exception hierarchy for skukozh."""

from __future__ import annotations


class SkukozhError(Exception):
    """Base class for all expected skukozh failures."""


class RootAccessError(SkukozhError):
    """Raised when the walk root is missing, not a directory, or unlistable."""


class IgnoreFileError(SkukozhError):
    """Raised when an ignore-file cannot be read."""


class ConfigError(SkukozhError):
    """Raised when configuration cannot be loaded or validated."""


class FileListError(SkukozhError):
    """Raised when the file list artifact cannot be read or written."""


class ResultFileError(SkukozhError):
    """Raised when the result artifact cannot be read or written."""
