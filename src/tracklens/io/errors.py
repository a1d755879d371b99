"""
Custom exceptions for the tracklens.io module.

Purpose
- Provide IO-layer error types that map to responsibilities in tracklens.io:
  - DataLoadError: the source table could not be read (missing file, unreadable CSV).
  - ConfigError: settings are invalid (e.g., inverted year window).

Notes
- Per-field parse problems are not errors; tracklens.core.parse defaults them.
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations

from tracklens.core.errors import TracklensError


class IoError(TracklensError):
    """
    Base class for IO-related errors in tracklens.io.
    """


class DataLoadError(IoError):
    """
    Raised when the source table cannot be loaded.

    Notes:
        The original exception (FileNotFoundError, polars ComputeError, ...) is chained
        as __cause__.
    """


class ConfigError(IoError):
    """
    Raised when dashboard configuration is invalid.

    Examples:
        - year_min greater than year_max
        - top_genres < 1
    """
