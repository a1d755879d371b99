"""
Core exception types for tracklens.

Provides the root of the error hierarchy. Per-field parse problems are never raised
(they degrade to defaults); only configuration and load failures surface as errors.

Notes:
    - tracklens.io.errors defines the IO-layer subclasses (DataLoadError, ConfigError).

Examples:
    >>> from tracklens.core.errors import TracklensError
    >>> issubclass(TracklensError, Exception)
    True
"""

from __future__ import annotations

__all__ = [
    "TracklensError",
]


class TracklensError(Exception):
    """Base class for all errors raised by tracklens."""
