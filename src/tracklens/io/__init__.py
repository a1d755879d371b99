"""
tracklens.io — Configuration and source-table reading.

## Public API
- DashboardSettings — runtime configuration (env > TOML > defaults).
- read_tracks_csv — awaitable read of the raw tracks table (all columns as text).
- DataLoadError, ConfigError — IO-layer failures.

## Import DAG discipline
- Depends only on stdlib, polars and tracklens.core.*.
- MUST NOT import higher layers: pipeline, viz, or app.
"""

from __future__ import annotations

from .config import DashboardSettings
from .errors import ConfigError, DataLoadError
from .read import read_tracks_csv

__all__ = [
    "DashboardSettings",
    "ConfigError",
    "DataLoadError",
    "read_tracks_csv",
]
