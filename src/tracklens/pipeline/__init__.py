"""
tracklens.pipeline — Filter and aggregations over parsed tracks.

## Responsibilities
- filter — keep tracks with a year in the configured window and followers > 0.
- scatter — (followers, popularity) pairs.
- explicit — explicit vs non-explicit counts and share per year.
- genre_stream — top-N genres counted per year (zero-filled matrix).
- stream_layout — wiggle offset turning the matrix into stacked layers.
- run — load-and-compute returning a DashboardData value.

## Import DAG discipline
- Depends on tracklens.core, tracklens.io, polars.
- Must not import tracklens.viz or app.

## Examples
```python
from tracklens.io import DashboardSettings
from tracklens.pipeline import load_dashboard_sync
data = load_dashboard_sync(DashboardSettings(data_path="data/spotify_data_clean.csv"))  # doctest: +SKIP
data.genre_matrix.genres  # doctest: +SKIP
```
"""

from __future__ import annotations

from .explicit import yearly_explicit_models, yearly_explicit_stats
from .filter import filter_tracks, track_counts
from .genre_stream import build_genre_matrix, flatten_genre_pairs, genre_year_counts, select_top_genres
from .run import DashboardData, compute_dashboard, load_dashboard, load_dashboard_sync
from .scatter import scatter_models, scatter_points
from .stream_layout import wiggle_offset

__all__ = [
    "yearly_explicit_models",
    "yearly_explicit_stats",
    "filter_tracks",
    "track_counts",
    "build_genre_matrix",
    "flatten_genre_pairs",
    "genre_year_counts",
    "select_top_genres",
    "DashboardData",
    "compute_dashboard",
    "load_dashboard",
    "load_dashboard_sync",
    "scatter_models",
    "scatter_points",
    "wiggle_offset",
]
