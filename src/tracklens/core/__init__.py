"""
tracklens.core — Dataset contract, typed records and the row parser.

## Contracts (single source of truth)
- Constants — source columns, explicit token sets, year window, top-N genres.
- Schemas — frozen pydantic models (Track, ScatterPoint, YearlyExplicitStat, GenreYearMatrix).
- Parse — Polars expressions that turn raw text rows into typed tracks.

## Notes
- Zero-IO policy: no file or network access in this package.
- Malformed per-field input is defaulted, never raised (see parse).

## Examples
```python
from tracklens.core import parse_row
parse_row({"explicit": "maybe", "album_release_date": "2004-05-01"})
# Track(artist_followers=0.0, artist_popularity=0.0, explicit=False, genres=[], year=2004)
```
"""

from __future__ import annotations

from .errors import TracklensError
from .parse import TRACK_SCHEMA, empty_tracks, parse_row, parse_tracks, tracks_to_models
from .schema import GenreYearMatrix, ScatterPoint, Track, YearlyExplicitStat

__all__ = [
    "TracklensError",
    "TRACK_SCHEMA",
    "empty_tracks",
    "parse_row",
    "parse_tracks",
    "tracks_to_models",
    "GenreYearMatrix",
    "ScatterPoint",
    "Track",
    "YearlyExplicitStat",
]
