"""
Tracklens core defaults.

Defines the dataset contract (source columns, token sets, year window, top-N)
consumed by the parser, the pipeline and the IO settings. This module is zero-IO
and uses only the Python standard library.

Notes:
    - Changing defaults should happen here; tracklens.io.config simply consumes them.
    - The explicit token sets are exact-match (no case folding, no trimming).
"""

from __future__ import annotations

__all__ = [
    "SOURCE_COLUMNS",
    "TRUTHY_TOKENS",
    "FALSY_TOKENS",
    "MISSING_GENRE_TOKEN",
    "YEAR_MIN",
    "YEAR_MAX",
    "TOP_GENRES",
    "DEFAULT_DATA_PATH",
]

# Columns read from the source table. Absent columns are treated as empty text.
SOURCE_COLUMNS: tuple[str, ...] = (
    "artist_followers",
    "artist_popularity",
    "explicit",
    "artist_genres",
    "album_release_date",
)

TRUTHY_TOKENS: frozenset[str] = frozenset({"true", "True", "TRUE", "1"})

# Recognized but also the fallback: anything outside TRUTHY_TOKENS parses to False.
FALSY_TOKENS: frozenset[str] = frozenset({"false", "False", "FALSE", "0", ""})

# Compared case-insensitively against trimmed genre tokens.
MISSING_GENRE_TOKEN: str = "n/a"

YEAR_MIN: int = 1950
YEAR_MAX: int = 2025

TOP_GENRES: int = 7

DEFAULT_DATA_PATH: str = "data/spotify_data_clean.csv"
