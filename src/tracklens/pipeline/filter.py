"""
Dataset filter over parsed tracks.

Keeps tracks whose year is present and inside the configured window and whose artist has
at least one follower. Order is preserved; the frame is never modified in place.
"""

from __future__ import annotations

import logging

import polars as pl

from tracklens.core.constants import YEAR_MAX, YEAR_MIN

logger = logging.getLogger(__name__)

__all__ = [
    "filter_tracks",
    "track_counts",
]


def track_counts(tracks: pl.DataFrame) -> dict[str, int]:
    """Return total, explicit and non-explicit row counts of a tracks frame."""
    if tracks.is_empty():
        return {"total": 0, "explicit": 0, "non_explicit": 0}
    total, explicit = tracks.select(
        pl.len().alias("total"),
        pl.col("explicit").sum().alias("explicit"),
    ).row(0)
    return {"total": int(total), "explicit": int(explicit), "non_explicit": int(total - explicit)}


def filter_tracks(
    tracks: pl.DataFrame,
    *,
    year_min: int = YEAR_MIN,
    year_max: int = YEAR_MAX,
) -> pl.DataFrame:
    """
    Keep only tracks with year_min <= year <= year_max and artist_followers > 0.

    Args:
        tracks (pl.DataFrame): Parsed tracks (see tracklens.core.parse.TRACK_SCHEMA).
        year_min (int): Inclusive lower year bound.
        year_max (int): Inclusive upper year bound.

    Returns:
        pl.DataFrame: Retained tracks in their original order.

    Notes:
        Logs the total, explicit and non-explicit counts of the retained set at INFO.
    """
    kept = tracks.filter(
        pl.col("year").is_not_null()
        & pl.col("year").is_between(year_min, year_max, closed="both")
        & (pl.col("artist_followers") > 0)
    )
    counts = track_counts(kept)
    logger.info("Total tracks: %d", counts["total"])
    logger.info("Explicit tracks: %d", counts["explicit"])
    logger.info("Non-explicit tracks: %d", counts["non_explicit"])
    return kept
