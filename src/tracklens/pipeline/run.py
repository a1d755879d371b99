"""
Load-and-compute entrypoint for the dashboard datasets.

Overview
- compute_dashboard(): raw frame -> parsed tracks -> filtered tracks -> the three chart
  datasets (plus stream layers), all returned as one DashboardData value.
- load_dashboard(): awaits the source read, then computes. The read is the only
  suspension point; aggregation starts only after it succeeded.
- load_dashboard_sync(): blocking wrapper for startup code.

Notes
- Aggregators are pure functions of the filtered frame and share no state.
- Load failures propagate as tracklens.io.errors.DataLoadError.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import polars as pl

from tracklens.core.parse import parse_tracks
from tracklens.core.schema import GenreYearMatrix
from tracklens.io.config import DashboardSettings
from tracklens.io.read import read_tracks_csv

from .explicit import yearly_explicit_stats
from .filter import filter_tracks
from .genre_stream import build_genre_matrix
from .scatter import scatter_points
from .stream_layout import wiggle_offset

logger = logging.getLogger(__name__)

__all__ = [
    "DashboardData",
    "compute_dashboard",
    "load_dashboard",
    "load_dashboard_sync",
]


@dataclass(frozen=True)
class DashboardData:
    """
    Everything the renderers need, computed from one load.

    Attributes:
        settings (DashboardSettings): Settings used for filtering and genre selection.
        tracks (pl.DataFrame): Filtered tracks.
        scatter (pl.DataFrame): artist_followers, artist_popularity per filtered track.
        yearly_explicit (pl.DataFrame): year, explicit_count, non_explicit_count, pct_explicit.
        genre_matrix (GenreYearMatrix): Top-N genre counts per year.
        stream_layers (pl.DataFrame): year, genre, count, y0, y1 after the wiggle offset.
    """

    settings: DashboardSettings
    tracks: pl.DataFrame
    scatter: pl.DataFrame
    yearly_explicit: pl.DataFrame
    genre_matrix: GenreYearMatrix
    stream_layers: pl.DataFrame


def compute_dashboard(
    raw: pl.DataFrame, settings: DashboardSettings = DashboardSettings()
) -> DashboardData:
    """
    Parse, filter and aggregate a raw tracks frame.

    Args:
        raw (pl.DataFrame): Raw rows (text columns) as returned by read_tracks_csv.
        settings (DashboardSettings): Year window and top-N genre count.

    Returns:
        DashboardData
    """
    settings.validate()
    parsed = parse_tracks(raw)
    tracks = filter_tracks(parsed, year_min=settings.year_min, year_max=settings.year_max)
    logger.debug("Kept %d of %d parsed rows", tracks.height, parsed.height)

    matrix = build_genre_matrix(tracks, top_n=settings.top_genres)
    return DashboardData(
        settings=settings,
        tracks=tracks,
        scatter=scatter_points(tracks),
        yearly_explicit=yearly_explicit_stats(tracks),
        genre_matrix=matrix,
        stream_layers=wiggle_offset(matrix),
    )


async def load_dashboard(settings: DashboardSettings = DashboardSettings()) -> DashboardData:
    """
    Read the configured table and compute every dashboard dataset.

    Raises:
        DataLoadError: If the source table cannot be read.
    """
    raw = await read_tracks_csv(settings.data_path)
    logger.info("Loaded %d rows from %s", raw.height, settings.data_path)
    return compute_dashboard(raw, settings)


def load_dashboard_sync(settings: DashboardSettings = DashboardSettings()) -> DashboardData:
    return asyncio.run(load_dashboard(settings))
