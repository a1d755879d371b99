"""Scatter view: (artist_followers, artist_popularity) pairs, one per filtered track."""

from __future__ import annotations

import polars as pl

from tracklens.core.schema import ScatterPoint


def scatter_points(tracks: pl.DataFrame) -> pl.DataFrame:
    # Identity projection: no grouping, no dedup, original order.
    return tracks.select("artist_followers", "artist_popularity")


def scatter_models(points: pl.DataFrame) -> list[ScatterPoint]:
    return [ScatterPoint.model_validate(row) for row in points.iter_rows(named=True)]
