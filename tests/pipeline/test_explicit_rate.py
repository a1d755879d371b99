from __future__ import annotations

import polars as pl
import pytest

from tracklens.core.parse import TRACK_SCHEMA, empty_tracks
from tracklens.pipeline.explicit import (
    EXPLICIT_STATS_SCHEMA,
    yearly_explicit_models,
    yearly_explicit_stats,
)


def _tracks(pairs: list[tuple[int, bool]]) -> pl.DataFrame:
    return pl.DataFrame(
        [
            {
                "artist_followers": 1.0,
                "artist_popularity": 0.0,
                "explicit": explicit,
                "genres": [],
                "year": year,
            }
            for year, explicit in pairs
        ],
        schema=TRACK_SCHEMA,
    )


def test_single_year_counts_and_share() -> None:
    stats = yearly_explicit_stats(_tracks([(2000, True), (2000, False), (2000, True)]))

    (row,) = yearly_explicit_models(stats)
    assert row.year == 2000
    assert row.explicit_count == 2
    assert row.non_explicit_count == 1
    assert row.pct_explicit == pytest.approx(2 / 3)


def test_years_sorted_ascending_and_not_zero_filled() -> None:
    stats = yearly_explicit_stats(
        _tracks([(2010, False), (1960, True), (2010, True), (1960, True), (1985, False)])
    )

    assert stats.get_column("year").to_list() == [1960, 1985, 2010]
    assert stats.get_column("explicit_count").to_list() == [2, 0, 1]
    assert stats.get_column("non_explicit_count").to_list() == [0, 1, 1]
    assert stats.get_column("pct_explicit").to_list() == pytest.approx([1.0, 0.0, 0.5])


def test_empty_dataset_yields_empty_stats_with_schema() -> None:
    stats = yearly_explicit_stats(empty_tracks())

    assert stats.is_empty()
    assert dict(stats.schema) == EXPLICIT_STATS_SCHEMA
    assert yearly_explicit_models(stats) == []
