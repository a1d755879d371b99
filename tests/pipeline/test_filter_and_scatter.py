from __future__ import annotations

import logging

import polars as pl

from tracklens.core.parse import TRACK_SCHEMA, empty_tracks, parse_tracks
from tracklens.pipeline.filter import filter_tracks, track_counts
from tracklens.pipeline.scatter import scatter_models, scatter_points


def _tracks(rows: list[dict[str, object]]) -> pl.DataFrame:
    defaults: dict[str, object] = {
        "artist_followers": 1.0,
        "artist_popularity": 0.0,
        "explicit": False,
        "genres": [],
        "year": 2000,
    }
    return pl.DataFrame([{**defaults, **row} for row in rows], schema=TRACK_SCHEMA)


def test_filter_keeps_year_window_and_positive_followers_in_order() -> None:
    tracks = _tracks(
        [
            {"artist_followers": 5.0, "year": 1950},
            {"artist_followers": 5.0, "year": 1949},
            {"artist_followers": 0.0, "year": 2000},
            {"artist_followers": 7.0, "year": None},
            {"artist_followers": 9.0, "year": 2025},
            {"artist_followers": 3.0, "year": 2026},
            {"artist_followers": 1.0, "year": 1990},
        ]
    )

    kept = filter_tracks(tracks)

    assert kept.get_column("artist_followers").to_list() == [5.0, 9.0, 1.0]
    assert kept.get_column("year").to_list() == [1950, 2025, 1990]


def test_filter_invariant_holds_for_every_retained_track() -> None:
    tracks = _tracks(
        [{"artist_followers": float(f), "year": y} for f in (-1, 0, 1, 50) for y in (1900, 1950, 1999, 2025, 2100)]
    )

    kept = filter_tracks(tracks)

    assert kept.height == 2 * 3
    assert kept.filter(
        (pl.col("year") < 1950) | (pl.col("year") > 2025) | (pl.col("artist_followers") <= 0)
    ).is_empty()


def test_empty_release_date_is_always_dropped() -> None:
    raw = pl.DataFrame(
        {
            "artist_followers": ["1000000", "10"],
            "artist_popularity": ["99", "10"],
            "explicit": ["true", "false"],
            "artist_genres": ["pop", "rock"],
            "album_release_date": ["", "2001-01-01"],
        }
    )

    kept = filter_tracks(parse_tracks(raw))

    assert kept.get_column("year").to_list() == [2001]


def test_filter_respects_custom_year_window() -> None:
    tracks = _tracks([{"year": 1960}, {"year": 1970}, {"year": 1980}])
    kept = filter_tracks(tracks, year_min=1965, year_max=1975)
    assert kept.get_column("year").to_list() == [1970]


def test_filter_logs_diagnostic_counts(caplog) -> None:
    tracks = _tracks([{"explicit": True}, {"explicit": False}, {"explicit": True}])
    caplog.set_level(logging.INFO, logger="tracklens.pipeline.filter")

    filter_tracks(tracks)

    assert "Total tracks: 3" in caplog.text
    assert "Explicit tracks: 2" in caplog.text
    assert "Non-explicit tracks: 1" in caplog.text


def test_track_counts_on_empty_frame() -> None:
    assert track_counts(empty_tracks()) == {"total": 0, "explicit": 0, "non_explicit": 0}


def test_scatter_is_identity_projection_without_dedup() -> None:
    tracks = _tracks(
        [
            {"artist_followers": 10.0, "artist_popularity": 40.0},
            {"artist_followers": 10.0, "artist_popularity": 40.0},
            {"artist_followers": 3.0, "artist_popularity": 90.0},
        ]
    )

    points = scatter_points(tracks)

    assert points.columns == ["artist_followers", "artist_popularity"]
    assert points.rows() == [(10.0, 40.0), (10.0, 40.0), (3.0, 90.0)]
    assert [p.artist_popularity for p in scatter_models(points)] == [40.0, 40.0, 90.0]


def test_scatter_of_empty_dataset_is_empty() -> None:
    assert scatter_points(empty_tracks()).is_empty()
