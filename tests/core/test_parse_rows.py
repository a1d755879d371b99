from __future__ import annotations

import polars as pl
import pytest
from pydantic import ValidationError

from tracklens.core.parse import TRACK_SCHEMA, parse_row, parse_tracks, tracks_to_models
from tracklens.core.schema import Track


def _raw(**cols: list[str]) -> pl.DataFrame:
    return pl.DataFrame(cols, schema={name: pl.Utf8 for name in cols})


def test_parse_tracks_returns_fixed_schema_and_preserves_row_count() -> None:
    raw = _raw(
        artist_followers=["10", "20"],
        artist_popularity=["50", "60"],
        explicit=["true", "false"],
        artist_genres=["pop", "rock"],
        album_release_date=["2001-01-01", "1999"],
        extra_col=["x", "y"],
    )

    out = parse_tracks(raw)

    assert dict(out.schema) == TRACK_SCHEMA
    assert out.height == 2
    assert out.get_column("year").to_list() == [2001, 1999]


def test_numeric_fields_default_to_zero_when_unparseable() -> None:
    raw = _raw(
        artist_followers=["abc", "", " 12 ", "7.5"],
        artist_popularity=["n/a", "55", "", "70.5"],
    )

    out = parse_tracks(raw)

    assert out.get_column("artist_followers").to_list() == [0.0, 0.0, 12.0, 7.5]
    assert out.get_column("artist_popularity").to_list() == [0.0, 55.0, 0.0, 70.5]


def test_non_finite_numbers_default_to_zero() -> None:
    raw = _raw(
        artist_followers=["inf", "-inf", "nan", "3"],
        artist_popularity=["Infinity", "40", "NaN", "-inf"],
    )

    out = parse_tracks(raw)

    assert out.get_column("artist_followers").to_list() == [0.0, 0.0, 0.0, 3.0]
    assert out.get_column("artist_popularity").to_list() == [0.0, 40.0, 0.0, 0.0]
    assert parse_row({"artist_popularity": "inf"}).artist_popularity == 0.0


@pytest.mark.parametrize("token", ["true", "True", "TRUE", "1"])
def test_explicit_truthy_tokens(token: str) -> None:
    assert parse_row({"explicit": token}).explicit is True


@pytest.mark.parametrize("token", ["false", "False", "FALSE", "0", ""])
def test_explicit_falsy_tokens(token: str) -> None:
    assert parse_row({"explicit": token}).explicit is False


@pytest.mark.parametrize("token", ["maybe", "yes", "tRuE", " true", "2", "explicit"])
def test_unrecognized_explicit_tokens_silently_become_false(token: str) -> None:
    # Unknown tokens are not rejected: they quietly count as non-explicit.
    assert parse_row({"explicit": token}).explicit is False


def test_genres_split_on_comma_and_trimmed() -> None:
    track = parse_row({"artist_genres": " dance pop,pop , ,hip hop"})
    assert track.genres == ["dance pop", "pop", "", "hip hop"]


def test_empty_genre_field_yields_no_genres() -> None:
    assert parse_row({"artist_genres": ""}).genres == []
    assert parse_row({}).genres == []


def test_year_from_first_four_characters() -> None:
    assert parse_row({"album_release_date": "1987-06-30"}).year == 1987
    assert parse_row({"album_release_date": "2020"}).year == 2020


def test_year_absent_when_release_date_empty_or_not_numeric() -> None:
    assert parse_row({"album_release_date": ""}).year is None
    assert parse_row({"album_release_date": None}).year is None
    assert parse_row({"album_release_date": "unknown"}).year is None


def test_missing_columns_degrade_to_defaults() -> None:
    raw = _raw(artist_followers=["5"])

    out = parse_tracks(raw)

    row = out.row(0, named=True)
    assert row == {
        "artist_followers": 5.0,
        "artist_popularity": 0.0,
        "explicit": False,
        "genres": [],
        "year": None,
    }


def test_null_cells_behave_like_empty_text() -> None:
    raw = pl.DataFrame(
        {"artist_followers": [None], "explicit": [None], "artist_genres": [None]},
        schema={"artist_followers": pl.Utf8, "explicit": pl.Utf8, "artist_genres": pl.Utf8},
    )

    row = parse_tracks(raw).row(0, named=True)

    assert row["artist_followers"] == 0.0
    assert row["explicit"] is False
    assert row["genres"] == []


def test_parse_row_returns_frozen_track() -> None:
    track = parse_row(
        {
            "artist_followers": "1200",
            "artist_popularity": "64",
            "explicit": "1",
            "artist_genres": "rap, trap",
            "album_release_date": "2018-02-02",
        }
    )

    assert track == Track(
        artist_followers=1200.0,
        artist_popularity=64.0,
        explicit=True,
        genres=["rap", "trap"],
        year=2018,
    )
    with pytest.raises(ValidationError):
        track.year = 1999  # type: ignore[misc]


def test_tracks_to_models_round_trips_rows_in_order() -> None:
    raw = _raw(artist_followers=["3", "1", "2"], album_release_date=["2003", "2001", "2002"])

    models = tracks_to_models(parse_tracks(raw))

    assert [t.year for t in models] == [2003, 2001, 2002]
    assert all(isinstance(t, Track) for t in models)
