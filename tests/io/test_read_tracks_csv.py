from __future__ import annotations

import asyncio
from pathlib import Path

import polars as pl
import pytest

from tracklens.core.parse import parse_row
from tracklens.io.errors import DataLoadError
from tracklens.io.read import read_tracks_csv


def test_read_keeps_every_column_as_text(tmp_path: Path) -> None:
    p = tmp_path / "tracks.csv"
    p.write_text(
        "artist_followers,artist_popularity,explicit,artist_genres,album_release_date\n"
        '1200,64,true,"pop, dance pop",2018-02-02\n'
        "0,,,,\n"
    )

    raw = asyncio.run(read_tracks_csv(p))

    assert raw.height == 2
    assert all(dtype == pl.Utf8 for dtype in raw.schema.values())
    assert raw.row(0, named=True)["artist_genres"] == "pop, dance pop"
    assert raw.row(1, named=True)["album_release_date"] in (None, "")


def test_empty_cells_parse_like_empty_text(tmp_path: Path) -> None:
    p = tmp_path / "tracks.csv"
    p.write_text(
        "artist_followers,artist_popularity,explicit,artist_genres,album_release_date\n"
        "0,,,,\n"
    )

    track = parse_row(asyncio.run(read_tracks_csv(p)).row(0, named=True))

    assert track.artist_popularity == 0.0
    assert track.explicit is False
    assert track.genres == []
    assert track.year is None


def test_missing_file_raises_data_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError) as excinfo:
        asyncio.run(read_tracks_csv(tmp_path / "nope.csv"))
    assert isinstance(excinfo.value.__cause__, OSError)
