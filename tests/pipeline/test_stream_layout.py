from __future__ import annotations

import pytest

from tracklens.core.schema import GenreYearMatrix
from tracklens.pipeline.stream_layout import STREAM_LAYERS_SCHEMA, wiggle_offset


def test_wiggle_baseline_for_two_layers() -> None:
    m = GenreYearMatrix(genres=["a", "b"], years=[2000, 2001], counts=[[1, 1], [2, 0]])

    layers = wiggle_offset(m)

    assert layers.rows() == [
        (2000, "a", 1, pytest.approx(0.0), pytest.approx(1.0)),
        (2000, "b", 1, pytest.approx(1.0), pytest.approx(2.0)),
        (2001, "a", 2, pytest.approx(-0.5), pytest.approx(1.5)),
        (2001, "b", 0, pytest.approx(1.5), pytest.approx(1.5)),
    ]


def test_layers_are_contiguous_and_heights_equal_counts() -> None:
    m = GenreYearMatrix(
        genres=["pop", "rock", "rap"],
        years=[1990, 1995, 2000, 2005],
        counts=[[3, 1, 0], [5, 2, 1], [2, 2, 6], [0, 4, 9]],
    )

    layers = wiggle_offset(m)

    assert layers.height == 12
    for year in m.years:
        rows = [r for r in layers.iter_rows(named=True) if r["year"] == year]
        assert [r["genre"] for r in rows] == m.genres
        for lower, upper in zip(rows, rows[1:]):
            assert upper["y0"] == pytest.approx(lower["y1"])
        for r in rows:
            assert r["y1"] - r["y0"] == pytest.approx(r["count"])


def test_first_year_baseline_is_zero() -> None:
    m = GenreYearMatrix(genres=["a"], years=[2000, 2001, 2002], counts=[[4], [4], [4]])

    layers = wiggle_offset(m)

    # Constant series: no wiggle to correct, baseline stays at 0
    assert layers.get_column("y0").to_list() == pytest.approx([0.0, 0.0, 0.0])


def test_empty_matrix_yields_empty_layers() -> None:
    layers = wiggle_offset(GenreYearMatrix())
    assert layers.is_empty()
    assert dict(layers.schema) == STREAM_LAYERS_SCHEMA
