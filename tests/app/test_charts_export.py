from __future__ import annotations

import polars as pl
import pytest

from app.charts import (
    dashboard_chart,
    explicit_trend_chart,
    export_dashboard,
    genre_stream_chart,
)
from tracklens.io.config import DashboardSettings
from tracklens.pipeline.run import compute_dashboard


def _data():
    raw = pl.DataFrame(
        {
            "artist_followers": ["100", "2000", "30"],
            "artist_popularity": ["10", "70", "35"],
            "explicit": ["0", "1", "true"],
            "artist_genres": ["folk", "rap, pop", "pop"],
            "album_release_date": ["1968-03-01", "2004", "2004-11-11"],
        }
    )
    return compute_dashboard(raw, DashboardSettings(year_min=1960, year_max=2010))


def test_dashboard_chart_composes_three_views() -> None:
    spec = dashboard_chart(_data()).to_dict()

    top, bottom = spec["vconcat"]
    assert len(top["hconcat"]) == 2
    assert bottom["mark"]["type"] == "area"
    assert spec["config"]["view"]["strokeOpacity"] == 0


def test_genre_stream_chart_uses_settings_year_window() -> None:
    spec = genre_stream_chart(_data()).to_dict()
    assert spec["encoding"]["x"]["scale"]["domain"] == [1960, 2010]


def test_explicit_trend_chart_title_follows_settings_year_window() -> None:
    spec = explicit_trend_chart(_data()).to_dict()
    assert spec["title"]["text"] == "The Rise of Explicit Content in Music (1960–2010)"


def test_export_dashboard_html(tmp_path) -> None:
    out = export_dashboard(_data(), tmp_path / "dash.html")
    assert out.exists()
    assert "vega" in out.read_text().lower()


def test_export_dashboard_rejects_unknown_suffix(tmp_path) -> None:
    with pytest.raises(ValueError):
        export_dashboard(_data(), tmp_path / "dash.png")
