"""
Altair chart builders for the three dashboard views.

Each builder takes plain data (Polars frames or lists) and returns an Altair chart.
Scales, axes, legends and titles are decided here; drawing is left to Vega-Lite.

Notes:
    - Data is embedded inline via alt.Data(values=...) so that frames of any size and
      any Polars version serialize the same way.
    - Empty inputs produce a text placeholder chart instead of raising.
"""

from __future__ import annotations

import altair as alt
import polars as pl

from tracklens.core.constants import YEAR_MAX, YEAR_MIN

__all__ = [
    "EXPLICIT_COLOR",
    "NON_EXPLICIT_COLOR",
    "SCATTER_COLOR",
    "to_values",
    "placeholder_chart",
    "scatter_chart",
    "explicit_chart",
    "streamgraph_chart",
]

SCATTER_COLOR = "#1db954"
NON_EXPLICIT_COLOR = "#4e79a7"
EXPLICIT_COLOR = "#e15759"

_SERIES_LABELS = {"non_explicit_count": "Non-Explicit", "explicit_count": "Explicit"}


def to_values(df: pl.DataFrame) -> alt.Data:
    """Wrap a Polars frame as inline Vega-Lite values."""
    return alt.Data(values=df.to_dicts())


def placeholder_chart(message: str, *, width: int = 400, height: int = 300) -> alt.Chart:
    return (
        alt.Chart(alt.Data(values=[{}]))
        .mark_text(fontSize=13, color="#666")
        .encode(text=alt.value(message))
        .properties(width=width, height=height)
    )


def scatter_chart(points: pl.DataFrame, *, width: int = 420, height: int = 320) -> alt.Chart:
    """
    Artist popularity against follower count on a log x scale.

    Args:
        points (pl.DataFrame): Columns artist_followers, artist_popularity.
        width (int): Plot width in pixels.
        height (int): Plot height in pixels.

    Returns:
        alt.Chart: Point chart, x domain [1, max followers], y domain [0, 100].
    """
    if points.is_empty():
        return placeholder_chart("No tracks to plot", width=width, height=height)

    x_max = float(points.select(pl.col("artist_followers").max()).item())
    return (
        alt.Chart(to_values(points))
        .mark_circle(size=28, color=SCATTER_COLOR, opacity=0.6)
        .encode(
            x=alt.X(
                "artist_followers:Q",
                title="Artist Followers (log scale)",
                scale=alt.Scale(type="log", domain=[1, max(x_max, 1.0)]),
                axis=alt.Axis(format="~s", tickCount=6),
            ),
            y=alt.Y(
                "artist_popularity:Q",
                title="Artist Popularity",
                scale=alt.Scale(domain=[0, 100]),
            ),
            tooltip=[
                alt.Tooltip("artist_followers:Q", title="Followers", format=","),
                alt.Tooltip("artist_popularity:Q", title="Popularity"),
            ],
        )
        .properties(
            width=width,
            height=height,
            title=alt.TitleParams(
                "Artist Popularity vs Audience Reach",
                subtitle=(
                    "Strong positive correlation: higher follower counts typically align "
                    "with greater popularity"
                ),
            ),
        )
    )


def _explicit_long(yearly: pl.DataFrame) -> pl.DataFrame:
    # Stack order: non-explicit at the bottom, explicit on top.
    return (
        yearly.unpivot(
            index=["year", "pct_explicit"],
            on=list(_SERIES_LABELS),
            variable_name="series",
            value_name="count",
        )
        .with_columns(
            pl.col("series").replace_strict(_SERIES_LABELS).alias("label"),
            pl.col("series")
            .replace_strict({k: i for i, k in enumerate(_SERIES_LABELS)}, return_dtype=pl.Int64)
            .alias("stack_order"),
        )
        .sort(["year", "stack_order"])
    )


def explicit_chart(
    yearly: pl.DataFrame,
    *,
    year_min: int = YEAR_MIN,
    year_max: int = YEAR_MAX,
    width: int = 420,
    height: int = 320,
) -> alt.LayerChart | alt.Chart:
    """
    Stacked explicit / non-explicit bars per year with a % explicit trend line.

    Args:
        yearly (pl.DataFrame): Output of yearly_explicit_stats.
        year_min (int): First year of the filter window, used in the title.
        year_max (int): Last year of the filter window, used in the title.
        width (int): Plot width in pixels.
        height (int): Plot height in pixels.

    Returns:
        alt.LayerChart: Bars on the left count axis and the share line on an independent
        right axis fixed to [0, 1].
    """
    if yearly.is_empty():
        return placeholder_chart("No yearly data", width=width, height=height)

    years = yearly.get_column("year").to_list()
    x = alt.X(
        "year:O",
        title="Year",
        sort="ascending",
        axis=alt.Axis(values=[y for y in years if y % 5 == 0], labelAngle=0),
    )
    labels = list(_SERIES_LABELS.values())

    bars = (
        alt.Chart(to_values(_explicit_long(yearly)))
        .mark_bar()
        .encode(
            x=x,
            y=alt.Y("count:Q", title="Number of Tracks", stack="zero"),
            color=alt.Color(
                "label:N",
                title=None,
                scale=alt.Scale(domain=labels, range=[NON_EXPLICIT_COLOR, EXPLICIT_COLOR]),
                legend=alt.Legend(orient="top-left", fillColor="white", padding=5),
            ),
            order=alt.Order("stack_order:Q"),
            tooltip=[
                alt.Tooltip("year:O", title="Year"),
                alt.Tooltip("label:N", title="Series"),
                alt.Tooltip("count:Q", title="Tracks"),
            ],
        )
    )
    trend = (
        alt.Chart(to_values(yearly))
        .mark_line(color="#000", strokeWidth=2)
        .encode(
            x=x,
            y=alt.Y(
                "pct_explicit:Q",
                title="% Explicit",
                scale=alt.Scale(domain=[0, 1]),
                axis=alt.Axis(format=".0%", orient="right", tickCount=5),
            ),
            tooltip=[
                alt.Tooltip("year:O", title="Year"),
                alt.Tooltip("pct_explicit:Q", title="% Explicit", format=".1%"),
            ],
        )
    )
    return (
        alt.layer(bars, trend)
        .resolve_scale(y="independent")
        .properties(
            width=width,
            height=height,
            title=alt.TitleParams(
                f"The Rise of Explicit Content in Music ({year_min}–{year_max})",
                subtitle=(
                    "Dramatic surge in explicit content post-2000, with nearly 50% of recent "
                    "tracks containing explicit lyrics"
                ),
            ),
        )
    )


def streamgraph_chart(
    layers: pl.DataFrame,
    genres: list[str],
    *,
    year_min: int = YEAR_MIN,
    year_max: int = YEAR_MAX,
    width: int = 900,
    height: int = 360,
) -> alt.Chart:
    """
    Streamgraph of the selected genres from pre-offset layers.

    Args:
        layers (pl.DataFrame): Output of wiggle_offset (year, genre, count, y0, y1).
        genres (list[str]): Selected genres; fixes color assignment and legend order.
        year_min (int): Left end of the x domain.
        year_max (int): Right end of the x domain.
        width (int): Plot width in pixels.
        height (int): Plot height in pixels.

    Returns:
        alt.Chart: Area chart with y=y0 and y2=y1 (no stacking in Vega-Lite).
    """
    if layers.is_empty() or not genres:
        return placeholder_chart("No genre data", width=width, height=height)

    return (
        alt.Chart(to_values(layers))
        .mark_area(interpolate="basis")
        .encode(
            x=alt.X(
                "year:Q",
                title="Year",
                scale=alt.Scale(domain=[year_min, year_max]),
                axis=alt.Axis(format="d", tickCount=8),
            ),
            y=alt.Y("y0:Q", stack=None, axis=None, title=None),
            y2="y1:Q",
            color=alt.Color(
                "genre:N",
                title=None,
                scale=alt.Scale(domain=genres, scheme="tableau10"),
                legend=alt.Legend(orient="right"),
            ),
            tooltip=[
                alt.Tooltip("genre:N", title="Genre"),
                alt.Tooltip("year:Q", title="Year", format="d"),
                alt.Tooltip("count:Q", title="Tracks"),
            ],
        )
        .properties(
            width=width,
            height=height,
            title=alt.TitleParams(
                "Shifting Genre Dominance Across Eras",
                subtitle=(
                    "Sparse early decades transition to rich post-2000 data, revealing "
                    "hip-hop's explosive growth and increasing genre diversity"
                ),
            ),
        )
    )
