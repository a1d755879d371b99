"""
Explicit-rate aggregation by release year.

Overview
- yearly_explicit_stats(): group filtered tracks by year and count explicit vs
  non-explicit tracks, with the explicit share per year.
- yearly_explicit_models(): the same rows as YearlyExplicitStat models.

Notes
- Output is sorted ascending by year.
- Only years that have tracks appear; consumers must not assume a dense year range.
"""

from __future__ import annotations

import polars as pl

from tracklens.core.schema import YearlyExplicitStat

__all__ = [
    "EXPLICIT_STATS_SCHEMA",
    "yearly_explicit_stats",
    "yearly_explicit_models",
]

EXPLICIT_STATS_SCHEMA: dict[str, pl.DataType] = {
    "year": pl.Int64(),
    "explicit_count": pl.Int64(),
    "non_explicit_count": pl.Int64(),
    "pct_explicit": pl.Float64(),
}


def yearly_explicit_stats(tracks: pl.DataFrame) -> pl.DataFrame:
    """
    Count explicit and non-explicit tracks per year.

    Args:
        tracks (pl.DataFrame): Filtered tracks with columns year and explicit.

    Returns:
        pl.DataFrame: Columns year, explicit_count, non_explicit_count, pct_explicit where
        pct_explicit = explicit_count / (explicit_count + non_explicit_count), or 0.0 when
        both counts are 0.

    Examples:
        >>> import polars as pl
        >>> t = pl.DataFrame({"year": [2000, 2000, 2000], "explicit": [True, False, True]})
        >>> yearly_explicit_stats(t).select("explicit_count", "non_explicit_count").row(0)
        (2, 1)
    """
    if tracks.is_empty():
        return pl.DataFrame(schema=EXPLICIT_STATS_SCHEMA)

    grouped = tracks.group_by("year").agg(
        pl.col("explicit").sum().cast(pl.Int64).alias("explicit_count"),
        (~pl.col("explicit")).sum().cast(pl.Int64).alias("non_explicit_count"),
    )
    total = pl.col("explicit_count") + pl.col("non_explicit_count")
    return (
        grouped.with_columns(
            pl.when(total > 0)
            .then(pl.col("explicit_count") / total)
            .otherwise(0.0)
            .cast(pl.Float64)
            .alias("pct_explicit")
        )
        .sort("year")
        .select(list(EXPLICIT_STATS_SCHEMA))
        .cast(EXPLICIT_STATS_SCHEMA)  # type: ignore[arg-type]
    )


def yearly_explicit_models(stats: pl.DataFrame) -> list[YearlyExplicitStat]:
    return [YearlyExplicitStat.model_validate(row) for row in stats.iter_rows(named=True)]
