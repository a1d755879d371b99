"""
Genre-stream aggregation: top-N genres counted per release year.

Overview
- flatten_genre_pairs(): one (year, genre) row per genre tag of every filtered track,
  dropping empty tags and the "N/A" sentinel (case-insensitive).
- select_top_genres(): the N most frequent genres; ties keep first-encountered order.
- genre_year_counts(): long (year, genre, count) frame over every (year, selected genre)
  combination, zero-filled.
- build_genre_matrix(): the same counts packed as a GenreYearMatrix.

Ordering contract
- Genre order is selection order (descending frequency, stable on first encounter).
- Year order is ascending over the distinct years of the flattened pairs. A year whose
  pairs all belong to unselected genres is still present, with zero counts.

Notes
- Genre strings are compared verbatim: "Pop" and "pop" are different genres.
- Counting uses a single (year, genre) group-by joined onto the full year x genre grid.
"""

from __future__ import annotations

import polars as pl

from tracklens.core.constants import MISSING_GENRE_TOKEN, TOP_GENRES
from tracklens.core.schema import GenreYearMatrix

__all__ = [
    "GENRE_COUNTS_SCHEMA",
    "flatten_genre_pairs",
    "select_top_genres",
    "genre_year_counts",
    "build_genre_matrix",
]

GENRE_COUNTS_SCHEMA: dict[str, pl.DataType] = {
    "year": pl.Int64(),
    "genre": pl.Utf8(),
    "count": pl.Int64(),
}


def flatten_genre_pairs(tracks: pl.DataFrame) -> pl.DataFrame:
    """
    Explode tracks into (year, genre) pairs in encounter order.

    Args:
        tracks (pl.DataFrame): Filtered tracks with columns year and genres.

    Returns:
        pl.DataFrame: Columns year (Int64) and genre (Utf8).
    """
    if tracks.is_empty():
        return pl.DataFrame(schema={"year": pl.Int64(), "genre": pl.Utf8()})
    return (
        tracks.select("year", pl.col("genres").alias("genre"))
        .explode("genre")
        .filter(
            pl.col("genre").is_not_null()
            & (pl.col("genre") != "")
            & (pl.col("genre").str.to_lowercase() != MISSING_GENRE_TOKEN)
        )
        .cast({"year": pl.Int64, "genre": pl.Utf8})
    )


def select_top_genres(pairs: pl.DataFrame, n: int = TOP_GENRES) -> list[str]:
    """
    Return the n most frequent genres of the flattened pairs.

    Ties are broken by the order in which each genre first appears in `pairs`.

    Examples:
        >>> import polars as pl
        >>> pairs = pl.DataFrame({"year": [2000, 2000, 2001, 2001], "genre": ["b", "a", "a", "b"]})
        >>> select_top_genres(pairs, 1)
        ['b']
    """
    if pairs.is_empty() or n <= 0:
        return []
    freq = pairs.group_by("genre", maintain_order=True).agg(pl.len().alias("n"))
    top = freq.sort("n", descending=True, maintain_order=True).head(n)
    return top.get_column("genre").to_list()


def genre_year_counts(pairs: pl.DataFrame, genres: list[str]) -> pl.DataFrame:
    """
    Count occurrences of each selected genre per year.

    Args:
        pairs (pl.DataFrame): Flattened (year, genre) pairs.
        genres (list[str]): Selected genres, in the order rows should follow within a year.

    Returns:
        pl.DataFrame: Columns year, genre, count; one row per (year, genre) with years
        ascending and genres in the given order. Missing combinations count 0.
    """
    if pairs.is_empty() or not genres:
        return pl.DataFrame(schema=GENRE_COUNTS_SCHEMA)

    years = pairs.select(pl.col("year").unique().sort())
    ranked = pl.DataFrame(
        {"genre": genres, "_rank": list(range(len(genres)))},
        schema={"genre": pl.Utf8, "_rank": pl.Int64},
    )
    grid = years.join(ranked, how="cross")
    counts = (
        pairs.filter(pl.col("genre").is_in(genres))
        .group_by(["year", "genre"])
        .agg(pl.len().alias("count"))
    )
    return (
        grid.join(counts, on=["year", "genre"], how="left")
        .with_columns(pl.col("count").fill_null(0))
        .sort(["year", "_rank"])
        .select(list(GENRE_COUNTS_SCHEMA))
        .cast(GENRE_COUNTS_SCHEMA)  # type: ignore[arg-type]
    )


def build_genre_matrix(tracks: pl.DataFrame, *, top_n: int = TOP_GENRES) -> GenreYearMatrix:
    """
    Build the year x genre matrix consumed by the streamgraph.

    Args:
        tracks (pl.DataFrame): Filtered tracks.
        top_n (int): Number of genres to select (default 7).

    Returns:
        GenreYearMatrix: Selected genres, ascending years, and per-year counts.
    """
    pairs = flatten_genre_pairs(tracks)
    genres = select_top_genres(pairs, top_n)
    long = genre_year_counts(pairs, genres)
    if long.is_empty():
        return GenreYearMatrix()

    years = pairs.get_column("year").unique().sort().to_list()
    values = long.get_column("count").to_list()
    width = len(genres)
    counts = [values[i * width : (i + 1) * width] for i in range(len(years))]
    return GenreYearMatrix(genres=genres, years=years, counts=counts)
