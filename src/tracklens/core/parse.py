"""
Row parser: raw text rows -> typed tracks.

Overview
- parse_tracks(): Polars-first conversion of a raw (all-text) frame into the tracks frame.
- parse_row(): Single-row convenience returning a frozen Track model.
- tracks_to_models(): Materialize a tracks frame as a list of Track models.

Defaulting policy (never raises)
- Numeric fields: surrounding whitespace ignored; unparseable, empty or NaN -> 0.0.
- explicit: exact match against TRUTHY_TOKENS; everything else (including unknown
  tokens such as "maybe") -> False.
- genres: split on "," and trim each token; empty field -> [].
- year: first four characters of album_release_date cast to int; empty or
  non-numeric -> null.
- Missing source columns are treated as empty text.

Notes
- Output column order and dtypes follow TRACK_SCHEMA. Row order is preserved.
"""

from __future__ import annotations

from collections.abc import Mapping

import polars as pl

from .constants import SOURCE_COLUMNS, TRUTHY_TOKENS
from .schema import Track

__all__ = [
    "TRACK_SCHEMA",
    "empty_tracks",
    "parse_tracks",
    "parse_row",
    "tracks_to_models",
]

TRACK_SCHEMA: dict[str, pl.DataType] = {
    "artist_followers": pl.Float64(),
    "artist_popularity": pl.Float64(),
    "explicit": pl.Boolean(),
    "genres": pl.List(pl.Utf8),
    "year": pl.Int64(),
}


def empty_tracks() -> pl.DataFrame:
    """Return an empty frame with the tracks schema."""
    return pl.DataFrame(schema=TRACK_SCHEMA)


def _text(column: str) -> pl.Expr:
    return pl.col(column).fill_null("")


def _number(column: str) -> pl.Expr:
    x = _text(column).str.strip_chars().cast(pl.Float64, strict=False)
    # Non-finite values ("nan", "inf") count as unparseable.
    return pl.when(x.is_infinite()).then(0.0).otherwise(x).fill_nan(0.0).fill_null(0.0)


def _explicit(column: str) -> pl.Expr:
    return _text(column).is_in(sorted(TRUTHY_TOKENS))


def _genres(column: str) -> pl.Expr:
    tokens = _text(column).str.split(",").list.eval(pl.element().str.strip_chars())
    # Splitting "" yields [""]; an empty field must yield no genres at all.
    return pl.when(_text(column) == "").then(tokens.list.head(0)).otherwise(tokens)


def _year(column: str) -> pl.Expr:
    return _text(column).str.slice(0, 4).cast(pl.Int64, strict=False)


def _with_source_columns(raw: pl.DataFrame) -> pl.DataFrame:
    exprs: list[pl.Expr] = []
    for column in SOURCE_COLUMNS:
        if column in raw.columns:
            if raw.schema[column] != pl.Utf8:
                exprs.append(pl.col(column).cast(pl.Utf8))
        else:
            exprs.append(pl.lit("", dtype=pl.Utf8).alias(column))
    return raw.with_columns(exprs) if exprs else raw


def parse_tracks(raw: pl.DataFrame) -> pl.DataFrame:
    """
    Convert a raw frame of text columns into the typed tracks frame.

    Args:
        raw (pl.DataFrame): Source rows. Any columns beyond SOURCE_COLUMNS are ignored.

    Returns:
        pl.DataFrame: One row per input row with columns artist_followers, artist_popularity,
        explicit, genres, year (see TRACK_SCHEMA).

    Examples:
        >>> import polars as pl
        >>> raw = pl.DataFrame({"explicit": ["True", "maybe"], "album_release_date": ["1999-01-01", ""]})
        >>> parse_tracks(raw).select("explicit", "year").rows()
        [(True, 1999), (False, None)]
    """
    if raw.width == 0:
        return empty_tracks()
    df = _with_source_columns(raw)
    out = df.select(
        _number("artist_followers").alias("artist_followers"),
        _number("artist_popularity").alias("artist_popularity"),
        _explicit("explicit").alias("explicit"),
        _genres("artist_genres").alias("genres"),
        _year("album_release_date").alias("year"),
    )
    return out.cast(TRACK_SCHEMA)  # type: ignore[arg-type]


def parse_row(raw: Mapping[str, object]) -> Track:
    """
    Parse one raw record into a Track.

    Args:
        raw (Mapping[str, object]): Column name -> text value. Missing keys and None
            values behave as empty text.

    Returns:
        Track: Frozen typed record.

    Examples:
        >>> parse_row({"artist_followers": "12", "artist_genres": " pop , rock"}).genres
        ['pop', 'rock']
    """
    data = {
        column: [None if raw.get(column) is None else str(raw.get(column))]
        for column in SOURCE_COLUMNS
    }
    frame = pl.DataFrame(data, schema={column: pl.Utf8 for column in SOURCE_COLUMNS})
    return tracks_to_models(parse_tracks(frame))[0]


def tracks_to_models(tracks: pl.DataFrame) -> list[Track]:
    return [Track.model_validate(row) for row in tracks.iter_rows(named=True)]
