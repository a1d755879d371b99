"""
Pydantic v2 models for parsed tracks and the derived chart datasets.

Responsibilities
- Define the typed record produced by the row parser (Track).
- Define the plain-data shapes handed to renderers (ScatterPoint, YearlyExplicitStat,
  GenreYearMatrix).
- Enforce shape invariants that are cheap to check (e.g., matrix dimensions).

Style
- Zero-IO (stdlib + pydantic only).
- All models are frozen; derived entities are recomputed, never mutated.

Notes
- The Polars frames used by tracklens.pipeline carry the same column names as these
  models; helpers in tracklens.pipeline convert frames to model lists.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "Track",
    "ScatterPoint",
    "YearlyExplicitStat",
    "GenreYearMatrix",
]


class Track(BaseModel):
    """
    One parsed, typed record derived from a raw dataset row.

    Attributes:
        artist_followers (float): Follower count; 0 when the source text is not numeric.
        artist_popularity (float): Popularity score (nominally 0..100); 0 when not numeric.
        explicit (bool): True only for the tokens "true", "True", "TRUE", "1".
        genres (list[str]): Trimmed genre tokens in source order; empty when absent.
        year (int | None): First four characters of the release date as an integer,
            or None when the release date is empty or not numeric.

    Notes:
        Unrecognized explicit tokens (e.g., "maybe", "yes") silently become False.
        This mirrors the dataset's loading policy and is kept on purpose.

    Examples:
        >>> from tracklens.core.schema import Track
        >>> Track(artist_followers=10, artist_popularity=50, explicit=False, genres=["pop"], year=2001)
        Track(artist_followers=10.0, artist_popularity=50.0, explicit=False, genres=['pop'], year=2001)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    artist_followers: float = 0.0
    artist_popularity: float = 0.0
    explicit: bool = False
    genres: list[str] = Field(default_factory=list)
    year: int | None = None


class ScatterPoint(BaseModel):
    """Single (followers, popularity) pair for the scatter view."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    artist_followers: float
    artist_popularity: float


class YearlyExplicitStat(BaseModel):
    """
    Explicit vs non-explicit counts for one release year.

    Attributes:
        year (int): Release year.
        explicit_count (int): Tracks flagged explicit.
        non_explicit_count (int): Tracks not flagged explicit.
        pct_explicit (float): explicit_count / total, or 0.0 when total is 0.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int
    explicit_count: int = Field(..., ge=0)
    non_explicit_count: int = Field(..., ge=0)
    pct_explicit: float = Field(..., ge=0.0, le=1.0)


class GenreYearMatrix(BaseModel):
    """
    Year x genre occurrence counts for the streamgraph.

    Attributes:
        genres (list[str]): Selected genres in selection order (most frequent first).
        years (list[int]): Distinct years, ascending.
        counts (list[list[int]]): counts[i][j] is the number of (years[i], genres[j]) pairs.

    Raises:
        pydantic.ValidationError: If counts does not have len(years) rows of len(genres) values.

    Examples:
        >>> from tracklens.core.schema import GenreYearMatrix
        >>> m = GenreYearMatrix(genres=["pop"], years=[2000, 2001], counts=[[2], [0]])
        >>> m.column("pop")
        [2, 0]
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    genres: list[str] = Field(default_factory=list)
    years: list[int] = Field(default_factory=list)
    counts: list[list[int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_shape(self) -> GenreYearMatrix:
        if len(self.counts) != len(self.years):
            raise ValueError(
                f"counts has {len(self.counts)} rows but there are {len(self.years)} years"
            )
        width = len(self.genres)
        for row in self.counts:
            if len(row) != width:
                raise ValueError(f"counts row has {len(row)} values, expected {width}")
        return self

    @property
    def is_empty(self) -> bool:
        return not self.years or not self.genres

    def column(self, genre: str) -> list[int]:
        """Return the per-year counts for one selected genre."""
        j = self.genres.index(genre)
        return [row[j] for row in self.counts]
