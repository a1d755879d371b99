"""
Streamgraph layout: wiggle-minimizing stacked offsets for a GenreYearMatrix.

Layers are stacked in genre selection order. The baseline of the first layer moves from
year to year so that the weighted slope of all layers is minimized (Byron & Wattenberg's
"wiggle" offset); every following layer sits directly on the previous one.

Output is a long frame (year, genre, count, y0, y1) that an area mark can draw with
y=y0 and y2=y1, without any further stacking.
"""

from __future__ import annotations

import polars as pl

from tracklens.core.schema import GenreYearMatrix

__all__ = [
    "STREAM_LAYERS_SCHEMA",
    "wiggle_offset",
]

STREAM_LAYERS_SCHEMA: dict[str, pl.DataType] = {
    "year": pl.Int64(),
    "genre": pl.Utf8(),
    "count": pl.Int64(),
    "y0": pl.Float64(),
    "y1": pl.Float64(),
}


def _wiggle_baseline(series: list[list[float]]) -> list[float]:
    """Return the first layer's baseline per year for raw layer values series[i][j]."""
    n = len(series)
    m = len(series[0])
    baseline = [0.0] * m
    y = 0.0
    for j in range(1, m):
        s1 = 0.0
        s2 = 0.0
        for i in range(n):
            sij0 = series[i][j]
            sij1 = series[i][j - 1]
            s3 = (sij0 - sij1) / 2
            for k in range(i):
                s3 += series[k][j] - series[k][j - 1]
            s1 += sij0
            s2 += s3 * sij0
        baseline[j - 1] = y
        if s1:
            y -= s2 / s1
    baseline[m - 1] = y
    return baseline


def wiggle_offset(matrix: GenreYearMatrix) -> pl.DataFrame:
    """
    Stack the matrix layers with the wiggle offset.

    Args:
        matrix (GenreYearMatrix): Counts per (year, genre).

    Returns:
        pl.DataFrame: One row per (year, genre), years ascending and genres in selection
        order within a year. For each year, y0 of a layer equals y1 of the previous layer
        and y1 - y0 equals the count.

    Examples:
        >>> from tracklens.core.schema import GenreYearMatrix
        >>> m = GenreYearMatrix(genres=["a"], years=[2000, 2001], counts=[[1], [3]])
        >>> wiggle_offset(m).select("y0", "y1").rows()
        [(0.0, 1.0), (-1.0, 2.0)]
    """
    if matrix.is_empty:
        return pl.DataFrame(schema=STREAM_LAYERS_SCHEMA)

    series = [[float(v) for v in matrix.column(genre)] for genre in matrix.genres]
    baseline = _wiggle_baseline(series)

    rows: list[dict[str, object]] = []
    for j, year in enumerate(matrix.years):
        lower = baseline[j]
        for i, genre in enumerate(matrix.genres):
            upper = lower + series[i][j]
            rows.append(
                {
                    "year": year,
                    "genre": genre,
                    "count": matrix.counts[j][i],
                    "y0": lower,
                    "y1": upper,
                }
            )
            lower = upper
    return pl.DataFrame(rows, schema=STREAM_LAYERS_SCHEMA)
