"""
Shared UI helper utilities for the tracklens Streamlit application.

This module centralizes small helpers (KPI computation, number formatting) used by
the page orchestrator. It contains no Streamlit state manipulation itself.
"""

from __future__ import annotations

import polars as pl

from tracklens.pipeline.filter import track_counts


def compute_overview_kpis(tracks: pl.DataFrame) -> dict[str, float]:
    """Compute headline metrics from the filtered tracks frame.

    Computes:
        - total: Number of tracks kept by the filter.
        - explicit: Tracks flagged explicit.
        - non_explicit: Tracks not flagged explicit.
        - explicit_share: explicit / total (0.0 when there are no tracks).
        - year_min / year_max: Release-year range actually present (0 when empty).

    Args:
        tracks (pl.DataFrame): Filtered tracks frame. Expected to include "explicit"
            and "year". If empty, zeros are returned.

    Returns:
        dict[str, float]: KPI dictionary.
    """
    counts = track_counts(tracks)
    total = counts["total"]
    if total == 0:
        return {
            "total": 0,
            "explicit": 0,
            "non_explicit": 0,
            "explicit_share": 0.0,
            "year_min": 0,
            "year_max": 0,
        }
    y_min, y_max = tracks.select(
        pl.col("year").min().alias("y_min"), pl.col("year").max().alias("y_max")
    ).row(0)
    return {
        "total": total,
        "explicit": counts["explicit"],
        "non_explicit": counts["non_explicit"],
        "explicit_share": counts["explicit"] / total,
        "year_min": int(y_min),
        "year_max": int(y_max),
    }


def format_count(n: float) -> str:
    """Format a count with thousands separators ("12,345")."""
    return f"{int(n):,}"


def format_share(share: float) -> str:
    """Format a 0..1 share as a percentage ("25.0%")."""
    return f"{share:.1%}"


def format_year_range(kpi: dict[str, float]) -> str:
    """Format the KPI year range ("1988-2020"), or "n/a" when no tracks were kept."""
    if not kpi["total"]:
        return "n/a"
    return f"{int(kpi['year_min'])}-{int(kpi['year_max'])}"
