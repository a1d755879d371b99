"""
Streamlit application orchestrator for the tracklens dashboard.

Responsibilities:
    - Configure the Streamlit page and render heading and description.
    - Load and aggregate the tracks table once via app.data (cached).
    - Render headline KPIs and the three charts (scatter, explicit trend, streamgraph).

Notes:
    - Charts are produced by app.charts and tracklens.viz.
    - A failed load is reported with st.error and the page stops there.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, cast

import streamlit as st

from app import charts as app_charts
from app.data import CacheConfig, load_dashboard_cached
from tracklens.io.config import DashboardSettings
from tracklens.io.errors import ConfigError, DataLoadError

from .helpers import compute_overview_kpis, format_count, format_share, format_year_range

DESCRIPTION = (
    "This dashboard explores how popular music has evolved from 1950 to 2025 through three "
    "lenses: **artist success, lyrical content maturity, and genre dominance**. Together, "
    "these views provide a multi-level perspective on how music and audience preferences "
    "have transformed over time."
)


def streamlit_app(default_data: str | None = None, cache_ttl: int | None = None) -> None:
    """Render the tracklens Streamlit application.

    Args:
        default_data (str | None): Optional path to the tracks table; overrides the
            configured data_path.
        cache_ttl (int | None): Optional cache lifetime in seconds for the loaded data.

    Returns:
        None
    """
    st.set_page_config(page_title="Spotify Dataset Dashboard", layout="wide")

    try:
        settings = DashboardSettings.load()
    except ConfigError as e:
        st.error(f"Invalid configuration: {e}")
        return
    if default_data:
        settings = replace(settings, data_path=default_data)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    st.title("Spotify Dataset Dashboard")
    st.markdown(DESCRIPTION)

    try:
        with st.spinner(f"Loading {settings.data_path} ..."):
            data = load_dashboard_cached(settings, cfg=CacheConfig(ttl=cache_ttl))
    except DataLoadError as e:
        st.error(str(e))
        return

    kpi = compute_overview_kpis(data.tracks)
    c1, c2, c3, c4, c5 = st.columns(5)
    with c1:
        st.metric("Total tracks", format_count(kpi["total"]))
    with c2:
        st.metric("Explicit tracks", format_count(kpi["explicit"]))
    with c3:
        st.metric("Non-explicit tracks", format_count(kpi["non_explicit"]))
    with c4:
        st.metric("Explicit share", format_share(kpi["explicit_share"]))
    with c5:
        st.metric("Release years", format_year_range(kpi))

    left, right = st.columns(2)
    with left:
        st.altair_chart(
            cast(Any, app_charts.popularity_scatter_chart(data)),
            theme=None,
            use_container_width=True,
        )
    with right:
        st.altair_chart(
            cast(Any, app_charts.explicit_trend_chart(data)),
            theme=None,
            use_container_width=True,
        )

    st.altair_chart(
        cast(Any, app_charts.genre_stream_chart(data)),
        theme=None,
        use_container_width=True,
    )
