"""
tracklens App UI package.

Modules:
    - app: Streamlit page orchestrator (streamlit_app).
    - helpers: KPI computation and formatting.

Usage:
    from app.ui import streamlit_app
    streamlit_app(default_data="data/spotify_data_clean.csv")
"""

from __future__ import annotations

from .app import streamlit_app

__all__ = [
    "streamlit_app",
]
