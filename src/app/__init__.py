"""
Top-level Streamlit app package.

This package hosts the tracklens dashboard (Streamlit) decoupled from the tracklens.*
library modules. Chart builders live under tracklens.viz; the Streamlit UI shell,
caching and export helpers live here.

CLI entrypoint (configured in pyproject.toml):
    tracklens-app = app.main:main
"""

from __future__ import annotations
