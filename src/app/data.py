from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import streamlit as st

from tracklens.io.config import DashboardSettings
from tracklens.pipeline.run import DashboardData, load_dashboard_sync

__all__ = [
    "CacheConfig",
    "load_dashboard_cached",
]

# ---------- Cache configuration (factory of cached callables) ----------


@dataclass(frozen=True)
class CacheConfig:
    """Hashable cache configuration for Streamlit @st.cache_data.

    Note: Streamlit's decorator parameters (ttl, persist) are fixed at decoration
    time. We build and memoize decorated callables per (name, ttl, persist) so the
    app can switch these at runtime while still benefiting from caching.
    """

    ttl: int | None = None
    persist: bool = False


# Registry of decorated functions by (loader_name, CacheConfig)
_CACHE_REGISTRY: dict[tuple[str, CacheConfig], Callable[..., Any]] = {}


def _get_cached(loader_name: str, cfg: CacheConfig, fn: Callable[..., Any]) -> Callable[..., Any]:
    key = (loader_name, cfg)
    if key in _CACHE_REGISTRY:
        return _CACHE_REGISTRY[key]
    if cfg.persist:
        wrapped = st.cache_data(persist="disk", ttl=cfg.ttl, show_spinner=False)(fn)
    else:
        wrapped = st.cache_data(ttl=cfg.ttl, show_spinner=False)(fn)
    _CACHE_REGISTRY[key] = wrapped
    return wrapped


# ---------- Loaders (internal implementations) ----------


def _load_dashboard_impl(settings: DashboardSettings) -> DashboardData:
    return load_dashboard_sync(settings)


# ---------- Public loader APIs (dispatch to cached implementations) ----------


def load_dashboard_cached(
    settings: DashboardSettings, *, cfg: CacheConfig = CacheConfig()
) -> DashboardData:
    """Load and aggregate the tracks table once per (settings, cache config).

    Raises:
        DataLoadError: If the source table cannot be read (never cached).
    """
    fn = _get_cached("load_dashboard", cfg, _load_dashboard_impl)
    return fn(settings)  # type: ignore[no-any-return]
