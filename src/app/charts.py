from __future__ import annotations

from pathlib import Path

import altair as alt

from tracklens.pipeline.run import DashboardData
from tracklens.viz import explicit_chart, scatter_chart, streamgraph_chart

_EXPORT_SUFFIXES = {".html", ".json"}


# Uniform chart defaults for a professional look
def _apply_chart_defaults(ch: alt.TopLevelMixin) -> alt.TopLevelMixin:
    return (
        ch.configure_axis(labelFontSize=12, titleFontSize=12, grid=True)
        .configure_legend(labelFontSize=12, titleFontSize=12)
        .configure_title(fontSize=14, subtitleFontSize=11, subtitleColor="#666")
        .configure_view(strokeOpacity=0)
    )


# ----------------------------
# Single views
# ----------------------------


def popularity_scatter_chart(data: DashboardData) -> alt.TopLevelMixin:
    """Artist popularity vs followers (delegates to tracklens.viz.scatter_chart)."""
    return _apply_chart_defaults(scatter_chart(data.scatter))


def explicit_trend_chart(data: DashboardData) -> alt.TopLevelMixin:
    """Yearly explicit stack + share line (delegates to tracklens.viz.explicit_chart)."""
    return _apply_chart_defaults(
        explicit_chart(
            data.yearly_explicit,
            year_min=data.settings.year_min,
            year_max=data.settings.year_max,
        )
    )


def genre_stream_chart(data: DashboardData) -> alt.TopLevelMixin:
    """Genre streamgraph over the configured year window."""
    return _apply_chart_defaults(
        streamgraph_chart(
            data.stream_layers,
            data.genre_matrix.genres,
            year_min=data.settings.year_min,
            year_max=data.settings.year_max,
        )
    )


# ----------------------------
# Whole dashboard (export)
# ----------------------------


def dashboard_chart(data: DashboardData) -> alt.TopLevelMixin:
    """Scatter and explicit charts side by side, streamgraph full width below."""
    top = alt.hconcat(
        scatter_chart(data.scatter),
        explicit_chart(
            data.yearly_explicit,
            year_min=data.settings.year_min,
            year_max=data.settings.year_max,
        ),
    )
    bottom = streamgraph_chart(
        data.stream_layers,
        data.genre_matrix.genres,
        year_min=data.settings.year_min,
        year_max=data.settings.year_max,
    )
    return _apply_chart_defaults(
        alt.vconcat(top, bottom).properties(title="Spotify Dataset Dashboard")
    )


def export_dashboard(data: DashboardData, path: str | Path) -> Path:
    """Write the composed dashboard to an .html or .json (Vega-Lite spec) file.

    Raises:
        ValueError: If the file suffix is not supported.
    """
    out = Path(path)
    if out.suffix.lower() not in _EXPORT_SUFFIXES:
        raise ValueError(
            f"unsupported export format {out.suffix!r} (expected one of {sorted(_EXPORT_SUFFIXES)})"
        )
    out.parent.mkdir(parents=True, exist_ok=True)
    dashboard_chart(data).save(str(out))
    return out
