"""
tracklens.viz — Altair chart builders over pipeline outputs.

## Public API
- scatter_chart — popularity vs followers (log x).
- explicit_chart — stacked explicit/non-explicit bars with a % explicit trend line.
- streamgraph_chart — genre areas drawn from wiggle-offset layers.

## Import DAG discipline
- Depends on: polars, altair, tracklens.core constants.
- Read-only over its inputs; never loads data itself.
"""

from __future__ import annotations

from .charts import explicit_chart, placeholder_chart, scatter_chart, streamgraph_chart, to_values

__all__ = [
    "explicit_chart",
    "placeholder_chart",
    "scatter_chart",
    "streamgraph_chart",
    "to_values",
]
