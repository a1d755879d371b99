"""
tracklens — Spotify tracks dashboard: typed parsing, aggregation and charts.

Subpackages:
    - core: dataset contract, frozen models, row parser.
    - io: settings and the awaitable source-table read.
    - pipeline: filter, aggregators, stream layout, load-and-compute.
    - viz: Altair chart builders.
"""

from __future__ import annotations

__version__ = "0.1.0"
