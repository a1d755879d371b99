"""
Read utilities for the tracks table.

Overview
- read_tracks_csv(): Awaitable read of the delimited source table with every column kept
  as text. This is the only suspension point of the pipeline; parsing and aggregation
  run after it completes.

Failure path
- A missing or unreadable file raises DataLoadError with the original exception chained.
  Nothing is retried or recovered here.

Import DAG discipline
- Depends on stdlib, polars, and tracklens.io helpers; does not import higher layers
  (pipeline, viz, app).
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

import polars as pl

from .errors import DataLoadError

logger = logging.getLogger(__name__)


def _read_csv_text(path: Path, separator: str) -> pl.DataFrame:
    # All fields stay Utf8; typing happens once in tracklens.core.parse.
    return pl.read_csv(
        path,
        separator=separator,
        infer_schema=False,
    )


async def read_tracks_csv(path: str | os.PathLike[str], *, separator: str = ",") -> pl.DataFrame:
    """
    Read the tracks table without blocking the event loop.

    Args:
        path (str | os.PathLike[str]): Location of the delimited table.
        separator (str): Field delimiter (default ",").

    Returns:
        pl.DataFrame: Raw rows, all columns Utf8.

    Raises:
        DataLoadError: If the file is missing or cannot be parsed as a table.
    """
    p = Path(path)
    logger.debug("Reading tracks table from %s", p)
    try:
        raw = await asyncio.to_thread(_read_csv_text, p, separator)
    except (OSError, pl.exceptions.PolarsError) as exc:
        raise DataLoadError(f"failed to load tracks table {str(p)!r}: {exc}") from exc
    logger.debug("Read %d raw rows (%d columns) from %s", raw.height, raw.width, p)
    return raw
