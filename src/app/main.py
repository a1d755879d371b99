"""
tracklens App entrypoint.

This module provides the CLI entrypoint to launch the Streamlit UI or to export the
dashboard headlessly. It defers all UI composition to the app.ui package and exists
solely to start Streamlit programmatically, render directly when already running under
Streamlit, or write the composed charts to a file.

Usage:
    - Python execution (hands process to Streamlit):
        uv run python -m app.main --data data/spotify_data_clean.csv

    - Streamlit direct:
        streamlit run src/app/main.py -- --data data/spotify_data_clean.csv

    - Headless export (no Streamlit):
        uv run python -m app.main --data data/spotify_data_clean.csv --export out/dashboard.html
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from app.ui import streamlit_app
from tracklens.io.config import DashboardSettings
from tracklens.io.errors import ConfigError, DataLoadError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="tracklens Streamlit App")
    parser.add_argument("--data", default=None, help="Path to the tracks CSV table")
    parser.add_argument(
        "--cache-ttl",
        type=int,
        default=None,
        help="Cache lifetime (seconds) for the loaded dataset (default: no expiry).",
    )
    parser.add_argument(
        "--export",
        default=None,
        help="Write the dashboard to FILE (.html or .json) instead of launching Streamlit.",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def export(data_path: str | None, out_path: str) -> Path:
    """Load the dataset and write the composed dashboard chart to out_path.

    Raises:
        DataLoadError: If the tracks table cannot be read.
        ValueError: If out_path has an unsupported suffix.
    """
    from app.charts import export_dashboard
    from tracklens.pipeline.run import load_dashboard_sync

    settings = DashboardSettings.load()
    if data_path:
        settings = replace(settings, data_path=data_path)
    _configure_logging(settings.log_level)
    data = load_dashboard_sync(settings)
    out = export_dashboard(data, out_path)
    logger.info("Wrote dashboard to %s", out)
    return out


def main(argv: list[str] | None = None) -> None:
    """Console entrypoint that launches Streamlit with the tracklens UI.

    If --export is given, the dashboard is written to a file and no server is started.
    If already executing within a Streamlit server (environment variable
    STREAMLIT_SERVER_PORT is set), this function renders the app directly.
    Otherwise, it execs "python -m streamlit run <this_module>" to leverage
    Streamlit's reloader and argument parsing, passing through any supported
    options after "--".

    Args:
        argv (list[str] | None): Optional list of CLI arguments. If None,
            sys.argv[1:] is used.

    Examples:
        uv run python -m app.main --data data/spotify_data_clean.csv
        streamlit run src/app/main.py -- --data data/spotify_data_clean.csv
    """
    args = list(sys.argv[1:] if argv is None else argv)
    ns = _build_parser().parse_args(args)

    load_dotenv()

    if ns.export:
        try:
            export(ns.data, ns.export)
        except (DataLoadError, ConfigError, ValueError) as e:
            print(f"error: {e}", file=sys.stderr)
            raise SystemExit(1) from e
        return

    # If invoked within Streamlit, just render
    if os.environ.get("STREAMLIT_SERVER_PORT"):
        streamlit_app(default_data=ns.data, cache_ttl=ns.cache_ttl)
        return

    # Otherwise, exec streamlit run on this module to take over the process
    app_path = Path(__file__).resolve()
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)]

    passthrough: list[str] = []
    if ns.data:
        passthrough += ["--data", ns.data]
    if ns.cache_ttl is not None:
        passthrough += ["--cache-ttl", str(int(ns.cache_ttl))]
    if passthrough:
        cmd += ["--"] + passthrough

    try:
        os.execv(sys.executable, cmd)
    except OSError:
        import subprocess

        subprocess.run(cmd, check=False)


if __name__ == "__main__":
    # Support: --data, --cache-ttl after '--' when using `streamlit run`
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--data", default=None)
    parser.add_argument("--cache-ttl", type=int, default=None)
    load_dotenv()
    try:
        ns, _ = parser.parse_known_args(sys.argv[1:])
        streamlit_app(default_data=ns.data, cache_ttl=ns.cache_ttl)
    except SystemExit:
        # Fallback to no-arg render
        streamlit_app()
