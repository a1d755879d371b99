"""
Configuration for the tracklens dashboard.

Defines DashboardSettings, a frozen dataclass carrying runtime configuration for loading
and aggregating the tracks table. Defaults are sourced from tracklens.core.constants (the
single source of truth).

Source of truth
- tracklens.core.constants.DEFAULT_DATA_PATH, YEAR_MIN, YEAR_MAX, TOP_GENRES

Import DAG discipline
- Depends only on stdlib and tracklens.core.constants.
- Does not import higher layers (pipeline, viz, app).

Notes
- Precedence: environment > TOML > defaults.
- The CLI loads a .env file (python-dotenv) before calling DashboardSettings.load().
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from tracklens.core.constants import DEFAULT_DATA_PATH, TOP_GENRES, YEAR_MAX, YEAR_MIN

from .errors import ConfigError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class DashboardSettings:
    """
    Runtime settings for the tracklens dashboard.

    Attributes:
        data_path (str): Path to the delimited tracks table.
        year_min (int): Inclusive lower bound on release year kept by the filter.
        year_max (int): Inclusive upper bound on release year kept by the filter.
        top_genres (int): Number of genres selected for the streamgraph.
        log_level (str): Root logging level applied by the CLI.

    Examples:
        >>> from tracklens.io import DashboardSettings
        >>> DashboardSettings(data_path="tracks.csv", top_genres=5)  # doctest: +ELLIPSIS
        DashboardSettings(...)
    """

    data_path: str = DEFAULT_DATA_PATH
    year_min: int = YEAR_MIN
    year_max: int = YEAR_MAX
    top_genres: int = TOP_GENRES
    log_level: str = "INFO"

    def validate(self) -> DashboardSettings:
        """
        Check cross-field constraints and return self.

        Raises:
            ConfigError: If the year window is inverted or top_genres < 1.
        """
        if self.year_min > self.year_max:
            raise ConfigError(f"year_min ({self.year_min}) must be <= year_max ({self.year_max})")
        if self.top_genres < 1:
            raise ConfigError(f"top_genres must be >= 1 (got {self.top_genres})")
        return self

    @classmethod
    def _apply_mapping(
        cls, base: DashboardSettings, cfg: dict[str, Any] | None
    ) -> DashboardSettings:
        """Apply a loose config mapping onto DashboardSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "data_path" in cfg and isinstance(cfg["data_path"], str):
            s = replace(s, data_path=cfg["data_path"])

        for key in ("year_min", "year_max", "top_genres"):
            if key in cfg:
                try:
                    s = replace(s, **{key: int(cfg[key])})
                except (TypeError, ValueError):
                    pass

        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)

        return s

    @classmethod
    def from_env(
        cls, base: DashboardSettings | None = None, prefix: str = "TRACKLENS_"
    ) -> DashboardSettings:
        """
        Build DashboardSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - TRACKLENS_DATA_PATH
            - TRACKLENS_YEAR_MIN
            - TRACKLENS_YEAR_MAX
            - TRACKLENS_TOP_GENRES
            - TRACKLENS_LOG_LEVEL
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("data_path", "year_min", "year_max", "top_genres", "log_level"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> DashboardSettings:
        """
        Build DashboardSettings from a TOML file.

        Search order when `path` is None:
            1) ./tracklens.toml (with either a [dashboard] table or direct keys)
            2) ./pyproject.toml under [tool.tracklens]

        Returns defaults if no file is present or it cannot be parsed.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "tracklens.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("tracklens") if isinstance(tool, dict) else None
            else:
                # tracklens.toml - accept either [dashboard] table or top-level keys
                if "dashboard" in data and isinstance(data["dashboard"], dict):
                    cfg = data["dashboard"]
                else:
                    cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> DashboardSettings:
        """
        Load DashboardSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (tracklens.toml, pyproject.toml).

        Returns:
            DashboardSettings

        Raises:
            ConfigError: If the resolved settings are inconsistent.
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s.validate()
