"""Simple configuration loader for grid_search."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Pathfinder pacing and default strategy."""

    time_step: float = 0.5
    min_time_step: float = 0.0
    max_time_step: float = 1.0
    time_step_increment: float = 0.1
    method: str = "best_first"


@dataclass
class HostConfig:
    """Settings for the headless frame loop."""

    fps: float = 60.0
    max_frames: int = 100000


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    host: HostConfig
    logging: LoggingConfig
    maps: List[Dict[str, Any]] = field(default_factory=list)
    paths: Optional[Dict[str, str]] = None


def clamp_time_step(value: float, search: SearchConfig) -> float:
    """Bound ``value`` to ``[search.min_time_step, search.max_time_step]``."""

    return max(search.min_time_step, min(search.max_time_step, value))


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search", {})
    min_step = float(search_data.get("min_time_step", 0.0))
    max_step = float(search_data.get("max_time_step", 1.0))
    if min_step < 0 or max_step < min_step:
        raise ValueError(
            f"invalid time step range [{min_step}, {max_step}]"
        )
    search = SearchConfig(
        time_step=float(search_data.get("time_step", 0.5)),
        min_time_step=min_step,
        max_time_step=max_step,
        time_step_increment=float(search_data.get("time_step_increment", 0.1)),
        method=str(search_data.get("method", "best_first")),
    )
    search.time_step = clamp_time_step(search.time_step, search)

    host_data = data.get("host", {})
    host = HostConfig(
        fps=float(host_data.get("fps", 60.0)),
        max_frames=int(host_data.get("max_frames", 100000)),
    )

    logging_data = data.get("logging", {})
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    maps = list(data.get("maps") or [])
    paths = data.get("paths")

    return Config(search=search, host=host, logging=log_cfg, maps=maps, paths=paths)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "HostConfig",
    "LoggingConfig",
    "clamp_time_step",
    "load_config",
]
