# grid_search/main.py
"""Search bootstrap and headless frame loop."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict, List

import pygame

from .config import CONFIG, CONFIG_PATH, Config, LoggingConfig, clamp_time_step, load_config
from .core.map_catalog import MapCatalog
from .search.nodes import SearchMethod, SearchStatus
from .search.pathfinder import PathFinder
from .utils.observer import dump_state, record_frame


def configure_logging(log_cfg: LoggingConfig) -> None:
    """Apply the root level and any per-module levels from ``log_cfg``."""

    numeric_level = getattr(logging, log_cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in log_cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


logger = logging.getLogger(__name__)
configure_logging(CONFIG.logging)


class SearchSession:
    """Couple a :class:`MapCatalog` with a :class:`PathFinder`.

    Map changes are deferred to the next :meth:`update`, which rebuilds the
    map and resets the search before forwarding the frame time.
    """

    def __init__(self, catalog: MapCatalog, pathfinder: PathFinder, cfg: Config) -> None:
        self.catalog = catalog
        self.pathfinder = pathfinder
        self.search_cfg = cfg.search

    # ------------------------------------------------------------------
    # Frame update
    # ------------------------------------------------------------------
    def _apply_reload(self) -> None:
        if self.catalog.map_reload:
            self.pathfinder.initialize(self.catalog.reload_map())

    def update(self, elapsed: float) -> None:
        self._apply_reload()
        self.pathfinder.update(elapsed)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def start(self) -> SearchStatus:
        """Load any pending map and make sure the search is running."""

        self._apply_reload()
        if self.pathfinder.search_status is SearchStatus.STOPPED:
            self.pathfinder.toggle_searching()
        return self.pathfinder.search_status

    def toggle_searching(self) -> SearchStatus:
        return self.pathfinder.toggle_searching()

    def next_search_type(self) -> SearchMethod:
        return self.pathfinder.next_search_type()

    def next_map(self) -> int:
        return self.catalog.cycle_map()

    def restart(self) -> None:
        """Reload the current map on the next update."""
        self.catalog.map_reload = True

    @property
    def time_step(self) -> float:
        return self.pathfinder.time_step

    def adjust_time_step(self, delta: float) -> float:
        """Nudge the seconds-per-step by ``delta`` within the configured range."""

        self.pathfinder.time_step = clamp_time_step(
            self.pathfinder.time_step + delta, self.search_cfg
        )
        return self.pathfinder.time_step

    def slower(self) -> float:
        return self.adjust_time_step(self.search_cfg.time_step_increment)

    def faster(self) -> float:
        return self.adjust_time_step(-self.search_cfg.time_step_increment)


def bootstrap(cfg: Config | None = None) -> SearchSession:
    """Build a :class:`SearchSession` from ``cfg`` (defaults to ``CONFIG``)."""

    cfg = cfg or CONFIG
    method = SearchMethod.from_name(cfg.search.method)
    pathfinder = PathFinder(
        time_step=clamp_time_step(cfg.search.time_step, cfg.search),
        search_method=method,
    )
    catalog = MapCatalog.from_config(cfg)
    logger.info(
        "[Bootstrap] %d maps, method %s, %.2fs per step",
        len(catalog),
        method.name,
        pathfinder.time_step,
    )
    return SearchSession(catalog, pathfinder, cfg)


def run_search(
    session: SearchSession,
    clock: Any,
    fps: float = 60.0,
    max_frames: int = 100000,
) -> Dict[str, Any]:
    """Drive ``session`` frame by frame until the search finishes.

    ``clock`` is anything with a ``tick(fps)`` method returning elapsed
    milliseconds, normally a :class:`pygame.time.Clock`.
    """

    session.start()
    pf = session.pathfinder
    frames = 0
    started = time.perf_counter()
    while frames < max_frames and not pf.search_status.is_terminal:
        elapsed = clock.tick(fps) / 1000.0
        record_frame(elapsed)
        session.update(elapsed)
        frames += 1

    if not pf.search_status.is_terminal:
        logger.warning("Search still %s after %d frames.", pf.search_status.name, frames)

    path = pf.final_path()
    grid = pf.grid_map
    return {
        "map": grid.name if grid is not None else "",
        "method": pf.search_method.value,
        "status": pf.search_status.value,
        "steps": pf.total_search_steps,
        "path_length": max(len(path) - 1, 0),
        "frames": frames,
        "seconds": round(time.perf_counter() - started, 3),
    }


def main(config_path: str | Path = CONFIG_PATH) -> List[Dict[str, Any]]:
    """Run every search method on every configured map and log a summary."""

    cfg = load_config(Path(config_path))
    configure_logging(cfg.logging)
    session = bootstrap(cfg)

    pygame.init()
    clock = pygame.time.Clock()
    results: List[Dict[str, Any]] = []
    try:
        for _ in range(len(session.catalog)):
            for _ in range(len(SearchMethod)):
                summary = run_search(session, clock, cfg.host.fps, cfg.host.max_frames)
                results.append(summary)
                logger.info(
                    "%-12s %-13s %-10s steps=%-4d path=%d",
                    summary["map"],
                    summary["method"],
                    summary["status"],
                    summary["steps"],
                    summary["path_length"],
                )
                session.next_search_type()
                session.restart()
            session.next_map()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        if pygame.get_init():
            pygame.quit()

    snapshot_path = (cfg.paths or {}).get("snapshot")
    if snapshot_path:
        dump_state(session.pathfinder, snapshot_path)
        logger.info("Search state written to %s", snapshot_path)
    return results


if __name__ == "__main__":
    main()
