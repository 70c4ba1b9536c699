"""Incremental pathfinder that advances one search step per time budget."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core.grid_map import GridMap
from ..utils.observer import log_event
from .nodes import Coord, SearchMethod, SearchNode, SearchStatus
from .policies import select_node

logger = logging.getLogger(__name__)

DEFAULT_TIME_STEP = 0.5


class PathFinder:
    """Search a :class:`GridMap` for a route from its start to its exit.

    The open list (frontier), closed list (visited) and predecessor map are
    owned by the pathfinder. Once a tile has been added to either list it is
    never added again, so no node is ever relaxed to a cheaper route.
    """

    def __init__(
        self,
        time_step: float = DEFAULT_TIME_STEP,
        search_method: SearchMethod = SearchMethod.BEST_FIRST,
        event_log: List[Dict[str, Any]] | None = None,
    ) -> None:
        self.time_step: float = time_step
        self.event_log = event_log if event_log is not None else []
        self._search_method = search_method
        self._search_status = SearchStatus.STOPPED
        self._map: Optional[GridMap] = None
        # Insertion-ordered; keyed by position for O(1) membership tests.
        self._open: Dict[Coord, SearchNode] = {}
        self._closed: Dict[Coord, SearchNode] = {}
        self._paths: Dict[Coord, Coord] = {}
        self._total_search_steps = 0
        self._time_since_last_step = 0.0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def search_status(self) -> SearchStatus:
        return self._search_status

    @property
    def search_method(self) -> SearchMethod:
        return self._search_method

    @property
    def total_search_steps(self) -> int:
        """How many search steps have run on this map since the last reset."""
        return self._total_search_steps

    @property
    def grid_map(self) -> Optional[GridMap]:
        return self._map

    @property
    def is_searching(self) -> bool:
        return self._search_status is SearchStatus.SEARCHING

    @is_searching.setter
    def is_searching(self, _value: bool) -> None:
        # Any assignment flips the state, mirroring ``toggle_searching``.
        self.toggle_searching()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self, grid_map: GridMap | None) -> None:
        """Bind the pathfinder to ``grid_map`` and reset the search."""

        if grid_map is None:
            raise ValueError("PathFinder.initialize() requires a map")
        self._map = grid_map
        self.reset()

    def reset(self) -> None:
        """Clear all search state and seed the open list with the start tile."""

        if self._map is None:
            raise RuntimeError("PathFinder has no map; call initialize() first")
        self._search_status = SearchStatus.STOPPED
        self._total_search_steps = 0
        self._time_since_last_step = 0.0
        self._open.clear()
        self._closed.clear()
        self._paths.clear()
        start = self._map.start
        self._open[start] = SearchNode(start, self._map.heuristic_distance(start), 0)
        logger.info(
            "Search reset on %r using %s", self._map, self._search_method.name
        )

    def toggle_searching(self) -> SearchStatus:
        """Start or pause the search. Finished searches need :meth:`reset`."""

        if self._search_status is SearchStatus.SEARCHING:
            self._search_status = SearchStatus.STOPPED
        elif self._search_status is SearchStatus.STOPPED:
            self._search_status = SearchStatus.SEARCHING
        return self._search_status

    def next_search_type(self) -> SearchMethod:
        """Cycle to the next search method."""

        self._search_method = self._search_method.next()
        logger.debug("Search method set to %s", self._search_method.name)
        return self._search_method

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------
    def update(self, elapsed: float) -> None:
        """Advance the search clock by ``elapsed`` seconds.

        Runs at most one search step per call, however large ``elapsed`` is.
        """

        if self._search_status is not SearchStatus.SEARCHING:
            return
        self._time_since_last_step += elapsed
        if self._time_since_last_step >= self.time_step:
            self.do_search_step()
            self._time_since_last_step = 0.0

    def do_search_step(self) -> SearchStatus:
        """Visit one node: expand its neighbours onto the open list and close it."""

        if self._map is None:
            raise RuntimeError("PathFinder has no map; call initialize() first")
        if self._search_status.is_terminal:
            return self._search_status

        current = select_node(self._search_method, self._open.values())
        if current is None:
            self._finish(SearchStatus.NO_PATH)
            return self._search_status
        self._total_search_steps += 1

        current_pos = current.position
        for point in self._map.open_neighbors(current_pos):
            if point in self._open or point in self._closed:
                continue
            self._open[point] = SearchNode(
                point,
                self._map.heuristic_distance(point),
                current.distance_traveled + 1,
            )
            self._paths[point] = current_pos

        logger.debug(
            "Step %d (%s): visited %s, open=%d closed=%d",
            self._total_search_steps,
            self._search_method.name,
            current_pos,
            len(self._open) - 1,
            len(self._closed) + 1,
        )

        if current_pos == self._map.goal:
            self._finish(SearchStatus.PATH_FOUND)

        del self._open[current_pos]
        self._closed[current_pos] = current
        return self._search_status

    def _finish(self, status: SearchStatus) -> None:
        self._search_status = status
        logger.info(
            "Search finished with %s after %d steps using %s",
            status.name,
            self._total_search_steps,
            self._search_method.name,
        )
        log_event(
            status.value,
            {
                "method": self._search_method.value,
                "steps": self._total_search_steps,
                "map": self._map.name if self._map is not None else "",
            },
            self.event_log,
        )

    # ------------------------------------------------------------------
    # Results and inspection
    # ------------------------------------------------------------------
    def final_path(self) -> List[Coord]:
        """Return the tiles from start to exit, or ``[]`` if no path is known."""

        path: List[Coord] = []
        if self._search_status is not SearchStatus.PATH_FOUND or self._map is None:
            return path
        current = self._map.goal
        path.append(current)
        while current in self._paths:
            current = self._paths[current]
            path.append(current)
        path.reverse()
        return path

    def open_nodes(self) -> List[SearchNode]:
        return list(self._open.values())

    def closed_nodes(self) -> List[SearchNode]:
        return list(self._closed.values())

    def open_positions(self) -> List[Coord]:
        """Snapshot of the open list coordinates in insertion order."""
        return list(self._open)

    def closed_positions(self) -> List[Coord]:
        """Snapshot of the closed list coordinates."""
        return list(self._closed)

    def predecessors(self) -> Dict[Coord, Coord]:
        return dict(self._paths)

    def snapshot(self) -> Dict[str, Any]:
        """Return the search state as JSON-friendly data."""

        return {
            "map": self._map.name if self._map is not None else None,
            "status": self._search_status.value,
            "method": self._search_method.value,
            "time_step": self.time_step,
            "total_search_steps": self._total_search_steps,
            "open": [list(p) for p in self._open],
            "closed": [list(p) for p in self._closed],
            "predecessors": [[list(k), list(v)] for k, v in self._paths.items()],
            "path": [list(p) for p in self.final_path()],
        }


__all__ = ["PathFinder", "DEFAULT_TIME_STEP"]
