"""Ordered set of maps the host can cycle through."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List

from .grid_map import GridMap

logger = logging.getLogger(__name__)


class MapCatalog:
    """Hold map definitions and build the currently selected one on demand.

    ``map_reload`` starts out ``True`` so the first host update loads map 0.
    """

    def __init__(self, maps: Iterable[GridMap | dict[str, Any]]) -> None:
        self._maps: List[GridMap] = [
            m if isinstance(m, GridMap) else GridMap.from_dict(m) for m in maps
        ]
        if not self._maps:
            raise ValueError("map catalog needs at least one map")
        self.current_index: int = 0
        self.map_reload: bool = True

    @classmethod
    def from_config(cls, cfg: Any) -> "MapCatalog":
        """Build a catalog from ``cfg.maps``."""

        return cls(cfg.maps)

    def __len__(self) -> int:
        return len(self._maps)

    def __iter__(self) -> Iterator[GridMap]:
        return iter(self._maps)

    @property
    def current(self) -> GridMap:
        return self._maps[self.current_index]

    def cycle_map(self) -> int:
        """Select the next map (wrapping) and flag it for reload."""

        self.current_index = (self.current_index + 1) % len(self._maps)
        self.map_reload = True
        return self.current_index

    def reload_map(self) -> GridMap:
        """Return the selected map and clear the reload flag."""

        grid = self.current
        self.map_reload = False
        logger.info("Loaded map %d/%d: %r", self.current_index + 1, len(self._maps), grid)
        return grid


__all__ = ["MapCatalog"]
