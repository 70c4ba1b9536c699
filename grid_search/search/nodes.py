"""Search node value type and the search state enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


Coord = Tuple[int, int]  # (column, row)


@dataclass(frozen=True, slots=True)
class SearchNode:
    """One node in the search space.

    ``distance_to_goal`` is the heuristic estimate taken when the node was
    discovered. ``distance_traveled`` counts edges from the start.
    """

    position: Coord
    distance_to_goal: int
    distance_traveled: int

    @property
    def estimated_total(self) -> int:
        """Optimistic estimate of the full path length through this node."""

        return self.distance_traveled + self.distance_to_goal


class SearchStatus(Enum):
    """Whether the search is stopped, running, or finished."""

    STOPPED = "stopped"
    SEARCHING = "searching"
    NO_PATH = "no_path"
    PATH_FOUND = "path_found"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.NO_PATH, SearchStatus.PATH_FOUND)


class SearchMethod(Enum):
    """Node expansion strategy. Declaration order is the cycling order."""

    BREADTH_FIRST = "breadth_first"
    BEST_FIRST = "best_first"
    A_STAR = "a_star"

    def next(self) -> "SearchMethod":
        """Return the following method, wrapping back to the first."""

        members = list(SearchMethod)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def from_name(cls, name: str) -> "SearchMethod":
        """Parse ``name`` (``"a_star"``, ``"AStar"``, ``"A_STAR"`` ...)."""

        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        aliases = {"astar": "a_star", "breadthfirst": "breadth_first", "bestfirst": "best_first"}
        key = aliases.get(key, key)
        for method in cls:
            if method.value == key:
                return method
        raise ValueError(f"Unknown search method: {name}")


__all__ = ["Coord", "SearchNode", "SearchStatus", "SearchMethod"]
