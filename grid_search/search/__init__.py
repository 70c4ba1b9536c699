"""search package."""

from .nodes import SearchMethod, SearchNode, SearchStatus
from .pathfinder import PathFinder

__all__ = ["PathFinder", "SearchMethod", "SearchNode", "SearchStatus"]
