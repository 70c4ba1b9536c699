"""Shared search helpers for the test suite."""

from collections import deque
from typing import Dict, Optional, Tuple

from grid_search.core.grid_map import GridMap
from grid_search.search.nodes import SearchMethod
from grid_search.search.pathfinder import PathFinder


Coord = Tuple[int, int]

# Goal in the middle of a ring of barriers; both ways round are 10 steps.
RING_LAYOUT = """
.....
.###.
S#G..
.###.
.....
"""

SEALED_3X3 = """
S..
..#
.#G
"""


def make_pathfinder(grid: GridMap, method: SearchMethod) -> PathFinder:
    pf = PathFinder(time_step=0.0, search_method=method)
    pf.initialize(grid)
    return pf


def run_to_end(pf: PathFinder, limit: Optional[int] = None) -> int:
    """Call ``do_search_step`` until the search finishes; return the call count."""

    grid = pf.grid_map
    limit = limit if limit is not None else grid.open_cell_count() + 1
    calls = 0
    while not pf.search_status.is_terminal and calls < limit:
        pf.do_search_step()
        calls += 1
    return calls


def reference_distance(grid: GridMap) -> Optional[int]:
    """Plain queue-based BFS edge count from start to goal."""

    dist: Dict[Coord, int] = {grid.start: 0}
    queue = deque([grid.start])
    while queue:
        cell = queue.popleft()
        if cell == grid.goal:
            return dist[cell]
        for n in grid.open_neighbors(cell):
            if n not in dist:
                dist[n] = dist[cell] + 1
                queue.append(n)
    return None


def assert_valid_path(grid: GridMap, path) -> None:
    assert path[0] == grid.start
    assert path[-1] == grid.goal
    assert all(grid.is_open(c) for c in path)
    assert all(GridMap.step_distance(a, b) == 1 for a, b in zip(path, path[1:]))
    assert len(set(path)) == len(path)
