"""Rectangular tile map searched by the pathfinder."""

from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, Iterable, List, Sequence, Tuple


Coord = Tuple[int, int]  # (column, row)

_LAYOUT_GLYPHS = {".": "empty", "#": "barrier", "S": "start", "G": "exit", "E": "exit"}


class TileType(Enum):
    """Contents of a single map tile."""

    EMPTY = "."
    BARRIER = "#"
    START = "S"
    EXIT = "G"


def _coord(value: Any) -> Coord:
    x, y = value
    return (int(x), int(y))


class GridMap:
    """Immutable grid of open and blocked tiles with a start and an exit.

    Movement is 4-directional; :meth:`heuristic_distance` is the Manhattan
    distance to the exit, which never overestimates on this grid.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        start: Coord,
        goal: Coord,
        barriers: Iterable[Coord] = (),
        name: str = "",
    ) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError(f"map dimensions must be positive, got {columns}x{rows}")
        self.columns = int(columns)
        self.rows = int(rows)
        self.name = name
        self._start = _coord(start)
        self._goal = _coord(goal)

        barrier_set = set()
        for cell in barriers:
            cell = _coord(cell)
            if not self.is_valid_coordinate(cell):
                raise ValueError(f"barrier {cell} is outside the {columns}x{rows} map")
            barrier_set.add(cell)
        self._barriers: FrozenSet[Coord] = frozenset(barrier_set)

        for label, cell in (("start", self._start), ("goal", self._goal)):
            if not self.is_valid_coordinate(cell):
                raise ValueError(f"{label} {cell} is outside the {columns}x{rows} map")
            if cell in self._barriers:
                raise ValueError(f"{label} {cell} is placed on a barrier")

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GridMap":
        """Build a map from a ``{columns, rows, start, end, barriers}`` record."""

        try:
            columns = int(data["columns"])
            rows = int(data["rows"])
            start = data["start"]
            goal = data["end"] if "end" in data else data["goal"]
        except KeyError as exc:
            raise ValueError(f"map data is missing {exc.args[0]!r}") from exc
        return cls(
            columns,
            rows,
            start,
            goal,
            barriers=[_coord(b) for b in data.get("barriers") or []],
            name=str(data.get("name", "")),
        )

    @classmethod
    def from_layout(cls, lines: str | Sequence[str], name: str = "") -> "GridMap":
        """Parse an ASCII layout.

        ``.`` is open, ``#`` is a barrier, ``S`` the start and ``G`` (or
        ``E``) the exit. Rows are read top to bottom as row 0, 1, ...
        """

        if isinstance(lines, str):
            lines = [ln.strip() for ln in lines.strip().splitlines()]
        rows = [ln for ln in lines if ln]
        if not rows:
            raise ValueError("layout is empty")
        width = len(rows[0])
        start = goal = None
        barriers: List[Coord] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"layout row {y} has width {len(row)}, expected {width}")
            for x, glyph in enumerate(row):
                kind = _LAYOUT_GLYPHS.get(glyph)
                if kind is None:
                    raise ValueError(f"unknown layout glyph {glyph!r} at {(x, y)}")
                if kind == "barrier":
                    barriers.append((x, y))
                elif kind == "start":
                    start = (x, y)
                elif kind == "exit":
                    goal = (x, y)
        if start is None or goal is None:
            raise ValueError("layout needs both a start (S) and an exit (G)")
        return cls(width, len(rows), start, goal, barriers, name=name)

    def to_layout(self) -> List[str]:
        """Render the map back into the :meth:`from_layout` format."""

        return [
            "".join(self.tile_at((x, y)).value for x in range(self.columns))
            for y in range(self.rows)
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def start(self) -> Coord:
        return self._start

    @property
    def goal(self) -> Coord:
        return self._goal

    @property
    def barriers(self) -> FrozenSet[Coord]:
        return self._barriers

    def is_valid_coordinate(self, c: Coord) -> bool:
        """Return ``True`` if ``c`` lies inside the map."""
        x, y = c
        return 0 <= x < self.columns and 0 <= y < self.rows

    def is_open(self, c: Coord) -> bool:
        """Return ``True`` if ``c`` is inside the map and not a barrier."""
        return self.is_valid_coordinate(c) and c not in self._barriers

    def tile_at(self, c: Coord) -> TileType:
        if not self.is_valid_coordinate(c):
            raise ValueError(f"{c} is outside the {self.columns}x{self.rows} map")
        if c in self._barriers:
            return TileType.BARRIER
        if c == self._start:
            return TileType.START
        if c == self._goal:
            return TileType.EXIT
        return TileType.EMPTY

    def open_neighbors(self, c: Coord) -> List[Coord]:
        """Return the open cardinal neighbours of ``c``.

        Order is below, above, right, left (row grows downwards).
        """

        x, y = c
        candidates = [(x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)]
        return [n for n in candidates if self.is_open(n)]

    @staticmethod
    def step_distance(a: Coord, b: Coord) -> int:
        """Manhattan distance between two cells."""
        return abs(a[0] - b[0]) + abs(a[1] - b[1])

    def heuristic_distance(self, c: Coord) -> int:
        """Manhattan distance from ``c`` to the exit."""
        return self.step_distance(c, self._goal)

    def open_cell_count(self) -> int:
        return self.columns * self.rows - len(self._barriers)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        label = f" {self.name!r}" if self.name else ""
        return (
            f"<GridMap{label} {self.columns}x{self.rows} "
            f"start={self._start} goal={self._goal} barriers={len(self._barriers)}>"
        )


__all__ = ["Coord", "GridMap", "TileType"]
