"""Runtime observability helpers."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path
from typing import Any, Deque, Dict, List

# Rolling history of the last 1000 frame durations in seconds
_FRAME_HISTORY_LEN = 1000
_frame_durations: Deque[float] = deque(maxlen=_FRAME_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def record_frame(duration: float) -> None:
    """Append a frame ``duration`` in seconds to the rolling history."""

    _frame_durations.append(duration)


def average_fps() -> float:
    """Return the average frame rate over the recorded history (0 if empty)."""

    if not _frame_durations:
        return 0.0
    avg = sum(_frame_durations) / len(_frame_durations)
    return 1.0 / avg if avg > 0 else float("inf")


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


def dump_state(pathfinder: Any, path: str | Path) -> None:
    """Write the search state of ``pathfinder`` to ``path`` as JSON."""

    data = pathfinder.snapshot()
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2)


__all__ = [
    "record_frame",
    "average_fps",
    "log_event",
    "dump_state",
    "_frame_durations",
    "_events",
]
