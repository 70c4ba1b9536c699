# tests/conftest.py
import pytest

from grid_search.core.grid_map import GridMap
from grid_search.utils import observer

from tests.helpers import RING_LAYOUT, SEALED_3X3


@pytest.fixture
def open_5x5() -> GridMap:
    return GridMap(5, 5, (0, 0), (4, 4))


@pytest.fixture
def sealed_3x3() -> GridMap:
    return GridMap.from_layout(SEALED_3X3, name="sealed")


@pytest.fixture
def ring_map() -> GridMap:
    return GridMap.from_layout(RING_LAYOUT, name="ring")


@pytest.fixture(autouse=True)
def clear_observer_buffers():
    observer._events.clear()
    observer._frame_durations.clear()
    yield
    observer._events.clear()
    observer._frame_durations.clear()
