import pytest

from grid_search.search.nodes import SearchMethod, SearchNode
from grid_search.search.policies import (
    SELECTION_POLICIES,
    select_a_star,
    select_best_first,
    select_breadth_first,
    select_node,
)


def N(pos, to_goal, traveled):
    return SearchNode(pos, to_goal, traveled)


@pytest.mark.parametrize("policy", [select_breadth_first, select_best_first, select_a_star])
def test_empty_frontier_yields_none(policy):
    assert policy([]) is None
    assert policy(iter(())) is None


def test_every_method_has_a_policy():
    assert set(SELECTION_POLICIES) == set(SearchMethod)


def test_breadth_first_takes_oldest():
    frontier = [N((3, 3), 9, 9), N((0, 0), 0, 0)]
    assert select_breadth_first(frontier).position == (3, 3)


def test_best_first_picks_closest_to_goal():
    frontier = [N((0, 0), 4, 0), N((1, 0), 1, 10), N((2, 0), 3, 1)]
    assert select_best_first(frontier).position == (1, 0)


def test_best_first_tie_keeps_earliest():
    frontier = [N((0, 0), 3, 0), N((1, 0), 2, 1), N((2, 0), 2, 5)]
    assert select_best_first(frontier).position == (1, 0)


def test_a_star_picks_lowest_total():
    frontier = [N((0, 0), 1, 6), N((1, 0), 5, 1), N((2, 0), 2, 6)]
    assert select_a_star(frontier).position == (1, 0)


def test_a_star_tie_prefers_longer_travel():
    frontier = [N((0, 0), 4, 2), N((1, 0), 2, 4), N((2, 0), 3, 3)]
    assert select_a_star(frontier).position == (1, 0)


def test_a_star_full_tie_keeps_earliest():
    frontier = [N((0, 0), 2, 2), N((1, 0), 2, 2)]
    assert select_a_star(frontier).position == (0, 0)


def test_a_star_differs_from_best_first():
    # Best-first chases the small estimate, A* accounts for travel so far.
    frontier = [N((0, 0), 2, 1), N((1, 0), 1, 5)]
    assert select_best_first(frontier).position == (1, 0)
    assert select_a_star(frontier).position == (0, 0)


def test_select_node_dispatches():
    frontier = [N((0, 0), 5, 0), N((1, 0), 1, 9), N((2, 0), 2, 1)]
    assert select_node(SearchMethod.BREADTH_FIRST, frontier).position == (0, 0)
    assert select_node(SearchMethod.BEST_FIRST, frontier).position == (1, 0)
    assert select_node(SearchMethod.A_STAR, frontier).position == (2, 0)
