"""Frontier selection policies, one pure function per :class:`SearchMethod`.

Each policy scans the frontier in insertion order and returns the node to
expand next, or ``None`` when the frontier is empty. None of them look at
the visited set.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from .nodes import SearchMethod, SearchNode


Policy = Callable[[Iterable[SearchNode]], Optional[SearchNode]]


def select_breadth_first(frontier: Iterable[SearchNode]) -> Optional[SearchNode]:
    """Return the oldest node in ``frontier`` (FIFO order)."""

    for node in frontier:
        return node
    return None


def select_best_first(frontier: Iterable[SearchNode]) -> Optional[SearchNode]:
    """Return the node closest to the goal regardless of how far it travelled.

    Only a strictly smaller estimate replaces the current choice, so the
    earliest of several equally close nodes wins.
    """

    best: Optional[SearchNode] = None
    for node in frontier:
        if best is None or node.distance_to_goal < best.distance_to_goal:
            best = node
    return best


def select_a_star(frontier: Iterable[SearchNode]) -> Optional[SearchNode]:
    """Return the node with the lowest ``distance_traveled + distance_to_goal``.

    Among equal estimates the node that has travelled further wins; nodes
    that tie on both keep the earliest one.
    """

    best: Optional[SearchNode] = None
    for node in frontier:
        if best is None:
            best = node
            continue
        f_node = node.estimated_total
        f_best = best.estimated_total
        if f_node < f_best:
            best = node
        elif f_node == f_best and node.distance_traveled > best.distance_traveled:
            best = node
    return best


SELECTION_POLICIES: Dict[SearchMethod, Policy] = {
    SearchMethod.BREADTH_FIRST: select_breadth_first,
    SearchMethod.BEST_FIRST: select_best_first,
    SearchMethod.A_STAR: select_a_star,
}


def select_node(
    method: SearchMethod, frontier: Iterable[SearchNode]
) -> Optional[SearchNode]:
    """Dispatch to the policy registered for ``method``."""

    return SELECTION_POLICIES[method](frontier)


__all__ = [
    "Policy",
    "SELECTION_POLICIES",
    "select_breadth_first",
    "select_best_first",
    "select_a_star",
    "select_node",
]
