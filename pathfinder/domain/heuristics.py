"""Heuristic functions for A* search."""

from .types import Point


def manhattan_distance(start: Point, target: Point) -> float:
    """
    Manhattan (L1) distance heuristic.
    Admissible and consistent for 4-directional unit-cost movement.
    """
    return float(abs(start[0] - target[0]) + abs(start[1] - target[1]))
