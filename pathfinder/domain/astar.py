"""A* search over a walkability grid."""

import math
from typing import Dict, Set

from .heuristics import manhattan_distance
from .neighbors import get_neighbors, validate_endpoints
from .path import path_length, reconstruct_path
from .priority_queue import PriorityQueue
from .types import Grid, Point, SearchResult


def astar(grid: Grid, start: Point, goal: Point) -> SearchResult:
    """
    Run A* search from start to goal with the Manhattan heuristic.

    The open set may hold several entries for one point. Only the first pop
    of a point is expanded; later pops of a closed point are skipped.

    Args:
        grid: Rows of cell codes (0 = open, 1 = wall)
        start: Starting point
        goal: Goal point

    Returns:
        SearchResult with a shortest path when one exists

    Raises:
        OutOfBoundsError: If start or goal is outside the grid
        BlockedError: If start or goal is a wall
    """
    start, goal = Point(*start), Point(*goal)
    validate_endpoints(grid, start, goal)

    open_set = PriorityQueue()
    open_set.push(start, 0.0)

    g_score: Dict[Point, float] = {start: 0.0}
    parents: Dict[Point, Point] = {}
    closed_set: Set[Point] = set()
    result = SearchResult()

    while not open_set.is_empty():
        current = open_set.pop().point

        if current in closed_set:
            continue

        closed_set.add(current)
        result.visited_order.append(current)

        if current == goal:
            result.found = True
            break

        for neighbor in get_neighbors(grid, current):
            if neighbor in closed_set:
                continue

            tentative_g = g_score[current] + 1
            if tentative_g >= g_score.get(neighbor, math.inf):
                continue

            parents[neighbor] = current
            g_score[neighbor] = tentative_g
            open_set.push(neighbor, tentative_g + manhattan_distance(neighbor, goal))

    result.expanded_nodes = len(result.visited_order)
    if result.found:
        result.path = reconstruct_path(parents, start, goal)
        result.path_length = path_length(result.path)
    return result
