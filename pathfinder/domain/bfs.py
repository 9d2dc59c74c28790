"""Breadth-first search over a walkability grid."""

from collections import deque
from typing import Dict

from .neighbors import get_neighbors, validate_endpoints
from .path import path_length, reconstruct_path
from .types import Grid, Point, SearchResult


def bfs(grid: Grid, start: Point, goal: Point) -> SearchResult:
    """
    Run breadth-first search from start to goal.

    Neighbours are marked visited when enqueued, so each cell enters the
    queue at most once and the first path to the goal is a shortest one.

    Args:
        grid: Rows of cell codes (0 = open, 1 = wall)
        start: Starting point
        goal: Goal point

    Returns:
        SearchResult with path, expansion order and statistics

    Raises:
        OutOfBoundsError: If start or goal is outside the grid
        BlockedError: If start or goal is a wall
    """
    start, goal = Point(*start), Point(*goal)
    validate_endpoints(grid, start, goal)

    queue = deque([start])
    visited = {start}
    parents: Dict[Point, Point] = {}
    result = SearchResult()

    while queue:
        current = queue.popleft()
        result.visited_order.append(current)

        if current == goal:
            result.found = True
            break

        for neighbor in get_neighbors(grid, current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            parents[neighbor] = current
            queue.append(neighbor)

    result.expanded_nodes = len(result.visited_order)
    if result.found:
        result.path = reconstruct_path(parents, start, goal)
        result.path_length = path_length(result.path)
    return result
