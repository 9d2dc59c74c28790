"""Depth-first search over a walkability grid."""

from typing import Dict

from .neighbors import get_neighbors, validate_endpoints
from .path import path_length, reconstruct_path
from .types import Grid, Point, SearchResult


def dfs(grid: Grid, start: Point, goal: Point) -> SearchResult:
    """
    Run depth-first search from start to goal using an explicit stack.

    Nodes are marked visited when pushed, so no point is stacked twice.
    Finds a path if one exists, not necessarily a shortest one.
    """
    start, goal = Point(*start), Point(*goal)
    validate_endpoints(grid, start, goal)

    stack = [start]
    visited = {start}
    parents: Dict[Point, Point] = {}
    result = SearchResult()

    while stack:
        current = stack.pop()
        result.visited_order.append(current)

        if current == goal:
            result.found = True
            break

        for neighbor in get_neighbors(grid, current):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            parents[neighbor] = current
            stack.append(neighbor)

    result.expanded_nodes = len(result.visited_order)
    if result.found:
        result.path = reconstruct_path(parents, start, goal)
        result.path_length = path_length(result.path)
    return result
