"""Path reconstruction and validation utilities."""

from typing import Dict, List

from .neighbors import in_bounds, is_walkable
from .types import Grid, Point


def reconstruct_path(parents: Dict[Point, Point], start: Point, goal: Point) -> List[Point]:
    """
    Reconstruct the path from goal back to start using the parent map.
    Returns the path from start to goal (reversed from parent chain).
    """
    path = []
    current = goal

    while True:
        path.append(current)
        if current == start:
            break
        parent = parents.get(current)
        if parent is None:
            break
        current = parent

    path.reverse()
    return path


def path_length(path: List[Point]) -> int:
    """Number of edges in a path; 0 for empty or single-node paths."""
    if len(path) <= 1:
        return 0
    return len(path) - 1


def validate_path(path: List[Point], grid: Grid) -> bool:
    """
    Validate that a path is walkable and connected.
    Returns True if every point is an open in-bounds cell and every step
    moves to a 4-adjacent cell.
    """
    if not path:
        return False

    for p in path:
        if not in_bounds(grid, p) or not is_walkable(grid, p):
            return False

    for i in range(1, len(path)):
        dx = abs(path[i].x - path[i - 1].x)
        dy = abs(path[i].y - path[i - 1].y)
        if dx + dy != 1:
            return False

    return True
