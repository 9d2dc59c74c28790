"""Grid predicates and four-neighbour expansion shared by all search algorithms."""

from typing import List, Tuple

from .errors import BlockedError, OutOfBoundsError
from .types import Grid, Point, WALKABLE

# Expansion order: North, East, South, West. Fixes tie-breaking for every solver.
DIRECTIONS: Tuple[Point, ...] = (
    Point(0, -1),
    Point(1, 0),
    Point(0, 1),
    Point(-1, 0),
)


def in_bounds(grid: Grid, p: Point) -> bool:
    """Check if a point lies inside the grid (row width taken from row p.y)."""
    if p.y < 0 or p.y >= len(grid):
        return False
    if p.x < 0 or p.x >= len(grid[p.y]):
        return False
    return True


def is_walkable(grid: Grid, p: Point) -> bool:
    """Check if the cell at p is open. Callers must check in_bounds first."""
    return grid[p.y][p.x] == WALKABLE


def get_neighbors(grid: Grid, p: Point) -> List[Point]:
    """
    Get the in-bounds, walkable neighbours of p in N, E, S, W order.
    """
    neighbors = []
    for d in DIRECTIONS:
        candidate = Point(p.x + d.x, p.y + d.y)
        if not in_bounds(grid, candidate):
            continue
        if not is_walkable(grid, candidate):
            continue
        neighbors.append(candidate)
    return neighbors


def grid_dimensions(grid: Grid) -> Tuple[int, int]:
    """Return (width, height); width is the length of the first row."""
    height = len(grid)
    width = len(grid[0]) if height > 0 else 0
    return width, height


def validate_endpoints(grid: Grid, start: Point, goal: Point) -> None:
    """
    Check search preconditions in order: bounds first, then walkability.

    Raises:
        OutOfBoundsError: If start or goal lies outside the grid
        BlockedError: If start or goal is a wall
    """
    for name, p in (("start", start), ("goal", goal)):
        if not in_bounds(grid, p):
            raise OutOfBoundsError(details=f"{name} ({p.x},{p.y}) is outside the grid")
    for name, p in (("start", start), ("goal", goal)):
        if not is_walkable(grid, p):
            raise BlockedError(details=f"{name} ({p.x},{p.y}) is a wall")
