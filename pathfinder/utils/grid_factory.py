"""Grid factory for building walkability grids and carving perfect mazes."""

from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..domain.errors import InvalidDimensionsError
from ..domain.types import MazeResult, Point, WALKABLE, WALL
from .rng import SeededRNG

# Cell-space moves in N, E, S, W order
_CELL_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def create_empty_grid(width: int, height: int, walls: Iterable[Point] = ()) -> List[List[int]]:
    """
    Create an open grid of the given size, optionally with walls.

    Args:
        width: Grid width (must be > 0)
        height: Grid height (must be > 0)
        walls: Coordinates to mark as walls; out-of-range ones are ignored

    Returns:
        Rows of cell codes

    Raises:
        ValueError: If width or height <= 0
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    cells = np.full((height, width), WALKABLE, dtype=np.int8)
    for x, y in walls:
        if 0 <= x < width and 0 <= y < height:
            cells[y, x] = WALL
    return cells.tolist()


def generate_maze(width: int, height: int, seed: Optional[int] = None) -> MazeResult:
    """
    Generate a perfect maze using the recursive backtracker algorithm.

    The maze has width x height cells. Cell (cx, cy) maps to grid coordinate
    (2*cx+1, 2*cy+1) in an output grid of (2*width+1) x (2*height+1) that
    starts out as solid wall.

    Args:
        width: Number of cells across (minimum 2)
        height: Number of cells down (minimum 2)
        seed: Random seed for reproducibility; time-seeded when None

    Returns:
        MazeResult with the output grid and the echoed seed

    Raises:
        InvalidDimensionsError: If width or height is less than 2
    """
    if width < 2 or height < 2:
        raise InvalidDimensionsError(details=f"got {width}x{height}")

    rng = SeededRNG(seed)
    cells = np.full((height * 2 + 1, width * 2 + 1), WALL, dtype=np.int8)
    _carve_recursive_backtracker(cells, width, height, rng)

    return MazeResult(
        width=width * 2 + 1,
        height=height * 2 + 1,
        grid=cells.tolist(),
        seed=seed,
    )


def _carve_recursive_backtracker(cells: np.ndarray, width: int, height: int, rng: SeededRNG) -> None:
    """
    Carve passages with randomized depth-first search from cell (0, 0).
    Every cell is visited exactly once, so the result is a spanning tree.
    """
    visited = np.zeros((height, width), dtype=bool)

    stack = [(0, 0)]
    visited[0, 0] = True
    cells[1, 1] = WALKABLE

    while stack:
        cx, cy = stack[-1]
        neighbors = _unvisited_neighbors(cx, cy, visited, width, height)

        if not neighbors:
            # Backtrack
            stack.pop()
            continue

        nx, ny = neighbors[rng.randrange(len(neighbors))]

        # Open the neighbour cell and the wall between the two cells
        cells[ny * 2 + 1, nx * 2 + 1] = WALKABLE
        cells[cy + ny + 1, cx + nx + 1] = WALKABLE

        visited[ny, nx] = True
        stack.append((nx, ny))


def _unvisited_neighbors(cx: int, cy: int, visited: np.ndarray,
                         width: int, height: int) -> List[Tuple[int, int]]:
    """Get unvisited cell-space neighbours in N, E, S, W order."""
    neighbors = []
    for dx, dy in _CELL_DIRECTIONS:
        nx, ny = cx + dx, cy + dy
        if 0 <= nx < width and 0 <= ny < height and not visited[ny, nx]:
            neighbors.append((nx, ny))
    return neighbors
