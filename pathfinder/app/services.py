"""Service layer: request validation and logging around maze generation and search."""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..config import MAX_DIMENSION, MAX_GRID_CELLS
from ..domain.errors import InvalidDimensionsError, PathfinderError, ValidationError
from ..domain.types import Grid, MazeResult, Point, SearchResult, WALKABLE, WALL
from .simulation import MazeGenerator, SimulationRunner, select_solver

logger = logging.getLogger(__name__)


@dataclass
class SimulationOutcome:
    """A search result together with its run time."""
    result: SearchResult
    elapsed: float  # seconds

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


class MazeService:
    """Maze generation with service-level limits and logging."""

    def __init__(self, generator: Optional[MazeGenerator] = None,
                 max_dimension: int = MAX_DIMENSION):
        self.generator = generator or MazeGenerator()
        self.max_dimension = max_dimension

    def generate_maze(self, width: int, height: int, seed: Optional[int] = None,
                      cancel_event=None) -> MazeResult:
        logger.info("maze generation requested width=%s height=%s", width, height)

        try:
            self._validate(width, height)
        except PathfinderError as e:
            logger.warning("maze generation validation failed error=%r width=%s height=%s",
                           str(e), width, height)
            raise

        try:
            result = self.generator.generate(width, height, seed, cancel_event=cancel_event)
        except PathfinderError as e:
            logger.error("maze generation failed error=%r width=%s height=%s", str(e), width, height)
            raise

        logger.info("maze generation completed width=%s height=%s", result.width, result.height)
        return result

    def _validate(self, width: int, height: int) -> None:
        if width < 2 or height < 2:
            raise InvalidDimensionsError("dimensions must be at least 2x2",
                                         details=f"got {width}x{height}")
        if width > self.max_dimension or height > self.max_dimension:
            raise InvalidDimensionsError(
                f"dimensions must be at most {self.max_dimension}x{self.max_dimension}",
                details=f"got {width}x{height}",
            )


class SimulationService:
    """Search simulation with service-level validation and logging."""

    def __init__(self, runner: Optional[SimulationRunner] = None,
                 max_grid_cells: int = MAX_GRID_CELLS):
        self.runner = runner or SimulationRunner()
        self.max_grid_cells = max_grid_cells

    def run_simulation(self, algorithm: str, grid: Grid, start: Point, goal: Point,
                       cancel_event=None) -> SimulationOutcome:
        height = len(grid) if grid else 0
        width = len(grid[0]) if height else 0
        logger.info(
            "simulation requested algorithm=%s grid_width=%s grid_height=%s "
            "start_x=%s start_y=%s goal_x=%s goal_y=%s",
            algorithm, width, height, start[0], start[1], goal[0], goal[1],
        )

        try:
            self._validate(algorithm, grid)
        except PathfinderError as e:
            logger.warning("simulation validation failed error=%r algorithm=%s", str(e), algorithm)
            raise

        try:
            result, elapsed = self.runner.run(algorithm, grid, Point(*start), Point(*goal),
                                              cancel_event=cancel_event)
        except PathfinderError as e:
            logger.error("simulation failed error=%r algorithm=%s grid_width=%s grid_height=%s",
                         str(e), algorithm, width, height)
            raise

        outcome = SimulationOutcome(result=result, elapsed=elapsed)
        logger.info(
            "simulation completed algorithm=%s expanded_nodes=%s path_length=%s "
            "elapsed_ms=%.3f found=%s",
            algorithm, result.expanded_nodes, result.path_length, outcome.elapsed_ms, result.found,
        )
        return outcome

    def _validate(self, algorithm: str, grid: Grid) -> None:
        if not algorithm:
            raise ValidationError("algorithm is required")
        select_solver(algorithm)

        if not grid:
            raise ValidationError("grid must be non-empty")
        if not grid[0]:
            raise ValidationError("grid rows must be non-empty")

        width = len(grid[0])
        for i, row in enumerate(grid):
            if len(row) != width:
                raise ValidationError(
                    "grid has inconsistent dimensions",
                    details=f"row {i} has width {len(row)}, expected {width}",
                )

        size = width * len(grid)
        if size > self.max_grid_cells:
            raise ValidationError(f"grid must have at most {self.max_grid_cells} cells",
                                  details=f"got {size}")

        try:
            cells = np.asarray(grid)
        except (TypeError, ValueError) as e:
            raise ValidationError("grid must contain only integers", details=str(e)) from e
        if cells.dtype.kind not in "iu":
            raise ValidationError("grid must contain only integers")
        if not np.isin(cells, (WALKABLE, WALL)).all():
            raise ValidationError(f"grid cells must be {WALKABLE} (open) or {WALL} (wall)")
