"""Solver selection, cancellation and timing around the search core."""

import threading
import time
from typing import Callable, Dict, Optional, Tuple

from ..domain.astar import astar
from ..domain.bfs import bfs
from ..domain.dfs import dfs
from ..domain.errors import SearchCancelledError, UnknownAlgorithmError
from ..domain.types import Grid, MazeResult, Point, SearchResult
from ..utils.grid_factory import generate_maze

Solver = Callable[[Grid, Point, Point], SearchResult]

# Mapping from lower-cased algorithm names to solvers
SOLVERS: Dict[str, Solver] = {
    "bfs": bfs,
    "dfs": dfs,
    "astar": astar,
    "a*": astar,
}


def select_solver(algorithm: str) -> Solver:
    """Get the solver for an algorithm name (case-insensitive)."""
    solver = SOLVERS.get((algorithm or "").lower())
    if solver is None:
        raise UnknownAlgorithmError(details=f"'{algorithm}' is not one of: bfs, dfs, astar, a*")
    return solver


def _check_cancelled(cancel_event: Optional[threading.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise SearchCancelledError()


class SimulationRunner:
    """Runs a named search algorithm and measures how long it took."""

    def run(self, algorithm: str, grid: Grid, start: Point, goal: Point,
            cancel_event: Optional[threading.Event] = None) -> Tuple[SearchResult, float]:
        """
        Execute the requested algorithm.

        Cancellation is only honoured before the search begins; a started
        search always runs to completion.

        Returns:
            Tuple of (result, elapsed_seconds)

        Raises:
            SearchCancelledError: If cancel_event is already set
            UnknownAlgorithmError: If the algorithm name is not recognised
            OutOfBoundsError: If start or goal is outside the grid
            BlockedError: If start or goal is a wall
        """
        _check_cancelled(cancel_event)
        solver = select_solver(algorithm)

        began = time.perf_counter()
        result = solver(grid, start, goal)
        elapsed = time.perf_counter() - began

        return result, elapsed


class MazeGenerator:
    """Generates mazes, honouring an up-front cancellation check."""

    def generate(self, width: int, height: int, seed: Optional[int] = None,
                 cancel_event: Optional[threading.Event] = None) -> MazeResult:
        _check_cancelled(cancel_event)
        return generate_maze(width, height, seed)
