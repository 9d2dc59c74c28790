"""Viewer controller connecting the Qt UI to the services and the playback."""

from typing import List, Optional, Set

from PySide6.QtCore import QObject, QTimer, Signal

from ..domain.errors import PathfinderError
from ..domain.neighbors import grid_dimensions, in_bounds
from ..domain.types import Point, SearchResult, WALKABLE, WALL
from ..utils.grid_factory import create_empty_grid
from .fsm import AlgoState, AlgoStateMachine
from .playback import Playback
from .services import MazeService, SimulationService


class PathfinderController(QObject):
    """
    Controller that owns the editable grid, runs searches through the
    service layer and replays their expansion order on a timer.

    Signals:
        state_changed: Emitted when the playback state changes
        grid_updated: Emitted when the grid needs to be redrawn
        result_ready: Emitted with the SearchResult when a search finishes
        error_occurred: Emitted with a message when an operation is rejected
    """

    state_changed = Signal(object)  # AlgoState
    grid_updated = Signal()
    result_ready = Signal(object)  # SearchResult
    error_occurred = Signal(str)

    def __init__(self, maze_service: Optional[MazeService] = None,
                 simulation_service: Optional[SimulationService] = None):
        super().__init__()

        self._maze_service = maze_service or MazeService()
        self._simulation_service = simulation_service or SimulationService()
        self._state_machine = AlgoStateMachine()
        self._playback = Playback()
        self._visited_points: Set[Point] = set()
        self._path_points: Set[Point] = set()
        self._grid: List[List[int]] = []
        self._start: Optional[Point] = None
        self._goal: Optional[Point] = None
        self._algorithm = "bfs"
        self._elapsed_ms = 0.0

        # Timer for playback
        self._timer = QTimer()
        self._timer.timeout.connect(self._on_timer_tick)
        self._timer_interval = 30  # milliseconds

        self._setup_state_callbacks()

        # Initialize with a default maze
        self.generate_maze(12, 12)

    def _setup_state_callbacks(self):
        """Setup callbacks for state machine transitions."""
        self._state_machine.on_state_enter(AlgoState.RUNNING, self._on_running_entered)
        for state in (AlgoState.IDLE, AlgoState.PAUSED, AlgoState.COMPLETE,
                      AlgoState.NO_PATH, AlgoState.ERROR):
            self._state_machine.on_state_enter(state, self._on_stopped_state_entered(state))

    # Properties

    @property
    def grid(self) -> List[List[int]]:
        return self._grid

    @property
    def start_point(self) -> Optional[Point]:
        return self._start

    @property
    def goal_point(self) -> Optional[Point]:
        return self._goal

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @algorithm.setter
    def algorithm(self, name: str):
        self._algorithm = name

    @property
    def playback(self) -> Playback:
        return self._playback

    @property
    def current_state(self) -> AlgoState:
        return self._state_machine.current_state

    @property
    def state_description(self) -> str:
        return self._state_machine.get_state_description()

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    @property
    def speed(self) -> int:
        """Get the current speed (timer interval in ms)."""
        return self._timer_interval

    @speed.setter
    def speed(self, interval_ms: int):
        """Set the speed (timer interval in ms)."""
        self._timer_interval = max(1, min(500, interval_ms))
        if self._timer.isActive():
            self._timer.setInterval(self._timer_interval)

    # Grid Management

    def create_new_grid(self, width: int, height: int) -> bool:
        """Create an open grid with start and goal in opposite corners."""
        try:
            grid = create_empty_grid(width, height)
        except ValueError as e:
            self.error_occurred.emit(f"Failed to create grid: {e}")
            return False
        self._replace_grid(grid)
        return True

    def generate_maze(self, width: int, height: int, seed: Optional[int] = None) -> bool:
        """Generate a perfect maze of width x height cells."""
        try:
            maze = self._maze_service.generate_maze(width, height, seed)
        except PathfinderError as e:
            self.error_occurred.emit(f"Failed to generate maze: {e.message}")
            return False
        self._replace_grid(maze.grid)
        return True

    def _replace_grid(self, grid: List[List[int]]):
        self._timer.stop()
        self._grid = grid
        width, height = grid_dimensions(grid)
        # Corner cells are open in both mazes and empty grids
        self._start = Point(1, 1) if width > 2 and height > 2 else Point(0, 0)
        self._goal = Point(width - 2, height - 2) if width > 2 and height > 2 \
            else Point(width - 1, height - 1)
        self._grid[self._start.y][self._start.x] = WALKABLE
        self._grid[self._goal.y][self._goal.x] = WALKABLE
        self.reset_playback()

    def set_cell(self, point: Point, mode: str) -> bool:
        """
        Edit a cell: "wall" toggles a wall, "start"/"goal" move an endpoint.
        Editing is refused while a playback is running.
        """
        if not in_bounds(self._grid, point) or self._state_machine.is_running():
            return False

        if mode == "wall":
            if point in (self._start, self._goal):
                return False
            self._grid[point.y][point.x] = WALKABLE if self._grid[point.y][point.x] == WALL else WALL
        elif mode == "start":
            self._grid[point.y][point.x] = WALKABLE
            self._start = point
        elif mode == "goal":
            self._grid[point.y][point.x] = WALKABLE
            self._goal = point
        else:
            return False

        self.reset_playback()
        return True

    def cell_state(self, point: Point) -> str:
        """Visual state of a cell given the grid and the playback progress."""
        if point == self._start:
            return "start"
        if point == self._goal:
            return "goal"
        if self._grid[point.y][point.x] == WALL:
            return "wall"
        if point in self._path_points:
            return "path"
        if point == self._playback.current_point() and self._state_machine.is_running():
            return "current"
        if point in self._visited_points:
            return "visited"
        return "empty"

    # Playback Control

    def can_start(self) -> bool:
        return (self._state_machine.is_idle() and bool(self._grid)
                and self._start is not None and self._goal is not None)

    def run_search(self) -> bool:
        """Run the selected algorithm and start replaying its expansion order."""
        if self._state_machine.is_finished():
            self.reset_playback()
        if not self.can_start():
            return False

        try:
            outcome = self._simulation_service.run_simulation(
                self._algorithm, self._grid, self._start, self._goal
            )
        except PathfinderError as e:
            self._state_machine.fail_error()
            self.error_occurred.emit(e.message if not e.details else f"{e.message}: {e.details}")
            return False

        self._elapsed_ms = outcome.elapsed_ms
        self._playback = Playback(outcome.result)
        self._refresh_caches()
        return self._state_machine.start()

    def pause(self) -> bool:
        return self._state_machine.pause()

    def resume(self) -> bool:
        return self._state_machine.resume()

    def skip(self) -> bool:
        """Jump to the end of the current playback."""
        if not (self._state_machine.is_running() or self._state_machine.is_paused()):
            return False
        self._playback.skip()
        self._refresh_caches()
        return self._finish()

    def reset_playback(self) -> bool:
        """Clear the playback and return to idle."""
        self._playback = Playback()
        self._elapsed_ms = 0.0
        self._refresh_caches()
        ok = self._state_machine.reset_to_idle()
        self.grid_updated.emit()
        return ok

    def stop(self):
        """Stop the timer before the application exits."""
        self._timer.stop()

    # State Machine Callbacks

    def _on_running_entered(self, context):
        self._timer.start(self._timer_interval)
        self.state_changed.emit(AlgoState.RUNNING)

    def _on_stopped_state_entered(self, state: AlgoState):
        def callback(context):
            self._timer.stop()
            self.state_changed.emit(state)
        return callback

    def _on_timer_tick(self):
        """Reveal one more expanded node on each tick."""
        if not self._state_machine.is_running():
            return
        done = self._playback.advance()
        self._refresh_caches()
        if done:
            self._finish()
        self.grid_updated.emit()

    def _finish(self) -> bool:
        result: SearchResult = self._playback.result
        finished = self._state_machine.finish(result.found, {"result": result})
        if finished:
            self.result_ready.emit(result)
        self.grid_updated.emit()
        return finished

    def _refresh_caches(self):
        self._visited_points = self._playback.visited_points()
        self._path_points = self._playback.path_points()
