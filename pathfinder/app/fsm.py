"""Finite State Machine for search playback in the viewer."""

from enum import Enum
from typing import Callable, Dict, Optional, Set, Tuple


class AlgoState(Enum):
    """States of a search playback."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"
    NO_PATH = "no_path"
    ERROR = "error"


StateCallback = Callable[[Optional[dict]], None]
TransitionCallback = Callable[[AlgoState, AlgoState, Optional[dict]], None]


class AlgoStateMachine:
    """
    Finite State Machine for managing search playback states.

    State Transitions:
    IDLE -> RUNNING (when run is pressed)
    IDLE -> ERROR (when the search is rejected)
    RUNNING -> PAUSED (when pause is pressed)
    RUNNING -> COMPLETE / NO_PATH (when playback reaches the end)
    RUNNING -> IDLE (when reset is pressed)
    PAUSED -> RUNNING (when resume is pressed)
    PAUSED -> COMPLETE / NO_PATH (when skip is pressed)
    PAUSED -> IDLE (when reset is pressed)
    COMPLETE / NO_PATH / ERROR -> IDLE (when reset is pressed)
    """

    def __init__(self):
        self._current_state = AlgoState.IDLE
        self._state_callbacks: Dict[AlgoState, StateCallback] = {}
        self._transition_callbacks: Dict[Tuple[AlgoState, AlgoState], TransitionCallback] = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> Dict[AlgoState, Set[AlgoState]]:
        """Build the valid state transition map."""
        return {
            AlgoState.IDLE: {AlgoState.RUNNING, AlgoState.ERROR},
            AlgoState.RUNNING: {AlgoState.PAUSED, AlgoState.COMPLETE, AlgoState.NO_PATH, AlgoState.IDLE},
            AlgoState.PAUSED: {AlgoState.RUNNING, AlgoState.COMPLETE, AlgoState.NO_PATH, AlgoState.IDLE},
            AlgoState.COMPLETE: {AlgoState.IDLE},
            AlgoState.NO_PATH: {AlgoState.IDLE},
            AlgoState.ERROR: {AlgoState.IDLE},
        }

    @property
    def current_state(self) -> AlgoState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: AlgoState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: AlgoState, context: Optional[dict] = None) -> bool:
        """
        Attempt to transition to the target state.

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        old_state = self._current_state
        self._current_state = target_state

        transition_key = (old_state, target_state)
        if transition_key in self._transition_callbacks:
            self._transition_callbacks[transition_key](old_state, target_state, context)

        if target_state in self._state_callbacks:
            self._state_callbacks[target_state](context)

        return True

    def on_state_enter(self, state: AlgoState, callback: StateCallback):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    def on_transition(self, from_state: AlgoState, to_state: AlgoState, callback: TransitionCallback):
        """Register a callback for a specific state transition."""
        self._transition_callbacks[(from_state, to_state)] = callback

    # Convenience methods for common operations

    def is_running(self) -> bool:
        return self._current_state == AlgoState.RUNNING

    def is_paused(self) -> bool:
        return self._current_state == AlgoState.PAUSED

    def is_idle(self) -> bool:
        return self._current_state == AlgoState.IDLE

    def is_finished(self) -> bool:
        """Check if playback has finished (complete, no path, or error)."""
        return self._current_state in (AlgoState.COMPLETE, AlgoState.NO_PATH, AlgoState.ERROR)

    def start(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(AlgoState.RUNNING, context)

    def pause(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(AlgoState.PAUSED, context)

    def resume(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(AlgoState.RUNNING, context)

    def finish(self, found: bool, context: Optional[dict] = None) -> bool:
        """Move to COMPLETE when a path was found, NO_PATH otherwise."""
        return self.transition_to(AlgoState.COMPLETE if found else AlgoState.NO_PATH, context)

    def fail_error(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(AlgoState.ERROR, context)

    def reset_to_idle(self, context: Optional[dict] = None) -> bool:
        """Reset to idle state; a no-op success when already idle."""
        if self._current_state == AlgoState.IDLE:
            return True
        return self.transition_to(AlgoState.IDLE, context)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            AlgoState.IDLE: "Ready to start",
            AlgoState.RUNNING: "Playing search",
            AlgoState.PAUSED: "Playback paused",
            AlgoState.COMPLETE: "Path found",
            AlgoState.NO_PATH: "No path exists",
            AlgoState.ERROR: "Search rejected",
        }
        return descriptions[self._current_state]
