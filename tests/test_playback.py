import unittest

from pathfinder.app.fsm import AlgoState, AlgoStateMachine
from pathfinder.app.playback import Playback
from pathfinder.domain.bfs import bfs
from pathfinder.domain.types import Point
from pathfinder.utils.grid_factory import create_empty_grid


class AlgoStateMachineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.fsm = AlgoStateMachine()

    def test_starts_idle(self) -> None:
        self.assertTrue(self.fsm.is_idle())
        self.assertEqual(self.fsm.get_state_description(), "Ready to start")

    def test_play_pause_resume_finish(self) -> None:
        self.assertTrue(self.fsm.start())
        self.assertTrue(self.fsm.is_running())
        self.assertTrue(self.fsm.pause())
        self.assertTrue(self.fsm.is_paused())
        self.assertTrue(self.fsm.resume())
        self.assertTrue(self.fsm.finish(found=True))
        self.assertEqual(self.fsm.current_state, AlgoState.COMPLETE)
        self.assertTrue(self.fsm.is_finished())

    def test_finish_without_path(self) -> None:
        self.fsm.start()
        self.fsm.finish(found=False)
        self.assertEqual(self.fsm.current_state, AlgoState.NO_PATH)
        self.assertEqual(self.fsm.get_state_description(), "No path exists")

    def test_invalid_transitions_are_refused(self) -> None:
        self.assertFalse(self.fsm.pause())
        self.assertFalse(self.fsm.finish(found=True))
        self.fsm.start()
        self.fsm.finish(found=True)
        self.assertFalse(self.fsm.start())
        self.assertEqual(self.fsm.current_state, AlgoState.COMPLETE)

    def test_error_then_reset(self) -> None:
        self.assertTrue(self.fsm.fail_error())
        self.assertTrue(self.fsm.is_finished())
        self.assertTrue(self.fsm.reset_to_idle())
        self.assertTrue(self.fsm.is_idle())
        self.assertTrue(self.fsm.reset_to_idle())

    def test_callbacks(self) -> None:
        entered = []
        transitions = []
        self.fsm.on_state_enter(AlgoState.RUNNING, lambda ctx: entered.append(ctx))
        self.fsm.on_transition(AlgoState.IDLE, AlgoState.RUNNING,
                               lambda old, new, ctx: transitions.append((old, new)))

        self.fsm.start({"algorithm": "bfs"})

        self.assertEqual(entered, [{"algorithm": "bfs"}])
        self.assertEqual(transitions, [(AlgoState.IDLE, AlgoState.RUNNING)])


class PlaybackTests(unittest.TestCase):
    def setUp(self) -> None:
        self.result = bfs(create_empty_grid(3, 3), Point(0, 0), Point(2, 2))
        self.playback = Playback(self.result)

    def test_empty_playback(self) -> None:
        playback = Playback()
        self.assertTrue(playback.is_done())
        self.assertEqual(playback.total, 0)
        self.assertIsNone(playback.current_point())
        self.assertTrue(playback.advance())
        self.assertEqual(playback.path_points(), set())

    def test_advance_reveals_in_order(self) -> None:
        self.assertFalse(self.playback.advance())
        self.assertEqual(self.playback.current_point(), Point(0, 0))
        self.assertFalse(self.playback.advance())
        self.assertEqual(self.playback.current_point(), Point(1, 0))
        self.assertEqual(self.playback.visited_points(), {Point(0, 0), Point(1, 0)})
        self.assertEqual(self.playback.path_points(), set())

    def test_path_shown_after_last_node(self) -> None:
        ticks = 0
        while not self.playback.advance():
            ticks += 1
        self.assertEqual(ticks, self.playback.total - 1)
        self.assertTrue(self.playback.show_path)
        self.assertEqual(self.playback.path_points(), set(self.result.path))
        self.assertEqual(self.playback.current_point(), Point(2, 2))

    def test_skip(self) -> None:
        self.playback.advance()
        self.playback.skip()
        self.assertTrue(self.playback.is_done())
        self.assertEqual(self.playback.visited_points(), set(self.result.visited_order))
        self.assertEqual(self.playback.path_points(), set(self.result.path))

    def test_no_path_never_shows_path(self) -> None:
        grid = create_empty_grid(3, 1, walls=[Point(1, 0)])
        playback = Playback(bfs(grid, Point(0, 0), Point(2, 0)))
        playback.skip()
        self.assertFalse(playback.show_path)
        self.assertEqual(playback.visited_points(), {Point(0, 0)})


if __name__ == "__main__":
    unittest.main()
