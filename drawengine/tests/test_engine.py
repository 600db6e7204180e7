import random
import unittest

from drawengine.engine import DrawEngine, normalize_angle, run_draw, winner_index
from drawengine.errors import InvalidAngle, InvalidState
from drawengine.types import EngineState


class WinnerIndexTests(unittest.TestCase):
    def test_pointer_at_top_selects_slice_under_it(self) -> None:
        # Three slices of 120 degrees: rotating the wheel clockwise by r puts the
        # slice containing (360 - r) under the pointer.
        self.assertEqual(winner_index(3, 0), 0)
        self.assertEqual(winner_index(3, 300), 0)
        self.assertEqual(winner_index(3, 200), 1)
        self.assertEqual(winner_index(3, 100), 2)

    def test_full_turns_do_not_change_the_winner(self) -> None:
        for angle in (0.0, 17.5, 95.0, 181.0, 359.9):
            expected = winner_index(7, angle)
            for turns in (-3, -1, 1, 2, 10):
                self.assertEqual(winner_index(7, angle + 360 * turns), expected)

    def test_negative_angles_are_normalized(self) -> None:
        self.assertEqual(winner_index(4, -90), winner_index(4, 270))
        self.assertEqual(winner_index(4, -90), 1)

    def test_pointer_offset_shifts_selection(self) -> None:
        self.assertEqual(winner_index(4, 0, pointer_angle=0), 0)
        self.assertEqual(winner_index(4, 0, pointer_angle=90), 1)
        self.assertEqual(winner_index(4, 0, pointer_angle=-90), 3)

    def test_index_always_in_range(self) -> None:
        rng = random.Random(11)
        for _ in range(500):
            count = rng.randint(1, 12)
            angle = rng.uniform(-5000, 5000)
            self.assertIn(winner_index(count, angle), range(count))

    def test_normalize_angle(self) -> None:
        self.assertEqual(normalize_angle(720), 0.0)
        self.assertEqual(normalize_angle(-30), 330.0)
        self.assertEqual(normalize_angle(-1e-20), 0.0)

    def test_zero_count_rejected(self) -> None:
        with self.assertRaises(ValueError):
            winner_index(0, 10)

    def test_non_finite_angles_rejected(self) -> None:
        for angle in (float("nan"), float("inf"), float("-inf")):
            with self.assertRaises(InvalidAngle):
                winner_index(3, angle)
            with self.assertRaises(InvalidAngle):
                winner_index(3, 10, pointer_angle=angle)


class DrawEngineTests(unittest.TestCase):
    def test_initialize_requires_participants(self) -> None:
        with self.assertRaises(InvalidState):
            DrawEngine([])

    def test_end_to_end_three_participants(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        self.assertEqual(engine.state, EngineState.IDLE)

        engine.begin_spin()
        self.assertEqual(engine.state, EngineState.SPINNING)
        self.assertTrue(engine.snapshot().drawing)
        self.assertEqual(engine.resolve_spin(200), "B")
        self.assertEqual(engine.remaining, ["A", "C"])
        self.assertEqual(engine.state, EngineState.IDLE)

        engine.begin_spin()
        self.assertEqual(engine.resolve_spin(90), "C")
        self.assertEqual(engine.state, EngineState.AUTO_RESOLVED)
        self.assertEqual(engine.remaining, ["A"])

        self.assertEqual(engine.auto_resolve_last(), "A")
        self.assertEqual(engine.state, EngineState.COMPLETE)
        self.assertTrue(engine.is_complete)
        self.assertEqual(engine.winners, ["B", "C", "A"])
        self.assertEqual(engine.remaining, [])

    def test_resolve_while_idle_has_no_side_effect(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        with self.assertRaises(InvalidState):
            engine.resolve_spin(45)
        self.assertEqual(engine.remaining, ["A", "B", "C"])
        self.assertEqual(engine.winners, [])
        self.assertEqual(engine.state, EngineState.IDLE)

    def test_non_finite_resolve_leaves_spin_pending(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        engine.begin_spin()
        with self.assertRaises(InvalidAngle):
            engine.resolve_spin(float("nan"))
        self.assertEqual(engine.state, EngineState.SPINNING)
        self.assertEqual(engine.remaining, ["A", "B", "C"])
        self.assertEqual(engine.resolve_spin(200), "B")

    def test_non_finite_spin_does_not_start(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        with self.assertRaises(InvalidAngle):
            engine.spin(float("inf"))
        self.assertEqual(engine.state, EngineState.IDLE)
        self.assertEqual(engine.winners, [])
        self.assertEqual(engine.spin(200), ["B"])

    def test_begin_spin_twice_rejected(self) -> None:
        engine = DrawEngine(["A", "B"])
        engine.begin_spin()
        with self.assertRaises(InvalidState):
            engine.begin_spin()
        self.assertEqual(engine.state, EngineState.SPINNING)

    def test_begin_spin_with_one_remaining_rejected(self) -> None:
        engine = DrawEngine(["Solo"])
        self.assertEqual(engine.state, EngineState.AUTO_RESOLVED)
        with self.assertRaises(InvalidState):
            engine.begin_spin()
        self.assertEqual(engine.auto_resolve_last(), "Solo")
        self.assertTrue(engine.is_complete)

    def test_auto_resolve_requires_single_remaining(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        with self.assertRaises(InvalidState):
            engine.auto_resolve_last()
        self.assertEqual(engine.winners, [])

    def test_pool_of_two_completes_in_one_spin(self) -> None:
        engine = DrawEngine(["A", "B"])
        declared = engine.spin(90)
        # Two slices of 180 degrees; 360 - 90 = 270 falls in slice 1.
        self.assertEqual(declared, ["B", "A"])
        self.assertTrue(engine.is_complete)

    def test_removal_keeps_order_of_remaining(self) -> None:
        engine = DrawEngine(["A", "B", "C", "D", "E"])
        engine.spin(360 - 150)  # 72 degree slices; 150 lies in slice 2
        self.assertEqual(engine.winners, ["C"])
        self.assertEqual(engine.remaining, ["A", "B", "D", "E"])

    def test_resolve_is_deterministic(self) -> None:
        first = DrawEngine(["A", "B", "C", "D"])
        second = DrawEngine(["A", "B", "C", "D"])
        first.begin_spin()
        second.begin_spin()
        self.assertEqual(first.resolve_spin(1234.5), second.resolve_spin(1234.5 + 720))

    def test_rotation_tracks_last_resting_angle(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        engine.spin(1000.0)
        self.assertEqual(engine.current_rotation, 1000.0)
        self.assertEqual(engine.snapshot().current_rotation, 1000.0)

    def test_reset_restores_initial_participants(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        engine.spin(200)
        engine.begin_spin()
        engine.reset()
        self.assertEqual(engine.state, EngineState.IDLE)
        self.assertEqual(engine.remaining, ["A", "B", "C"])
        self.assertEqual(engine.winners, [])
        self.assertEqual(engine.current_rotation, 0.0)

    def test_snapshot_is_detached(self) -> None:
        engine = DrawEngine(["A", "B", "C"])
        snapshot = engine.snapshot()
        engine.spin(200)
        self.assertEqual(snapshot.remaining, ("A", "B", "C"))
        self.assertEqual(snapshot.winners, ())
        self.assertEqual(snapshot.status, EngineState.IDLE)


class RunDrawTests(unittest.TestCase):
    def test_run_draw_matches_manual_spins(self) -> None:
        self.assertEqual(run_draw(["A", "B", "C"], [200, 90]), ["B", "C", "A"])

    def test_every_participant_wins_exactly_once(self) -> None:
        rng = random.Random(2024)
        for count in range(1, 15):
            names = [f"P{i}" for i in range(count)]
            angles = (rng.uniform(-2000, 2000) for _ in iter(int, 1))
            winners = run_draw(names, angles)
            self.assertEqual(len(winners), count)
            self.assertEqual(sorted(winners), sorted(names))

    def test_exhausted_feed_raises(self) -> None:
        with self.assertRaises(InvalidState):
            run_draw(["A", "B", "C"], [10])


if __name__ == "__main__":
    unittest.main()
