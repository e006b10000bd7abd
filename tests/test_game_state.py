import unittest

import game_state
from game_state import GameOutcome, ProjectileInventory, WinLossDetector
from rng_stubs import FirstChoiceRandom
from session import MazeSession

# Player positions in world units
NEAR_SIDE = (400.0, 130.0)
OTHER_SIDE = (200.0, 130.0)
IN_CANYON = (300.0, 20.0)

# Room of the first-choice maze that is not on its solution
OFF_SOLUTION_ROOM = (8, 0)


class TestProjectileInventory(unittest.TestCase):

    def test_collect_and_throw(self):
        inventory = ProjectileInventory()
        self.assertFalse(inventory.throw())
        inventory.collect()
        inventory.collect()
        self.assertTrue(inventory.throw())
        self.assertEqual(inventory.count, 1)
        self.assertTrue(inventory.in_air)

    def test_second_throw_refused_while_in_air(self):
        inventory = ProjectileInventory(2)
        self.assertTrue(inventory.throw())
        self.assertFalse(inventory.throw())
        self.assertEqual(inventory.count, 1)

    def test_landing_allows_the_next_throw(self):
        inventory = ProjectileInventory(2)
        inventory.throw()
        inventory.land()
        self.assertFalse(inventory.in_air)
        self.assertTrue(inventory.throw())
        self.assertEqual(inventory.count, 0)

    def test_throw_refused_when_game_over(self):
        inventory = ProjectileInventory(1)
        self.assertFalse(inventory.throw(game_over=True))
        self.assertEqual(inventory.count, 1)
        self.assertFalse(inventory.in_air)

    def test_negative_start_rejected(self):
        with self.assertRaises(ValueError):
            ProjectileInventory(-1)


class TestWinLossDetector(unittest.TestCase):

    def setUp(self):
        self.session = MazeSession(FirstChoiceRandom())
        self.inventory = ProjectileInventory(1)
        self.detector = WinLossDetector(self.session, self.inventory)

    def _clear_path(self, keep=0):
        """Removes collectibles from the corridor without picking them up."""
        for spot in list(self.session.collectibles)[keep:]:
            self.session.collect_at(*spot)

    def test_in_progress(self):
        self.assertEqual(self.detector.update(*NEAR_SIDE), GameOutcome.IN_PROGRESS)
        self.assertEqual(self.detector.message, "")
        self.assertFalse(self.detector.game_over)

    def test_falling_loses(self):
        self.assertEqual(self.detector.update(*IN_CANYON), GameOutcome.LOSS)
        self.assertEqual(self.detector.message, game_state.MSG_FELL)

    def test_pick_up(self):
        spot = self.session.collectibles[0]
        self.assertTrue(self.detector.pick_up(*spot))
        self.assertEqual(self.inventory.count, 2)
        self.assertFalse(self.detector.pick_up(*spot))
        self.assertFalse(self.detector.pick_up(*self.session.corridor[0]))
        self.assertEqual(self.inventory.count, 2)

    def test_out_of_projectiles_loses(self):
        self._clear_path()
        self.assertTrue(self.detector.throw_projectile())
        self.detector.projectile_hit(*OFF_SOLUTION_ROOM)
        self.assertEqual(self.detector.update(*NEAR_SIDE), GameOutcome.LOSS)
        self.assertEqual(self.detector.message, game_state.MSG_OUT_OF_PROJECTILES)

    def test_out_of_projectiles_with_some_on_the_path_hints(self):
        self.detector.throw_projectile()
        self.detector.projectile_hit()
        self.assertEqual(self.detector.update(*NEAR_SIDE), GameOutcome.IN_PROGRESS)
        self.assertEqual(self.detector.message, game_state.MSG_PICK_UP_HINT)

    def test_out_of_projectiles_with_one_in_the_air_waits(self):
        self._clear_path()
        self.detector.throw_projectile()
        self.assertEqual(self.detector.update(*NEAR_SIDE), GameOutcome.IN_PROGRESS)
        self.detector.projectile_hit()
        self.assertEqual(self.detector.update(*NEAR_SIDE), GameOutcome.LOSS)
        self.assertEqual(self.detector.message, game_state.MSG_OUT_OF_PROJECTILES)

    def test_collecting_the_last_projectile_ends_the_hints(self):
        inventory = ProjectileInventory()
        detector = WinLossDetector(self.session, inventory)
        self._clear_path(keep=1)
        self.assertEqual(detector.update(*NEAR_SIDE), GameOutcome.IN_PROGRESS)
        self.assertEqual(detector.message, game_state.MSG_PICK_UP_HINT)

        self.assertTrue(detector.pick_up(*self.session.collectibles[0]))
        self.assertEqual(self.session.collectibles, [])
        self.assertTrue(detector.throw_projectile())
        self.assertFalse(detector.projectile_hit(*OFF_SOLUTION_ROOM))
        self.assertEqual(detector.update(*NEAR_SIDE), GameOutcome.LOSS)
        self.assertEqual(detector.message, game_state.MSG_OUT_OF_PROJECTILES)

    def test_double_throw_refused(self):
        self.inventory.collect()
        self.assertTrue(self.detector.throw_projectile())
        self.assertFalse(self.detector.throw_projectile())
        self.assertEqual(self.inventory.count, 1)
        self.detector.projectile_hit()
        self.assertTrue(self.detector.throw_projectile())

    def test_throw_refused_after_game_over(self):
        self.detector.update(*IN_CANYON)
        self.assertTrue(self.detector.game_over)
        self.assertFalse(self.detector.throw_projectile())
        self.assertEqual(self.inventory.count, 1)

    def test_hitting_a_solution_floor_destroys_the_solution(self):
        self.detector.throw_projectile()
        r, c = self.session.expanded_solution[3]
        self.assertTrue(self.detector.projectile_hit(r, c))
        self.assertFalse(self.inventory.in_air)
        self.assertTrue(self.session.is_solution_destroyed())

    def test_destroying_solution_too_early_loses(self):
        self.session.mark_solution_destroyed()
        self.assertEqual(self.detector.update(*NEAR_SIDE), GameOutcome.LOSS)
        self.assertEqual(self.detector.message, game_state.MSG_DESTROYED_TOO_EARLY)

    def test_destroying_solution_from_the_other_side_wins(self):
        self.detector.update(*OTHER_SIDE)
        self.assertTrue(self.detector.reached_other_side_once)
        self.detector.throw_projectile()
        self.detector.projectile_hit(*self.session.expanded_solution[0])
        self.assertEqual(self.detector.update(*OTHER_SIDE), GameOutcome.WIN)
        self.assertEqual(self.detector.message, game_state.MSG_WIN)

    def test_leaving_the_other_side_loses(self):
        self.detector.update(*OTHER_SIDE)
        self.session.mark_solution_destroyed()
        self.assertEqual(self.detector.update(*NEAR_SIDE), GameOutcome.LOSS)
        self.assertEqual(self.detector.message, game_state.MSG_LEFT_OTHER_SIDE)

    def test_outcome_latches(self):
        self.detector.update(*OTHER_SIDE)
        self.session.mark_solution_destroyed()
        self.detector.update(*OTHER_SIDE)
        self._clear_path()
        self.assertEqual(self.detector.update(*IN_CANYON), GameOutcome.WIN)


if __name__ == "__main__":
    unittest.main()
