import unittest

from parcheesi.dice import (
    DiceRoller,
    available_move_values,
    can_enter_board,
    entry_move_value,
    entry_value_for,
)
from parcheesi.types import DiceResult


class TestDiceResult(unittest.TestCase):
    def test_double_and_total(self):
        self.assertTrue(DiceResult(3, 3).is_double)
        self.assertFalse(DiceResult(3, 4).is_double)
        self.assertEqual(DiceResult(3, 4).total, 7)

    def test_out_of_range_rejected(self):
        with self.assertRaises(ValueError):
            DiceResult(0, 3)
        with self.assertRaises(ValueError):
            DiceResult(3, 7)

    def test_seeded_roller_is_reproducible(self):
        first = DiceRoller(seed=42)
        second = DiceRoller(seed=42)
        rolls = [first.roll() for _ in range(50)]
        self.assertEqual(rolls, [second.roll() for _ in range(50)])
        for dice in rolls:
            self.assertTrue(1 <= dice.die1 <= 6)
            self.assertTrue(1 <= dice.die2 <= 6)


class TestMoveValues(unittest.TestCase):
    def test_non_double_grants_two_values(self):
        self.assertEqual(available_move_values(DiceResult(3, 5)), [3, 5])

    def test_double_grants_four_values(self):
        self.assertEqual(available_move_values(DiceResult(4, 4)), [4, 4, 4, 4])


class TestEntryRule(unittest.TestCase):
    def test_examples(self):
        self.assertTrue(can_enter_board(DiceResult(5, 3)))
        self.assertTrue(can_enter_board(DiceResult(2, 5)))
        self.assertTrue(can_enter_board(DiceResult(2, 3)))
        self.assertFalse(can_enter_board(DiceResult(1, 2)))
        self.assertFalse(can_enter_board(DiceResult(4, 2)))

    def test_all_pairs(self):
        for d1 in range(1, 7):
            for d2 in range(1, 7):
                expected = d1 == 5 or d2 == 5 or d1 + d2 == 5
                self.assertEqual(can_enter_board(DiceResult(d1, d2)), expected, (d1, d2))

    def test_entry_move_value(self):
        self.assertEqual(entry_move_value(DiceResult(5, 3)), 5)
        self.assertEqual(entry_move_value(DiceResult(2, 5)), 5)
        self.assertEqual(entry_move_value(DiceResult(2, 3)), 2)
        self.assertEqual(entry_move_value(DiceResult(1, 2)), 0)

    def test_sum_entry_needs_both_dice_unconsumed(self):
        dice = DiceResult(1, 4)
        self.assertEqual(entry_value_for(1, dice), 1)
        self.assertIsNone(entry_value_for(4, dice))
        self.assertIsNone(entry_value_for(1, dice, remaining=[1]))


if __name__ == "__main__":
    unittest.main()
