import unittest

from parcheesi import board
from parcheesi.player import Player
from parcheesi.types import Color


class TestBoardTopology(unittest.TestCase):
    def test_global_safe_squares_are_exact(self):
        safe = {0, 8, 13, 21, 26, 34, 39, 47}
        for index in range(52):
            self.assertEqual(board.is_global_safe(index), index in safe, index)

    def test_entry_squares_spaced_thirteen_apart(self):
        self.assertEqual(board.entry_square(Color.RED), 0)
        self.assertEqual(board.entry_square(Color.BLUE), 13)
        self.assertEqual(board.entry_square(Color.GREEN), 26)
        self.assertEqual(board.entry_square(Color.YELLOW), 39)

    def test_home_column_entry_squares(self):
        self.assertEqual(board.home_column_entry_square(Color.RED), 51)
        self.assertEqual(board.home_column_entry_square(Color.BLUE), 12)
        self.assertEqual(board.home_column_entry_square(Color.GREEN), 25)
        self.assertEqual(board.home_column_entry_square(Color.YELLOW), 38)

    def test_home_column_has_six_squares(self):
        for color in Color:
            self.assertEqual(board.home_column(color), (52, 53, 54, 55, 56, 57))


class TestAdvancePosition(unittest.TestCase):
    def test_stays_on_main_track(self):
        self.assertEqual(board.advance_position(10, 3, Color.RED), 13)

    def test_wraps_around_the_loop(self):
        # Blue is still 14 squares from its home entry at 12
        self.assertEqual(board.advance_position(50, 5, Color.BLUE), 3)

    def test_enters_home_column_with_excess(self):
        # Red at 49 is 2 steps from 51; excess 2 lands on column index 1
        self.assertEqual(board.advance_position(49, 4, Color.RED), 53)
        self.assertEqual(board.advance_position(51, 1, Color.RED), 52)
        self.assertEqual(board.advance_position(10, 6, Color.BLUE), 55)

    def test_lands_exactly_on_final_square(self):
        self.assertEqual(board.advance_position(51, 6, Color.RED), 57)

    def test_overshoot_returns_none(self):
        self.assertIsNone(board.advance_position(40, 20, Color.RED))

    def test_home_entry_square_itself(self):
        self.assertEqual(board.advance_position(12, 1, Color.BLUE), 52)
        self.assertEqual(board.advance_position(12, 1, Color.RED), 13)


class TestBlockades(unittest.TestCase):
    def setUp(self):
        self.red = Player("Red", Color.RED)
        self.blue = Player("Blue", Color.BLUE)
        self.green = Player("Green", Color.GREEN)
        self.players = [self.red, self.blue, self.green]

    def test_same_opponent_color_pair_blocks(self):
        self.blue.tokens[0].place_on_board(20)
        self.blue.tokens[1].place_on_board(20)
        self.assertTrue(board.is_double_blocked(20, Color.RED, self.players))
        self.assertEqual(board.blockade_squares(Color.BLUE, self.players), [20])

    def test_mixed_colors_do_not_block(self):
        self.blue.tokens[0].place_on_board(20)
        self.green.tokens[0].place_on_board(20)
        self.assertFalse(board.is_double_blocked(20, Color.RED, self.players))
        self.assertEqual(len(board.opponent_tokens_at(20, Color.RED, self.players)), 2)

    def test_own_pair_never_blocks_owner(self):
        self.red.tokens[0].place_on_board(20)
        self.red.tokens[1].place_on_board(20)
        self.assertFalse(board.is_double_blocked(20, Color.RED, self.players))
        self.assertTrue(board.is_double_blocked(20, Color.BLUE, self.players))

    def test_home_column_tokens_are_not_on_the_track(self):
        self.blue.tokens[0].enter_home_column(53)
        self.assertFalse(board.has_opponent_token(53, Color.RED, self.players))


if __name__ == "__main__":
    unittest.main()
