import unittest

from parcheesi import rules
from parcheesi.player import Player
from parcheesi.state import GameState, Rolling
from parcheesi.types import Color, DiceResult, GamePhase


def make_state(num_players: int = 4) -> GameState:
    colors = list(Color)[:num_players]
    return GameState(players=[Player(c.value.title(), c) for c in colors])


class TestBonusTurn(unittest.TestCase):
    def test_double_without_capture(self):
        self.assertTrue(rules.current_player_gets_another_turn(DiceResult(4, 4), False))

    def test_capture_without_double(self):
        self.assertTrue(rules.current_player_gets_another_turn(DiceResult(2, 6), True))

    def test_plain_roll(self):
        self.assertFalse(rules.current_player_gets_another_turn(DiceResult(2, 6), False))


class TestAdvanceTurn(unittest.TestCase):
    def test_clears_turn_data_and_wraps(self):
        state = make_state()
        state.current_player_index = 3
        rules.begin_moving(state, DiceResult(3, 5))
        rules.advance_turn(state)
        self.assertEqual(state.current_player_index, 0)
        self.assertIsInstance(state.turn, Rolling)
        self.assertEqual(state.phase, GamePhase.ROLLING)
        self.assertIsNone(state.current_dice)
        self.assertEqual(state.remaining_moves, [])
        self.assertEqual(state.turn_number, 2)

    def test_two_player_rotation(self):
        state = make_state(2)
        rules.advance_turn(state)
        self.assertEqual(state.current_player.color, Color.BLUE)
        rules.advance_turn(state)
        self.assertEqual(state.current_player.color, Color.RED)
        self.assertEqual(state.turn_number, 3)


class TestWinDetection(unittest.TestCase):
    def test_all_tokens_finished_wins(self):
        state = make_state()
        for token in state.players[0].tokens:
            token.finish()
        winner = rules.check_winner(state)
        self.assertIsNotNone(winner)
        self.assertEqual(winner.color, Color.RED)

    def test_three_of_four_is_not_a_win(self):
        state = make_state()
        for token in state.players[0].tokens[:3]:
            token.finish()
        self.assertIsNone(rules.check_winner(state))

    def test_first_in_turn_order(self):
        state = make_state()
        for player in (state.players[2], state.players[1]):
            for token in player.tokens:
                token.finish()
        self.assertEqual(rules.check_winner(state).color, Color.BLUE)


if __name__ == "__main__":
    unittest.main()
