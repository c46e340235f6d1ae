import random
import unittest

from parcheesi import rules, serialization
from parcheesi.ai import (
    AIPlayer,
    AITurnOrchestrator,
    EasyStrategy,
    HardStrategy,
    MediumStrategy,
    create_strategy,
)
from parcheesi.player import Player
from parcheesi.state import GameState
from parcheesi.types import AIDifficulty, Color, DiceResult, MoveType


def make_state(dice: DiceResult) -> GameState:
    players = [
        Player("Red", Color.RED, player_id="p1", is_ai=True, ai_difficulty=AIDifficulty.HARD),
        Player("Blue", Color.BLUE, player_id="p2"),
        Player("Green", Color.GREEN, player_id="p3"),
        Player("Yellow", Color.YELLOW, player_id="p4"),
    ]
    state = GameState(players=players)
    players[0].tokens[0].place_on_board(10)
    players[1].tokens[0].place_on_board(12)
    rules.begin_moving(state, dice)
    return state


class TestStrategyFactory(unittest.TestCase):
    def test_known_difficulties(self):
        self.assertIsInstance(create_strategy("easy"), EasyStrategy)
        self.assertIsInstance(create_strategy(AIDifficulty.MEDIUM), MediumStrategy)
        self.assertIsInstance(create_strategy("HARD"), HardStrategy)

    def test_unknown_difficulty(self):
        with self.assertRaises(ValueError):
            create_strategy("grandmaster")


class TestEasyStrategy(unittest.TestCase):
    def test_picks_a_legal_move(self):
        state = make_state(DiceResult(2, 6))
        strategy = EasyStrategy(random.Random(3))
        for _ in range(10):
            self.assertIn(strategy.choose(state), rules.current_legal_moves(state))

    def test_no_moves_returns_none(self):
        state = GameState(players=[Player("Red", Color.RED), Player("Blue", Color.BLUE)])
        self.assertIsNone(EasyStrategy().choose(state))


class TestMediumStrategy(unittest.TestCase):
    def setUp(self):
        self.strategy = MediumStrategy()

    def test_prefers_capture_over_advance(self):
        state = make_state(DiceResult(2, 6))
        move = self.strategy.choose(state)
        self.assertEqual(move.move_type, MoveType.CAPTURE)
        self.assertEqual(move.to_position, 12)

    def test_prefers_finish_over_capture(self):
        state = make_state(DiceResult(2, 6))
        state.players[0].tokens[1].enter_home_column(51 + 4)
        move = self.strategy.choose(state)
        self.assertEqual(move.move_type, MoveType.FINISH)

    def test_prefers_entry_over_plain_move(self):
        state = make_state(DiceResult(5, 1))
        move = self.strategy.choose(state)
        self.assertEqual(move.move_type, MoveType.ENTER)

    def test_advances_furthest_token(self):
        state = make_state(DiceResult(1, 3))
        state.players[0].tokens[1].place_on_board(30)
        move = self.strategy.choose(state)
        self.assertEqual(move.from_position, 30)


class TestHardStrategy(unittest.TestCase):
    def test_takes_the_capture(self):
        state = make_state(DiceResult(2, 6))
        move = HardStrategy().choose(state)
        self.assertEqual(move.move_type, MoveType.CAPTURE)

    def test_does_not_mutate_input(self):
        state = make_state(DiceResult(2, 6))
        before = serialization.state_to_dict(state)
        HardStrategy().choose(state)
        self.assertEqual(serialization.state_to_dict(state), before)


class TestAIPlayer(unittest.TestCase):
    def test_for_player_uses_player_difficulty(self):
        state = make_state(DiceResult(2, 6))
        ai = AIPlayer.for_player(state.players[0])
        self.assertEqual(ai.difficulty, AIDifficulty.HARD)
        self.assertIsInstance(ai.strategy, HardStrategy)

    def test_choose_move_leaves_state_alone(self):
        state = make_state(DiceResult(2, 6))
        before = serialization.state_to_dict(state)
        move = AIPlayer(AIDifficulty.MEDIUM).choose_move(state)
        self.assertIn(move, rules.current_legal_moves(state))
        self.assertEqual(serialization.state_to_dict(state), before)


class TestOrchestrator(unittest.TestCase):
    def test_future_yields_legal_move(self):
        state = make_state(DiceResult(2, 6))
        with AITurnOrchestrator(max_workers=1, thinking_delay_ms=0) as orchestrator:
            future = orchestrator.submit(AIPlayer(AIDifficulty.HARD), state)
            move = future.result(timeout=10)
        self.assertEqual(move.move_type, MoveType.CAPTURE)
        self.assertEqual(state.players[1].tokens[0].track_position, 12)


if __name__ == "__main__":
    unittest.main()
