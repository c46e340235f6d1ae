import random
import unittest

from parcheesi import simulate
from parcheesi.config import Config
from parcheesi.state import validate_state


class TestConfig(unittest.TestCase):
    def test_board_constants(self):
        cfg = Config()
        self.assertEqual(cfg.MAIN_TRACK_LENGTH, 52)
        self.assertEqual(cfg.HOME_COLUMN_START, 52)
        self.assertEqual(cfg.FINISH_POSITION, 57)
        self.assertEqual(cfg.GLOBAL_SAFE_SQUARES, frozenset({0, 8, 13, 21, 26, 34, 39, 47}))

    def test_runtime_settings_are_checked(self):
        with self.assertRaises(ValueError):
            Config(AI_MAX_WORKERS=0)
        with self.assertRaises(ValueError):
            Config(AI_THINKING_DELAY_MS=-1)
        with self.assertRaises(ValueError):
            Config(AI_DEFAULT_DIFFICULTY="grandmaster")


class TestSimulateCli(unittest.TestCase):
    def test_parse_args(self):
        args = simulate.parse_args(["--games", "3", "--num-players", "2", "--difficulty", "easy", "hard"])
        self.assertEqual(args.games, 3)
        self.assertEqual(args.num_players, 2)
        self.assertEqual(args.difficulty, ["easy", "hard"])

    def test_build_players_cycles_difficulty(self):
        players = simulate.build_players(3, ["easy", "hard"])
        self.assertEqual([p.ai_difficulty.value for p in players], ["easy", "hard", "easy"])
        self.assertTrue(all(p.is_ai for p in players))

    def test_play_game_keeps_state_valid(self):
        players = simulate.build_players(4, ["medium"])
        session = simulate.new_game(players, roller=simulate.DiceRoller(seed=11))
        simulate.play_game(session, random.Random(11), max_turns=40)
        validate_state(session.state)
        self.assertLessEqual(session.state.turn_number, 41)

    def test_main_smoke(self):
        code = simulate.main(
            ["--games", "1", "--seed", "7", "--max-turns", "50", "--log-level", "ERROR"]
        )
        self.assertEqual(code, 0)


if __name__ == "__main__":
    unittest.main()
