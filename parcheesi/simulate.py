import argparse
import random
import sys
import time
from typing import List, Optional

from loguru import logger

from .ai import AIPlayer
from .config import config
from .dice import DiceRoller
from .player import Player
from .session import GameSession, new_game
from .types import AIDifficulty, Color, GameMode, GamePhase


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate AI-only Parcheesi games with the rules engine"
    )
    parser.add_argument("--games", type=int, default=1, help="Number of games to play")
    parser.add_argument(
        "--num-players",
        type=int,
        default=4,
        choices=range(config.MIN_PLAYERS, config.MAX_PLAYERS + 1),
        help="Number of players in each game",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        nargs="+",
        default=[config.AI_DEFAULT_DIFFICULTY],
        choices=[d.value for d in AIDifficulty],
        help="AI difficulty per seat (cycled when fewer than players)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for dice and AI")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=config.MAX_TURNS,
        help="Abort a game after this many turns",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO", help="loguru level for stderr"
    )
    return parser.parse_args(argv)


def build_players(num_players: int, difficulties: List[str]) -> List[Player]:
    colors = list(Color)[:num_players]
    return [
        Player(
            display_name=f"{color.value.title()} AI",
            color=color,
            is_ai=True,
            ai_difficulty=AIDifficulty(difficulties[i % len(difficulties)]),
        )
        for i, color in enumerate(colors)
    ]


def play_game(session: GameSession, rng: random.Random, max_turns: int) -> Optional[Player]:
    """Play ``session`` to the end (or ``max_turns``) and return the winner."""
    ais = {p.player_id: AIPlayer.for_player(p, rng=rng) for p in session.state.players}
    while not session.is_over and session.state.turn_number <= max_turns:
        session.roll()
        while session.state.phase == GamePhase.MOVING:
            move = ais[session.current_player.player_id].choose_move(session.state)
            if move is None:
                session.pass_turn()
                break
            session.select_move(move)
    return session.winner


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    rng = random.Random(args.seed)
    wins = {color.value: 0 for color in list(Color)[: args.num_players]}
    unfinished = 0
    start_time = time.time()

    for game_idx in range(args.games):
        players = build_players(args.num_players, args.difficulty)
        session = new_game(
            players, roller=DiceRoller(seed=rng.randrange(2**32)), mode=GameMode.AI
        )
        winner = play_game(session, rng, args.max_turns)
        if winner is None:
            unfinished += 1
            logger.warning(f"Game {game_idx + 1} hit the {args.max_turns} turn cap")
            continue
        wins[winner.color.value] += 1
        logger.info(
            f"Game {game_idx + 1}: {winner.color.value} won in "
            f"{session.state.turn_number} turns, "
            f"{len(session.state.capture_history)} captures"
        )

    print("\n--- SIMULATION COMPLETE ---")
    print(f"Games: {args.games} (unfinished: {unfinished})")
    for color, count in wins.items():
        print(f"  {color:<7} {count}")
    print(f"Simulation Time: {time.time() - start_time:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
