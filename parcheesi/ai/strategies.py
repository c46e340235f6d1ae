"""AI move-selection strategies.

Each strategy consumes the engine's legal-move list and, for look-ahead, the
engine applier run on private copies of the state. None of them mutate the
state they are given.
"""

from __future__ import annotations

import random
from typing import ClassVar, Dict, List, Optional, Sequence, Type

from loguru import logger

from .. import rules
from ..state import GameState
from ..types import AIDifficulty, LegalMove, MoveType
from .evaluation import evaluate_state


class AIStrategy:
    """Base class: pick one move from the current player's legal moves."""

    name: ClassVar[str] = "base"
    description: ClassVar[str] = ""

    def choose(self, state: GameState) -> Optional[LegalMove]:
        moves = rules.current_legal_moves(state)
        if not moves:
            return None
        return self.select(moves, state)

    def select(self, moves: Sequence[LegalMove], state: GameState) -> LegalMove:  # pragma: no cover - abstract
        raise NotImplementedError


class EasyStrategy(AIStrategy):
    name = AIDifficulty.EASY.value
    description = "Picks a random legal move"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def select(self, moves: Sequence[LegalMove], state: GameState) -> LegalMove:
        return self.rng.choice(list(moves))


class MediumStrategy(AIStrategy):
    name = AIDifficulty.MEDIUM.value
    description = "Finish, then capture, then enter, else advance the furthest token"

    def select(self, moves: Sequence[LegalMove], state: GameState) -> LegalMove:
        for wanted in (
            (MoveType.FINISH,),
            (MoveType.CAPTURE, MoveType.CAPTURE_ENTER),
            (MoveType.ENTER,),
        ):
            found = next((m for m in moves if m.move_type in wanted), None)
            if found is not None:
                return found
        # max() keeps the first of equal origins
        return max(moves, key=lambda m: m.from_position)


class HardStrategy(AIStrategy):
    name = AIDifficulty.HARD.value
    description = "One-ply look-ahead scored by the board heuristic"

    def select(self, moves: Sequence[LegalMove], state: GameState) -> LegalMove:
        player_id = state.current_player.player_id
        best_move = moves[0]
        best_score: Optional[int] = None
        for move in moves:
            simulated = state.clone()
            rules.apply_move(simulated, move)
            score = evaluate_state(simulated, player_id)
            if best_score is None or score > best_score:
                best_score = score
                best_move = move
        logger.debug(f"Hard AI picked {best_move} (score {best_score})")
        return best_move


STRATEGIES: Dict[str, Type[AIStrategy]] = {
    EasyStrategy.name: EasyStrategy,
    MediumStrategy.name: MediumStrategy,
    HardStrategy.name: HardStrategy,
}


def create_strategy(difficulty: str | AIDifficulty, rng: Optional[random.Random] = None) -> AIStrategy:
    """
    Create a strategy instance by difficulty name.

    Raises:
        ValueError: If the difficulty is not recognized.
    """
    name = difficulty.value if isinstance(difficulty, AIDifficulty) else difficulty.lower()
    if name not in STRATEGIES:
        raise ValueError(f"Unknown difficulty '{name}'. Available: {available()}")
    if name == EasyStrategy.name:
        return EasyStrategy(rng)
    return STRATEGIES[name]()


def available() -> List[str]:
    return list(STRATEGIES.keys())
