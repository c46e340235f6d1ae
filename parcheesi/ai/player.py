from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from ..config import config
from ..player import Player
from ..state import GameState
from ..types import AIDifficulty, LegalMove
from .strategies import AIStrategy, create_strategy


@dataclass(slots=True)
class AIPlayer:
    """Chooses moves for one difficulty; always works on a private copy."""

    difficulty: AIDifficulty = AIDifficulty(config.AI_DEFAULT_DIFFICULTY)
    rng: Optional[random.Random] = None
    strategy: AIStrategy = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.strategy = create_strategy(self.difficulty, self.rng)

    @classmethod
    def for_player(cls, player: Player, rng: Optional[random.Random] = None) -> "AIPlayer":
        difficulty = player.ai_difficulty or AIDifficulty(config.AI_DEFAULT_DIFFICULTY)
        return cls(difficulty=difficulty, rng=rng)

    def choose_move(self, state: GameState) -> Optional[LegalMove]:
        """Move for the current player, or None if there is nothing to play."""
        return self.strategy.choose(state.clone())
