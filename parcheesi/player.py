"""
Player representation for Parcheesi.
Each player has a unique color and exclusively owns 4 tokens.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from .config import config
from .token import Token
from .types import AIDifficulty, Color


@dataclass(slots=True)
class Player:
    display_name: str
    color: Color
    player_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    is_ai: bool = False
    ai_difficulty: Optional[AIDifficulty] = None
    tokens: List[Token] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Decoded players arrive with their tokens; new players start in the yard
        if not self.tokens:
            self.tokens = [
                Token(token_id=i, color=self.color)
                for i in range(config.TOKENS_PER_PLAYER)
            ]

    @property
    def finished_token_count(self) -> int:
        return sum(1 for token in self.tokens if token.is_finished)

    @property
    def has_won(self) -> bool:
        return self.finished_token_count == config.TOKENS_PER_PLAYER

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "display_name": self.display_name,
            "color": self.color.value,
            "is_ai": self.is_ai,
            "ai_difficulty": self.ai_difficulty.value if self.ai_difficulty else None,
            "tokens": [token.to_dict() for token in self.tokens],
        }

    def __str__(self) -> str:
        return f"Player({self.color.value}, tokens: {[str(token) for token in self.tokens]})"
