import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Rule constants ---
    MAIN_TRACK_LENGTH: int = 52
    HOME_COLUMN_LENGTH: int = 6
    TOKENS_PER_PLAYER: int = 4
    ENTRY_ROLL: int = 5
    YARD_POSITION: int = -1
    MIN_PLAYERS: int = 2
    MAX_PLAYERS: int = 4
    DICE_MIN: int = 1
    DICE_MAX: int = 6

    # Absolute positions on the 52-square loop
    GLOBAL_SAFE_SQUARES: frozenset[int] = field(
        default_factory=lambda: frozenset({0, 8, 13, 21, 26, 34, 39, 47})
    )

    # Derived (populated in __post_init__ due to slots)
    HOME_COLUMN_START: int = 0
    FINISH_POSITION: int = 0

    # --- Runtime settings ---
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 2000))
    AI_THINKING_DELAY_MS: int = int(os.getenv("AI_THINKING_DELAY_MS", 0))
    AI_DEFAULT_DIFFICULTY: str = os.getenv("AI_DEFAULT_DIFFICULTY", "easy")
    AI_MAX_WORKERS: int = int(os.getenv("AI_MAX_WORKERS", 1))

    def __post_init__(self):
        # Home column is numbered 52..57 for every color, 57 being the last square
        self.HOME_COLUMN_START = self.MAIN_TRACK_LENGTH
        self.FINISH_POSITION = self.MAIN_TRACK_LENGTH + self.HOME_COLUMN_LENGTH - 1

        if self.AI_THINKING_DELAY_MS < 0:
            raise ValueError("AI_THINKING_DELAY_MS must be non-negative")
        if self.AI_MAX_WORKERS < 1:
            raise ValueError("AI_MAX_WORKERS must be at least 1")
        if self.AI_DEFAULT_DIFFICULTY not in ("easy", "medium", "hard"):
            raise ValueError(f"Unknown AI_DEFAULT_DIFFICULTY: {self.AI_DEFAULT_DIFFICULTY}")


config = Config()
