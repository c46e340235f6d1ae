from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field
from enum import Enum

from .config import config


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class TokenState(str, Enum):
    IN_YARD = "in_yard"  # not yet entered, or captured
    ON_BOARD = "on_board"  # main 52-square loop
    IN_HOME_COLUMN = "in_home_column"  # private 6-square lane
    FINISHED = "finished"


class MoveType(str, Enum):
    ENTER = "enter"
    CAPTURE_ENTER = "capture_enter"
    NORMAL = "normal"
    CAPTURE = "capture"
    HOME_COLUMN = "home_column"
    FINISH = "finish"

    @property
    def is_capture(self) -> bool:
        return self in (MoveType.CAPTURE, MoveType.CAPTURE_ENTER)


class GamePhase(str, Enum):
    WAITING = "waiting"
    ROLLING = "rolling"
    MOVING = "moving"
    ANIMATING = "animating"
    FINISHED = "finished"


class GameMode(str, Enum):
    LOCAL = "local"
    ONLINE = "online"
    AI = "ai"
    PRIVATE = "private"


class AIDifficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True, slots=True)
class DiceResult:
    die1: int
    die2: int

    def __post_init__(self) -> None:
        for value in (self.die1, self.die2):
            if not config.DICE_MIN <= value <= config.DICE_MAX:
                raise ValueError(f"Die value out of range: {value}")

    @property
    def is_double(self) -> bool:
        return self.die1 == self.die2

    @property
    def total(self) -> int:
        return self.die1 + self.die2

    @classmethod
    def roll(cls, rng: random.Random) -> "DiceResult":
        return cls(
            rng.randint(config.DICE_MIN, config.DICE_MAX),
            rng.randint(config.DICE_MIN, config.DICE_MAX),
        )


@dataclass(frozen=True, slots=True)
class LegalMove:
    """A candidate action produced by the move generator.

    Moves are plain values: two moves are equal when every field matches, which
    is what re-validation against a fresh generation relies on.
    """

    token_index: int
    dice_value: int
    from_position: int  # -1 for the yard
    to_position: int
    move_type: MoveType


@dataclass(frozen=True, slots=True)
class CaptureEvent:
    capturing_color: Color
    captured_color: Color
    position: int
    turn_number: int
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
