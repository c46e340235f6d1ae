from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import config
from .types import DiceResult


def available_move_values(dice: DiceResult) -> List[int]:
    """Move values granted by a roll: two, or four on a double."""
    if dice.is_double:
        return [dice.die1, dice.die2, dice.die1, dice.die2]
    return [dice.die1, dice.die2]


def can_enter_board(dice: DiceResult) -> bool:
    """A token leaves the yard on a 5 shown by either die or by their sum."""
    return (
        dice.die1 == config.ENTRY_ROLL
        or dice.die2 == config.ENTRY_ROLL
        or dice.total == config.ENTRY_ROLL
    )


def entry_move_value(dice: DiceResult) -> int:
    """The move value consumed when entering; 0 if the roll cannot enter."""
    if dice.die1 == config.ENTRY_ROLL or dice.die2 == config.ENTRY_ROLL:
        return config.ENTRY_ROLL
    if dice.total == config.ENTRY_ROLL:
        # Sum-of-five entry consumes the first die, leaving the second
        return dice.die1
    return 0


def entry_value_for(
    value: int, dice: DiceResult, remaining: Optional[Sequence[int]] = None
) -> Optional[int]:
    """Return the value a yard token consumes when entering with ``value``.

    A literal 5 always enters. On a sum-of-five roll the first die's value
    enters, but only while both dice are still unconsumed.
    """
    if value == config.ENTRY_ROLL:
        return value
    if (
        dice.total == config.ENTRY_ROLL
        and value == dice.die1
        and dice.die1 != config.ENTRY_ROLL
        and dice.die2 != config.ENTRY_ROLL
    ):
        values = available_move_values(dice) if remaining is None else remaining
        if dice.die1 in values and dice.die2 in values:
            return value
    return None


@dataclass(slots=True)
class DiceRoller:
    """Seedable randomness source supplying two independent dice per roll."""

    seed: Optional[int] = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def roll(self) -> DiceResult:
        return DiceResult.roll(self.rng)
