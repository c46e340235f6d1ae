"""
Board topology for Parcheesi.
Static per-color tables on the unified 52-square loop plus occupancy queries
that scan the players' owned tokens (no stored cross references).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .config import config
from .player import Player
from .token import Token
from .types import Color, TokenState

# Square where a color's tokens appear when leaving the yard
ENTRY_SQUARES: Dict[Color, int] = {
    Color.RED: 0,
    Color.BLUE: 13,
    Color.GREEN: 26,
    Color.YELLOW: 39,
}

# Last main-track square before a color's private home column
HOME_COLUMN_ENTRY_SQUARES: Dict[Color, int] = {
    Color.RED: 51,
    Color.BLUE: 12,
    Color.GREEN: 25,
    Color.YELLOW: 38,
}

# Normalized home-column numbering, identical for every color
HOME_COLUMN_POSITIONS: Tuple[int, ...] = tuple(
    range(config.HOME_COLUMN_START, config.FINISH_POSITION + 1)
)


def entry_square(color: Color) -> int:
    return ENTRY_SQUARES[color]


def home_column_entry_square(color: Color) -> int:
    return HOME_COLUMN_ENTRY_SQUARES[color]


def home_column(color: Color) -> Tuple[int, ...]:
    """Ordered track positions of ``color``'s home column, entry first."""
    return HOME_COLUMN_POSITIONS


def is_global_safe(position: int) -> bool:
    return position in config.GLOBAL_SAFE_SQUARES


def distance_to_home_entry(position: int, color: Color) -> int:
    """Forward steps from ``position`` to the color's home-column entry square."""
    home_entry = home_column_entry_square(color)
    if position <= home_entry:
        return home_entry - position
    return (config.MAIN_TRACK_LENGTH - position) + home_entry


def advance_position(position: int, steps: int, color: Color) -> Optional[int]:
    """
    Advance a main-track position by ``steps``.

    Stays on the loop while ``steps`` does not exceed the distance to the home
    entry; the excess becomes a home-column position (excess 1 -> 52).

    Returns:
        The new track position, or None when the move would overshoot the
        final home-column square.
    """
    distance = distance_to_home_entry(position, color)
    if steps <= distance:
        return (position + steps) % config.MAIN_TRACK_LENGTH
    column_position = config.HOME_COLUMN_START + (steps - distance) - 1
    if column_position > config.FINISH_POSITION:
        return None
    return column_position


# --- Occupancy queries ---
def opponent_tokens_at(
    position: int, mover: Color, players: Sequence[Player]
) -> List[Tuple[Color, Token]]:
    """All opponent tokens on main-track square ``position``, in player order."""
    out: List[Tuple[Color, Token]] = []
    for player in players:
        if player.color == mover:
            continue
        for token in player.tokens:
            if token.state == TokenState.ON_BOARD and token.track_position == position:
                out.append((player.color, token))
    return out


def has_opponent_token(position: int, mover: Color, players: Sequence[Player]) -> bool:
    return bool(opponent_tokens_at(position, mover, players))


def is_double_blocked(position: int, mover: Color, players: Sequence[Player]) -> bool:
    """True if a single opponent color has two or more tokens on ``position``.

    Mixed colors never form a blockade, and the mover's own tokens never
    block it.
    """
    counts: Dict[Color, int] = {}
    for color, _ in opponent_tokens_at(position, mover, players):
        counts[color] = counts.get(color, 0) + 1
    return any(count >= 2 for count in counts.values())


def blockade_squares(color: Color, players: Sequence[Player]) -> List[int]:
    """Main-track squares where ``color`` holds two or more tokens."""
    counts: Dict[int, int] = {}
    for player in players:
        if player.color != color:
            continue
        for token in player.tokens:
            if token.state == TokenState.ON_BOARD:
                counts[token.track_position] = counts.get(token.track_position, 0) + 1
    return sorted(pos for pos, count in counts.items() if count >= 2)
