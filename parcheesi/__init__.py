"""
Parcheesi rules engine.
Deterministic move generation, validation, application, turn control and win
detection for a four-color Parcheesi/Ludo board game.
"""

from parcheesi.board import (
    advance_position,
    entry_square,
    home_column_entry_square,
    is_double_blocked,
    is_global_safe,
)
from parcheesi.config import config
from parcheesi.dice import (
    DiceRoller,
    available_move_values,
    can_enter_board,
    entry_move_value,
)
from parcheesi.exceptions import (
    InvalidMoveError,
    InvalidPhaseError,
    ParcheesiError,
    StateDecodeError,
    StateValidationError,
)
from parcheesi.player import Player
from parcheesi.rules import (
    advance_turn,
    apply_move,
    check_winner,
    current_player_gets_another_turn,
    has_any_legal_move,
    legal_moves,
)
from parcheesi.session import GameSession, MoveProposal, new_game
from parcheesi.state import GameState, validate_state
from parcheesi.token import Token
from parcheesi.types import (
    AIDifficulty,
    CaptureEvent,
    Color,
    DiceResult,
    GameMode,
    GamePhase,
    LegalMove,
    MoveType,
    TokenState,
)

__all__ = [
    "AIDifficulty",
    "CaptureEvent",
    "Color",
    "DiceResult",
    "DiceRoller",
    "GameMode",
    "GamePhase",
    "GameSession",
    "GameState",
    "InvalidMoveError",
    "InvalidPhaseError",
    "LegalMove",
    "MoveProposal",
    "MoveType",
    "ParcheesiError",
    "Player",
    "StateDecodeError",
    "StateValidationError",
    "Token",
    "TokenState",
    "advance_position",
    "advance_turn",
    "apply_move",
    "available_move_values",
    "can_enter_board",
    "check_winner",
    "config",
    "current_player_gets_another_turn",
    "entry_move_value",
    "entry_square",
    "has_any_legal_move",
    "home_column_entry_square",
    "is_double_blocked",
    "is_global_safe",
    "legal_moves",
    "new_game",
    "validate_state",
]
