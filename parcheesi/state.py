"""
Authoritative game snapshot.

The phase is carried by a ``turn`` variant holding exactly the data that is
valid in that phase: ``Rolling`` has no dice, ``Moving`` has the dice and the
unconsumed move values, ``Animating`` additionally has the move in flight and
``Finished`` names the winner.
"""

from __future__ import annotations

import copy
import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Union

from .config import config
from .dice import available_move_values
from .exceptions import StateValidationError
from .player import Player
from .types import CaptureEvent, DiceResult, GameMode, GamePhase, LegalMove


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class Waiting:
    phase = GamePhase.WAITING


@dataclass(slots=True)
class Rolling:
    phase = GamePhase.ROLLING


@dataclass(slots=True)
class Moving:
    phase = GamePhase.MOVING

    dice: DiceResult
    remaining_moves: List[int]
    captured_this_turn: bool = False
    moves_made: int = 0


@dataclass(slots=True)
class Animating:
    phase = GamePhase.ANIMATING

    dice: DiceResult
    remaining_moves: List[int]
    move: LegalMove
    captured_this_turn: bool = False
    moves_made: int = 0


@dataclass(slots=True)
class Finished:
    phase = GamePhase.FINISHED

    winner_index: int


TurnState = Union[Waiting, Rolling, Moving, Animating, Finished]


@dataclass(slots=True)
class GameState:
    players: List[Player]
    mode: GameMode = GameMode.LOCAL
    current_player_index: int = 0
    turn: TurnState = field(default_factory=Rolling)
    turn_number: int = 1
    capture_history: List[CaptureEvent] = field(default_factory=list)
    game_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    room_code: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def phase(self) -> GamePhase:
        return self.turn.phase

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def current_dice(self) -> Optional[DiceResult]:
        return getattr(self.turn, "dice", None)

    @property
    def remaining_moves(self) -> List[int]:
        return list(getattr(self.turn, "remaining_moves", []))

    def player_by_id(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.player_id == player_id), None)

    def touch(self) -> None:
        self.updated_at = utcnow()

    def clone(self) -> "GameState":
        """Private deep copy for look-ahead or background evaluation."""
        return copy.deepcopy(self)


def validate_state(state: GameState) -> None:
    """
    Check every data-model invariant, raising StateValidationError on the first
    violation. Run after any deserialization, before game logic touches the state.
    """
    players = state.players
    if not config.MIN_PLAYERS <= len(players) <= config.MAX_PLAYERS:
        raise StateValidationError(f"Expected 2-4 players, got {len(players)}")

    colors = [p.color for p in players]
    if len(set(colors)) != len(colors):
        raise StateValidationError("Player colors must be unique")
    ids = [p.player_id for p in players]
    if len(set(ids)) != len(ids):
        raise StateValidationError("Player ids must be unique")

    for player in players:
        if len(player.tokens) != config.TOKENS_PER_PLAYER:
            raise StateValidationError(
                f"Player {player.color.value} must own {config.TOKENS_PER_PLAYER} tokens"
            )
        for idx, token in enumerate(player.tokens):
            if token.color != player.color or token.token_id != idx:
                raise StateValidationError(
                    f"Token {idx} of {player.color.value} has mismatched ownership"
                )
            if not token.is_consistent():
                raise StateValidationError(
                    f"Token {idx} of {player.color.value} is {token.state.value} "
                    f"at position {token.track_position}"
                )

    if not 0 <= state.current_player_index < len(players):
        raise StateValidationError(
            f"Current player index {state.current_player_index} out of range"
        )
    if state.turn_number < 1:
        raise StateValidationError("Turn number must start at 1")

    turn = state.turn
    if isinstance(turn, (Moving, Animating)):
        granted = Counter(available_move_values(turn.dice))
        remaining = Counter(turn.remaining_moves)
        if remaining - granted:
            raise StateValidationError(
                f"Remaining moves {turn.remaining_moves} not granted by {turn.dice}"
            )
        if turn.moves_made < 0:
            raise StateValidationError("moves_made must be non-negative")
    if isinstance(turn, Animating) and turn.move.dice_value not in turn.remaining_moves:
        raise StateValidationError("Move in flight consumes an unavailable value")
    if isinstance(turn, Finished):
        if not 0 <= turn.winner_index < len(players):
            raise StateValidationError("Winner index out of range")
        if not players[turn.winner_index].has_won:
            raise StateValidationError("Recorded winner has unfinished tokens")
