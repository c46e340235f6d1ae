"""
Field-for-field dict/JSON round-trip of GameState.

Decoding always finishes with ``validate_state`` so the engine never runs on a
state that violates its invariants.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict

from .exceptions import StateDecodeError, StateValidationError
from .player import Player
from .state import (
    Animating,
    Finished,
    GameState,
    Moving,
    Rolling,
    TurnState,
    Waiting,
    validate_state,
)
from .token import Token
from .types import (
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


# --- Encoding ---
def _dice_to_dict(dice: DiceResult) -> Dict[str, int]:
    return {"die1": dice.die1, "die2": dice.die2}


def _move_to_dict(move: LegalMove) -> Dict[str, Any]:
    return {
        "token_index": move.token_index,
        "dice_value": move.dice_value,
        "from_position": move.from_position,
        "to_position": move.to_position,
        "move_type": move.move_type.value,
    }


def _turn_to_dict(turn: TurnState) -> Dict[str, Any]:
    out: Dict[str, Any] = {"phase": turn.phase.value}
    if isinstance(turn, (Moving, Animating)):
        out["dice"] = _dice_to_dict(turn.dice)
        out["remaining_moves"] = list(turn.remaining_moves)
        out["captured_this_turn"] = turn.captured_this_turn
        out["moves_made"] = turn.moves_made
    if isinstance(turn, Animating):
        out["move"] = _move_to_dict(turn.move)
    if isinstance(turn, Finished):
        out["winner_index"] = turn.winner_index
    return out


def state_to_dict(state: GameState) -> Dict[str, Any]:
    return {
        "game_id": state.game_id,
        "mode": state.mode.value,
        "room_code": state.room_code,
        "players": [player.to_dict() for player in state.players],
        "current_player_index": state.current_player_index,
        "turn": _turn_to_dict(state.turn),
        "turn_number": state.turn_number,
        "capture_history": [
            {
                "event_id": event.event_id,
                "capturing_color": event.capturing_color.value,
                "captured_color": event.captured_color.value,
                "position": event.position,
                "turn_number": event.turn_number,
            }
            for event in state.capture_history
        ],
        "created_at": state.created_at.isoformat(),
        "updated_at": state.updated_at.isoformat(),
    }


def dumps(state: GameState, **kwargs) -> str:
    return json.dumps(state_to_dict(state), **kwargs)


# --- Decoding ---
def _field(data: Dict[str, Any], key: str, kind: type) -> Any:
    """Fetch ``data[key]`` and insist on its JSON type; bools never pass as ints."""
    value = data[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise StateDecodeError(
            f"Field '{key}' must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise StateDecodeError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def _timestamp(data: Dict[str, Any], key: str) -> datetime:
    value = datetime.fromisoformat(_field(data, key, str))
    if value.tzinfo is None:
        raise StateDecodeError(f"Timestamp '{key}' has no timezone")
    return value.astimezone(timezone.utc)


def _token_from_dict(data: Any) -> Token:
    data = _object(data, "Token")
    position = _field(data, "track_position", int)
    token = Token(
        token_id=_field(data, "token_id", int),
        color=Color(data["color"]),
        state=TokenState(data["state"]),
        track_position=position,
    )
    if token.track_position != position:
        raise StateValidationError(
            f"Token {token.token_id} of {token.color.value} is in the yard "
            f"at position {position}"
        )
    if _field(data, "is_finished", bool) != token.is_finished:
        raise StateValidationError(
            f"Token {token.token_id} of {token.color.value}: is_finished disagrees with state"
        )
    return token


def _player_from_dict(data: Any) -> Player:
    data = _object(data, "Player")
    difficulty = data.get("ai_difficulty")
    tokens = [_token_from_dict(t) for t in _field(data, "tokens", list)]
    if not tokens:
        raise StateDecodeError(f"Player {data['player_id']} has no tokens")
    return Player(
        display_name=_field(data, "display_name", str),
        color=Color(data["color"]),
        player_id=_field(data, "player_id", str),
        is_ai=_field(data, "is_ai", bool),
        ai_difficulty=AIDifficulty(difficulty) if difficulty is not None else None,
        tokens=tokens,
    )


def _dice_from_dict(data: Any) -> DiceResult:
    data = _object(data, "Dice")
    return DiceResult(_field(data, "die1", int), _field(data, "die2", int))


def _move_from_dict(data: Any) -> LegalMove:
    data = _object(data, "Move")
    return LegalMove(
        token_index=_field(data, "token_index", int),
        dice_value=_field(data, "dice_value", int),
        from_position=_field(data, "from_position", int),
        to_position=_field(data, "to_position", int),
        move_type=MoveType(data["move_type"]),
    )


def _turn_from_dict(data: Any) -> TurnState:
    data = _object(data, "Turn")
    phase = GamePhase(data["phase"])
    if phase == GamePhase.WAITING:
        return Waiting()
    if phase == GamePhase.ROLLING:
        return Rolling()
    if phase == GamePhase.FINISHED:
        return Finished(winner_index=_field(data, "winner_index", int))
    dice = _dice_from_dict(data["dice"])
    remaining = list(_field(data, "remaining_moves", list))
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in remaining):
        raise StateDecodeError(f"Remaining moves must be integers: {remaining}")
    captured = _field(data, "captured_this_turn", bool)
    moves_made = _field(data, "moves_made", int)
    if phase == GamePhase.MOVING:
        return Moving(
            dice=dice,
            remaining_moves=remaining,
            captured_this_turn=captured,
            moves_made=moves_made,
        )
    return Animating(
        dice=dice,
        remaining_moves=remaining,
        move=_move_from_dict(data["move"]),
        captured_this_turn=captured,
        moves_made=moves_made,
    )


def _event_from_dict(data: Any) -> CaptureEvent:
    data = _object(data, "Capture event")
    return CaptureEvent(
        capturing_color=Color(data["capturing_color"]),
        captured_color=Color(data["captured_color"]),
        position=_field(data, "position", int),
        turn_number=_field(data, "turn_number", int),
        event_id=_field(data, "event_id", str),
    )


def state_from_dict(data: Dict[str, Any]) -> GameState:
    """
    Rebuild a GameState from ``state_to_dict`` output.

    Raises:
        StateDecodeError: The payload does not fit the data model.
        StateValidationError: It fits, but breaks an invariant.
    """
    try:
        data = _object(data, "Game state")
        room_code = data.get("room_code")
        if room_code is not None and not isinstance(room_code, str):
            raise StateDecodeError("Field 'room_code' must be str or null")
        state = GameState(
            players=[_player_from_dict(p) for p in _field(data, "players", list)],
            mode=GameMode(data["mode"]),
            current_player_index=_field(data, "current_player_index", int),
            turn=_turn_from_dict(data["turn"]),
            turn_number=_field(data, "turn_number", int),
            capture_history=[
                _event_from_dict(e) for e in _field(data, "capture_history", list)
            ],
            game_id=_field(data, "game_id", str),
            room_code=room_code,
            created_at=_timestamp(data, "created_at"),
            updated_at=_timestamp(data, "updated_at"),
        )
    except (StateDecodeError, StateValidationError):
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise StateDecodeError(f"Malformed game state payload: {e!r}") from e

    validate_state(state)
    return state


def loads(payload: str) -> GameState:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise StateDecodeError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise StateDecodeError("Game state payload must be a JSON object")
    return state_from_dict(data)
