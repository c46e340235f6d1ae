"""
Parcheesi rules engine.

Pure functions over caller-owned snapshots: move generation and validation,
applying a single move, turn control and win detection. Nothing here holds
state of its own; ``apply_move`` and the turn functions mutate only the
GameState they are given.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from loguru import logger

from . import board
from .config import config
from .dice import available_move_values, entry_value_for
from .exceptions import InvalidMoveError
from .player import Player
from .state import Finished, GameState, Moving, Rolling
from .types import CaptureEvent, DiceResult, LegalMove, MoveType, TokenState


# --- Move generation & validation ---
def legal_moves(
    player: Player,
    dice: DiceResult,
    all_players: Sequence[Player],
    remaining: Optional[Sequence[int]] = None,
) -> List[LegalMove]:
    """
    Enumerate every legal move for ``player``.

    Args:
        player: The player to move.
        dice: The roll being spent.
        all_players: Full roster, read only.
        remaining: Unconsumed move values; defaults to everything the roll grants.

    Returns:
        List[LegalMove]: Possibly empty. Doubles consider each copy of a value
        independently, so identical moves may repeat.
    """
    values = list(available_move_values(dice) if remaining is None else remaining)
    moves: List[LegalMove] = []
    for token_index, token in enumerate(player.tokens):
        if token.is_finished:
            continue
        for value in values:
            move = validate_move(player, token_index, value, dice, all_players, values)
            if move is not None:
                moves.append(move)
    return moves


def has_any_legal_move(
    player: Player,
    dice: DiceResult,
    all_players: Sequence[Player],
    remaining: Optional[Sequence[int]] = None,
) -> bool:
    return bool(legal_moves(player, dice, all_players, remaining))


def validate_move(
    player: Player,
    token_index: int,
    move_value: int,
    dice: DiceResult,
    all_players: Sequence[Player],
    remaining: Optional[Sequence[int]] = None,
) -> Optional[LegalMove]:
    """Build the move for one (token, value) pair, or None if it is illegal."""
    token = player.tokens[token_index]
    color = player.color

    if token.state == TokenState.IN_YARD:
        if entry_value_for(move_value, dice, remaining) is None:
            return None
        entry = board.entry_square(color)
        if board.is_double_blocked(entry, color, all_players):
            return None
        captures = board.has_opponent_token(
            entry, color, all_players
        ) and not board.is_global_safe(entry)
        return LegalMove(
            token_index=token_index,
            dice_value=move_value,
            from_position=config.YARD_POSITION,
            to_position=entry,
            move_type=MoveType.CAPTURE_ENTER if captures else MoveType.ENTER,
        )

    if token.state == TokenState.ON_BOARD:
        dest = board.advance_position(token.track_position, move_value, color)
        if dest is None:
            return None
        if dest >= config.HOME_COLUMN_START:
            # Crossing into the private column: no blockades, no captures
            move_type = (
                MoveType.FINISH if dest == config.FINISH_POSITION else MoveType.HOME_COLUMN
            )
        else:
            if board.is_double_blocked(dest, color, all_players):
                return None
            captures = board.has_opponent_token(
                dest, color, all_players
            ) and not board.is_global_safe(dest)
            move_type = MoveType.CAPTURE if captures else MoveType.NORMAL
        return LegalMove(
            token_index=token_index,
            dice_value=move_value,
            from_position=token.track_position,
            to_position=dest,
            move_type=move_type,
        )

    if token.state == TokenState.IN_HOME_COLUMN:
        dest = token.track_position + move_value
        if dest > config.FINISH_POSITION:
            return None  # exact count required
        return LegalMove(
            token_index=token_index,
            dice_value=move_value,
            from_position=token.track_position,
            to_position=dest,
            move_type=(
                MoveType.FINISH if dest == config.FINISH_POSITION else MoveType.HOME_COLUMN
            ),
        )

    return None


def current_legal_moves(state: GameState) -> List[LegalMove]:
    """Legal moves for the current player against the remaining move values."""
    if not isinstance(state.turn, Moving):
        return []
    return legal_moves(
        state.current_player,
        state.turn.dice,
        state.players,
        state.turn.remaining_moves,
    )


def is_legal(state: GameState, move: LegalMove) -> bool:
    return move in current_legal_moves(state)


# --- Move application ---
def apply_move(state: GameState, move: LegalMove) -> GameState:
    """
    Commit one move to ``state`` in place and return it.

    The move is re-validated against the current snapshot first; a move that
    is not in the current legal set raises InvalidMoveError and leaves the
    state untouched.
    """
    turn = state.turn
    if not isinstance(turn, Moving):
        raise InvalidMoveError(f"Cannot apply a move during the {state.phase.value} phase")
    if not is_legal(state, move):
        raise InvalidMoveError(f"Move {move} is not legal in the current state")

    player = state.current_player
    token = player.tokens[move.token_index]

    if move.move_type in (MoveType.ENTER, MoveType.CAPTURE_ENTER):
        token.place_on_board(move.to_position)
    elif move.move_type in (MoveType.NORMAL, MoveType.CAPTURE):
        token.place_on_board(move.to_position)
    elif move.move_type == MoveType.HOME_COLUMN:
        token.enter_home_column(move.to_position)
    else:
        token.finish()

    if move.move_type.is_capture:
        _capture_at(state, move.to_position)
        turn.captured_this_turn = True

    turn.remaining_moves.remove(move.dice_value)
    turn.moves_made += 1
    state.touch()
    logger.debug(
        f"{player.color.value} token {move.token_index} {move.move_type.value} "
        f"{move.from_position} -> {move.to_position} (remaining {turn.remaining_moves})"
    )
    return state


def _capture_at(state: GameState, position: int) -> None:
    """Send every opponent token on ``position`` home; log one event per color."""
    mover = state.current_player.color
    captured_colors = []
    for color, token in board.opponent_tokens_at(position, mover, state.players):
        token.send_to_yard()
        if color not in captured_colors:
            captured_colors.append(color)
    for color in captured_colors:
        state.capture_history.append(
            CaptureEvent(
                capturing_color=mover,
                captured_color=color,
                position=position,
                turn_number=state.turn_number,
            )
        )
        logger.debug(f"{mover.value} captured {color.value} at {position}")


# --- Turn control ---
def current_player_gets_another_turn(dice: DiceResult, captured_this_turn: bool) -> bool:
    """Doubles or at least one capture earn another roll."""
    return dice.is_double or captured_this_turn


def advance_turn(state: GameState) -> GameState:
    """Hand the dice to the next player and clear per-turn data."""
    state.current_player_index = (state.current_player_index + 1) % len(state.players)
    state.turn = Rolling()
    state.turn_number += 1
    state.touch()
    logger.debug(
        f"Turn {state.turn_number}: {state.current_player.color.value} to roll"
    )
    return state


def begin_moving(state: GameState, dice: DiceResult) -> GameState:
    """Rolling -> Moving with every move value the roll grants."""
    state.turn = Moving(dice=dice, remaining_moves=available_move_values(dice))
    state.touch()
    return state


def grant_bonus_roll(state: GameState) -> GameState:
    """Same player rolls again; the turn number is kept."""
    state.turn = Rolling()
    state.touch()
    return state


def finish_game(state: GameState, winner_index: int) -> GameState:
    state.turn = Finished(winner_index=winner_index)
    state.touch()
    return state


# --- Win detection ---
def check_winner(state: GameState) -> Optional[Player]:
    """First player, in turn order, whose four tokens are all finished."""
    return next((player for player in state.players if player.has_won), None)
