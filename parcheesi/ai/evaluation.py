from __future__ import annotations

import numpy as np

from .. import board
from ..config import config
from ..player import Player
from ..state import GameState
from ..types import Color, TokenState

# Column layout: 0 = yard, 1..52 = main track 0..51, 53..58 = home column 52..57
NUM_CHANNELS = 6
NUM_COLUMNS = 1 + config.MAIN_TRACK_LENGTH + config.HOME_COLUMN_LENGTH

YARD_SCORE = -50
STEP_SCORE = 5
SAFE_BONUS = 20
UNSAFE_PENALTY = -5
HOME_COLUMN_BASE = 200
HOME_COLUMN_STEP = 20
FINISHED_SCORE = 500
OPPONENT_PROGRESS_DIVISOR = 3
OPPONENT_FINISHED_PENALTY = 300

_SAFE_ROW = np.zeros(NUM_COLUMNS, dtype=np.float32)
_SAFE_ROW[[1 + sq for sq in sorted(config.GLOBAL_SAFE_SQUARES)]] = 1.0


def _column(position: int) -> int:
    # Yard is -1, so every position shifts by one column
    return position + 1


def _seat_order(state: GameState, perspective: Color) -> list[Player]:
    """Players in turn order starting with ``perspective``."""
    players = state.players
    start = next(i for i, p in enumerate(players) if p.color == perspective)
    return [players[(start + k) % len(players)] for k in range(len(players))]


def encode_board(state: GameState, perspective: Color) -> np.ndarray:
    """
    Build a (6, 59) float32 tensor of the board seen from ``perspective``.

    Channels:
    0: Perspective player's tokens
    1-3: Opponents, in turn order after the perspective player
    4: Global safe squares (fixed)
    5: Blockades (any color)
    """
    out = np.zeros((NUM_CHANNELS, NUM_COLUMNS), dtype=np.float32)
    for channel, player in enumerate(_seat_order(state, perspective)):
        row = out[channel]
        for token in player.tokens:
            row[_column(token.track_position)] += 1.0
        for square in board.blockade_squares(player.color, state.players):
            out[5, _column(square)] = 1.0
    out[4] = _SAFE_ROW
    return out


def progress_score(position: int, color: Color) -> int:
    """Score for steps travelled from the color's entry square."""
    entry = board.entry_square(color)
    if position >= entry:
        steps = position - entry
    else:
        steps = config.MAIN_TRACK_LENGTH - entry + position
    return steps * STEP_SCORE


def _token_scores(player: Player) -> np.ndarray:
    scores = np.zeros(len(player.tokens), dtype=np.int64)
    for i, token in enumerate(player.tokens):
        if token.state == TokenState.IN_YARD:
            scores[i] = YARD_SCORE
        elif token.state == TokenState.ON_BOARD:
            pos = token.track_position
            safety = SAFE_BONUS if board.is_global_safe(pos) else UNSAFE_PENALTY
            scores[i] = progress_score(pos, player.color) + safety
        elif token.state == TokenState.IN_HOME_COLUMN:
            scores[i] = HOME_COLUMN_BASE + token.track_position * HOME_COLUMN_STEP
        else:
            scores[i] = FINISHED_SCORE
    return scores


def evaluate_state(state: GameState, player_id: str) -> int:
    """Heuristic value of ``state`` for the given player. Higher is better."""
    me = state.player_by_id(player_id)
    if me is None:
        return 0
    score = int(_token_scores(me).sum())
    for opponent in state.players:
        if opponent.player_id == player_id:
            continue
        on_board = np.array(
            [
                progress_score(t.track_position, opponent.color)
                for t in opponent.tokens
                if t.state == TokenState.ON_BOARD
            ],
            dtype=np.int64,
        )
        score -= int((on_board // OPPONENT_PROGRESS_DIVISOR).sum())
        score -= opponent.finished_token_count * OPPONENT_FINISHED_PENALTY
    return score
