"""
Game session: drives one GameState through roll -> move -> turn end -> win.

The session is the inbound surface for UI, AI and network collaborators. All
collaborators (state, dice roller) are passed in explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from . import rules
from .config import config
from .dice import DiceRoller
from .exceptions import InvalidMoveError, InvalidPhaseError
from .player import Player
from .state import Animating, GameState, Moving, Rolling, validate_state
from .types import DiceResult, GamePhase, LegalMove


@dataclass(slots=True)
class MoveProposal:
    """Outcome of a proposed move checked against the authoritative snapshot."""

    accepted: bool
    reason: str = ""
    move: Optional[LegalMove] = None


@dataclass(slots=True)
class GameSession:
    state: GameState
    roller: DiceRoller = field(default_factory=DiceRoller)

    # --- Lifecycle ---
    def start(self) -> None:
        """Waiting -> Rolling."""
        self._require_phase(GamePhase.WAITING)
        if not config.MIN_PLAYERS <= len(self.state.players) <= config.MAX_PLAYERS:
            raise InvalidPhaseError(
                f"A game needs {config.MIN_PLAYERS}-{config.MAX_PLAYERS} players"
            )
        self.state.turn = Rolling()
        self.state.touch()
        logger.info(
            f"Game {self.state.game_id} started with "
            f"{[p.color.value for p in self.state.players]}"
        )

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def winner(self) -> Optional[Player]:
        return rules.check_winner(self.state)

    @property
    def is_over(self) -> bool:
        return self.state.phase == GamePhase.FINISHED

    # --- Rolling ---
    def roll(self, dice: Optional[DiceResult] = None) -> DiceResult:
        """
        Roll for the current player (or use ``dice`` supplied by the caller).

        A roll with no legal move at all forfeits the turn on the spot.
        """
        self._require_phase(GamePhase.ROLLING)
        dice = dice if dice is not None else self.roller.roll()
        rules.begin_moving(self.state, dice)
        logger.debug(
            f"{self.current_player.color.value} rolled {dice.die1}+{dice.die2}"
        )
        if not rules.current_legal_moves(self.state):
            logger.warning(
                f"{self.current_player.color.value} has no legal move for "
                f"{dice.die1}+{dice.die2}, turn forfeited"
            )
            rules.advance_turn(self.state)
        return dice

    def legal_moves(self) -> List[LegalMove]:
        return rules.current_legal_moves(self.state)

    # --- Moving ---
    def select_move(self, move: LegalMove) -> None:
        """Apply ``move`` for the current player and settle the turn."""
        self._require_phase(GamePhase.MOVING)
        rules.apply_move(self.state, move)
        self._settle()

    def begin_move(self, move: LegalMove) -> None:
        """Moving -> Animating, holding ``move`` in flight until ``complete_move``."""
        self._require_phase(GamePhase.MOVING)
        if not rules.is_legal(self.state, move):
            raise InvalidMoveError(f"Move {move} is not legal in the current state")
        turn = self.state.turn
        self.state.turn = Animating(
            dice=turn.dice,
            remaining_moves=turn.remaining_moves,
            move=move,
            captured_this_turn=turn.captured_this_turn,
            moves_made=turn.moves_made,
        )
        self.state.touch()

    def complete_move(self) -> None:
        self._require_phase(GamePhase.ANIMATING)
        turn = self.state.turn
        self.state.turn = Moving(
            dice=turn.dice,
            remaining_moves=turn.remaining_moves,
            captured_this_turn=turn.captured_this_turn,
            moves_made=turn.moves_made,
        )
        rules.apply_move(self.state, turn.move)
        self._settle()

    def propose_move(self, player_id: str, move: LegalMove) -> MoveProposal:
        """
        Authority path for networked play: re-validate a client's move against
        the current snapshot and apply it only if it is legal. Rejections leave
        the state untouched.
        """
        reason = ""
        if self.state.phase != GamePhase.MOVING:
            reason = f"not accepting moves during {self.state.phase.value}"
        elif self.current_player.player_id != player_id:
            reason = "not this player's turn"
        elif not rules.is_legal(self.state, move):
            reason = "move is not legal in the current state"

        if reason:
            logger.warning(f"Rejected move from {player_id}: {reason}")
            return MoveProposal(accepted=False, reason=reason, move=move)

        self.select_move(move)
        return MoveProposal(accepted=True, move=move)

    def pass_turn(self) -> None:
        """Turn timer expiry: the current player passes."""
        if self.state.phase in (GamePhase.WAITING, GamePhase.FINISHED):
            raise InvalidPhaseError(f"Cannot pass during {self.state.phase.value}")
        logger.warning(f"{self.current_player.color.value} passed (timer expired)")
        rules.advance_turn(self.state)

    # --- Internals ---
    def _settle(self) -> None:
        winner = rules.check_winner(self.state)
        if winner is not None:
            rules.finish_game(self.state, self.state.players.index(winner))
            logger.info(
                f"{winner.color.value} ({winner.display_name}) won on turn "
                f"{self.state.turn_number}"
            )
            return

        turn = self.state.turn
        if turn.remaining_moves:
            if rules.current_legal_moves(self.state):
                return
            # Leftover values nobody can use: the turn passes without a bonus
            logger.debug(
                f"{self.current_player.color.value} cannot use {turn.remaining_moves}, turn ends"
            )
            rules.advance_turn(self.state)
            return

        # Roll exhausted: bonus or hand over
        if rules.current_player_gets_another_turn(turn.dice, turn.captured_this_turn):
            logger.debug(f"{self.current_player.color.value} earns a bonus roll")
            rules.grant_bonus_roll(self.state)
        else:
            rules.advance_turn(self.state)

    def _require_phase(self, phase: GamePhase) -> None:
        if self.state.phase != phase:
            raise InvalidPhaseError(
                f"Expected {phase.value} phase, game is in {self.state.phase.value}"
            )


def new_game(players: List[Player], roller: Optional[DiceRoller] = None, **kwargs) -> GameSession:
    """Create a session around a fresh, validated state (Rolling unless ``turn`` is given)."""
    state = GameState(players=players, **kwargs)
    validate_state(state)
    return GameSession(state=state, roller=roller or DiceRoller())
