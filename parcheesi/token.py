"""
Token representation for Parcheesi.
Each player owns 4 tokens that travel yard -> main track -> home column -> center.
"""

from dataclasses import dataclass

from .config import config
from .types import Color, TokenState


@dataclass(slots=True)
class Token:
    """
    A single token. Holds state only; legality lives in the rules module.

    ``track_position`` is -1 in the yard, 0-51 on the main loop and 52-57 in
    the home column (57 is the final square, kept once finished).
    """

    token_id: int  # 0, 1, 2, 3 for each player
    color: Color
    state: TokenState = TokenState.IN_YARD
    track_position: int = config.YARD_POSITION

    def __post_init__(self):
        """Yard tokens always sit at -1."""
        if self.state == TokenState.IN_YARD:
            self.track_position = config.YARD_POSITION

    @property
    def is_finished(self) -> bool:
        return self.state == TokenState.FINISHED

    def is_in_yard(self) -> bool:
        return self.state == TokenState.IN_YARD

    def is_consistent(self) -> bool:
        """Check that ``track_position`` lies in the range implied by ``state``."""
        pos = self.track_position
        if self.state == TokenState.IN_YARD:
            return pos == config.YARD_POSITION
        if self.state == TokenState.ON_BOARD:
            return 0 <= pos < config.MAIN_TRACK_LENGTH
        if self.state == TokenState.IN_HOME_COLUMN:
            return config.HOME_COLUMN_START <= pos <= config.FINISH_POSITION
        return pos == config.FINISH_POSITION

    # --- State transitions ---
    def place_on_board(self, position: int) -> None:
        self.state = TokenState.ON_BOARD
        self.track_position = position

    def enter_home_column(self, position: int) -> None:
        self.state = TokenState.IN_HOME_COLUMN
        self.track_position = position

    def finish(self) -> None:
        self.state = TokenState.FINISHED
        self.track_position = config.FINISH_POSITION

    def send_to_yard(self) -> None:
        self.state = TokenState.IN_YARD
        self.track_position = config.YARD_POSITION

    def to_dict(self) -> dict:
        return {
            "token_id": self.token_id,
            "color": self.color.value,
            "state": self.state.value,
            "track_position": self.track_position,
            "is_finished": self.is_finished,
        }

    def __str__(self) -> str:
        return f"Token({self.color.value}_{self.token_id}: {self.state.value} at {self.track_position})"
