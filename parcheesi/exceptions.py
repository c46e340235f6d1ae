# Error taxonomy for the rules engine. Illegal moves are not errors: the
# generator simply omits them. These exceptions cover contract violations.
class ParcheesiError(Exception):
    """Base exception for rules-engine errors."""

    pass


class InvalidMoveError(ParcheesiError):
    """Raised when a move outside the current legal set is applied."""

    pass


class InvalidPhaseError(ParcheesiError):
    """Raised when a session operation is not allowed in the current phase."""

    pass


class StateDecodeError(ParcheesiError):
    """Raised when a persisted or received payload cannot be decoded."""

    pass


class StateValidationError(ParcheesiError):
    """Raised when a game state violates one of its invariants."""

    pass
