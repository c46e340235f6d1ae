from .evaluation import encode_board, evaluate_state
from .orchestrator import AITurnOrchestrator
from .player import AIPlayer
from .strategies import (
    STRATEGIES,
    AIStrategy,
    EasyStrategy,
    HardStrategy,
    MediumStrategy,
    create_strategy,
)

__all__ = [
    "AIPlayer",
    "AIStrategy",
    "AITurnOrchestrator",
    "EasyStrategy",
    "HardStrategy",
    "MediumStrategy",
    "STRATEGIES",
    "create_strategy",
    "encode_board",
    "evaluate_state",
]
