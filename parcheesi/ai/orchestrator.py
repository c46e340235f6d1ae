"""
Background AI turns.

Move selection runs on a worker thread against a deep copy taken at submit
time, so the caller's GameState may keep being read (but must not be the
object the worker sees). The chosen move comes back through a Future.
"""

from __future__ import annotations

import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from loguru import logger

from ..config import config
from ..state import GameState
from ..types import LegalMove
from .player import AIPlayer


class AITurnOrchestrator:
    def __init__(
        self,
        max_workers: int = config.AI_MAX_WORKERS,
        thinking_delay_ms: int = config.AI_THINKING_DELAY_MS,
    ) -> None:
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="parcheesi-ai"
        )
        self._thinking_delay_s = max(0, thinking_delay_ms) / 1000.0

    def submit(self, ai: AIPlayer, state: GameState) -> "Future[Optional[LegalMove]]":
        snapshot = state.clone()

        def _run() -> Optional[LegalMove]:
            move = ai.choose_move(snapshot)
            if self._thinking_delay_s:
                time.sleep(self._thinking_delay_s)
            logger.debug(
                f"AI ({ai.difficulty.value}) for {snapshot.current_player.color.value} chose {move}"
            )
            return move

        return self._executor.submit(_run)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "AITurnOrchestrator":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
