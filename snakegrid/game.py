"""Game coordinator: the only object that mutates a run's state."""

from __future__ import annotations

import logging
import random
import threading
import time
from dataclasses import replace
from typing import Callable, List, Optional

from snakegrid import bonus
from snakegrid.config import DEFAULT_CONFIG, GameConfig
from snakegrid.direction import accept, is_direction
from snakegrid.engine import StepResult, step
from snakegrid.food import BoardFull
from snakegrid.grid import Vec2
from snakegrid.state import GameState, initial_state
from snakegrid.status import GameStatus, on_start, on_toggle_pause

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
StatusListener = Callable[[GameStatus, GameState], None]


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class Game:
    """Single-writer container around :class:`GameState`.

    Commands, ticks and bonus expiry all go through one lock and each of
    them swaps in a complete new state, so :meth:`snapshot` never shows a
    half-applied tick. The tick itself is driven from outside at
    ``config.tick_ms`` intervals.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config
        self.random = random.Random(seed)
        self._clock = clock or monotonic_ms
        self._lock = threading.RLock()
        self._listeners: List[StatusListener] = []
        self._intent: Optional[Vec2] = None
        self._state = initial_state(self.random, config)

    # ----- outbound -----
    def snapshot(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    def add_listener(self, listener: StatusListener) -> None:
        """Call ``listener(previous_status, new_state)`` on every status change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StatusListener) -> None:
        self._listeners.remove(listener)

    # ----- inbound commands -----
    def start(self) -> GameState:
        with self._lock:
            status = on_start(self._state.status)
            self._intent = None
            self._commit(initial_state(self.random, self.config, status=status))
            logger.info("Game started")
            return self._state

    def toggle_pause(self) -> GameState:
        with self._lock:
            status = on_toggle_pause(self._state.status)
            if status is self._state.status:
                logger.debug("Pause toggle ignored while %s", status.value)
            else:
                self._commit(replace(self._state, status=status))
            return self._state

    def set_direction(self, requested: Vec2) -> None:
        requested = tuple(requested)
        if not is_direction(requested):
            raise ValueError(f"not a grid direction: {requested!r}")

        with self._lock:
            if self._state.status is GameStatus.GAME_OVER:
                return
            heading = self._state.direction
            if accept(heading, requested) == requested:
                self._intent = requested

    # ----- time -----
    def poll(self) -> GameState:
        """Apply time-based changes (bonus expiry) without moving the snake."""
        with self._lock:
            self._expire_bonus(self._clock())
            return self._state

    def tick(self) -> StepResult:
        with self._lock:
            now = self._clock()
            self._expire_bonus(now)
            if self._state.status is not GameStatus.RUNNING:
                return StepResult(state=self._state)

            try:
                result = step(self._state, self._intent, now, self.random, self.config)
            except BoardFull:
                logger.exception("Board is full, ending the run")
                self._commit(replace(self._state, status=GameStatus.GAME_OVER))
                return StepResult(state=self._state)

            self._intent = None
            self._commit(result.state)
            return result

    # ----- internals -----
    def _expire_bonus(self, now: int) -> None:
        current = self._state.bonus_food
        remaining = bonus.expire(current, now)
        if remaining is not current:
            self._commit(replace(self._state, bonus_food=remaining))

    def _commit(self, new_state: GameState) -> None:
        previous = self._state.status
        self._state = new_state
        if new_state.status is not previous:
            if new_state.status is GameStatus.GAME_OVER:
                logger.info("Game over with score %d", new_state.score)
            for listener in list(self._listeners):
                listener(previous, new_state)

