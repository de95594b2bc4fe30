from __future__ import annotations

import enum


class GameStatus(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


def on_start(status: GameStatus) -> GameStatus:
    # Start always (re)starts, whatever came before.
    return GameStatus.RUNNING


def on_toggle_pause(status: GameStatus) -> GameStatus:
    if status is GameStatus.RUNNING:
        return GameStatus.PAUSED
    if status is GameStatus.PAUSED:
        return GameStatus.RUNNING
    return status
