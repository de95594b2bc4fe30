from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from snakegrid.config import GRID_SIZE
from snakegrid.grid import all_cells
from snakegrid.state import BODY_CHANNEL, BONUS_CHANNEL, FOOD_CHANNEL, HEAD_CHANNEL, GameState, encode_grid
from snakegrid.status import GameStatus

Color = Tuple[int, int, int]

BACKGROUND: Color = (245, 245, 245)
GRID_LINE: Color = (210, 210, 210)
HEAD: Color = (39, 103, 73)
BODY: Color = (56, 161, 105)
FOOD: Color = (220, 40, 40)
BONUS: Color = (230, 180, 20)
TEXT: Color = (40, 40, 40)

HUD_HEIGHT = 28

CHANNEL_COLORS = {
    BODY_CHANNEL: BODY,
    HEAD_CHANNEL: HEAD,
    FOOD_CHANNEL: FOOD,
    BONUS_CHANNEL: BONUS,
}
PAINT_ORDER = (FOOD_CHANNEL, BONUS_CHANNEL, BODY_CHANNEL, HEAD_CHANNEL)

OVERLAY_TEXT = {
    GameStatus.IDLE: "Press Enter to start",
    GameStatus.PAUSED: "Paused - Space to resume",
    GameStatus.GAME_OVER: "Game over - Enter to restart",
}


def window_size(cell_size: int, grid_size: int = GRID_SIZE) -> Tuple[int, int]:
    side = grid_size * cell_size
    return side, side + HUD_HEIGHT


def _cell_rect(x: int, y: int, cell_size: int) -> pygame.Rect:
    return pygame.Rect(x * cell_size, HUD_HEIGHT + y * cell_size, cell_size, cell_size)


def draw(
    surface: pygame.Surface,
    state: GameState,
    cell_size: int,
    font: Optional[pygame.font.Font] = None,
    grid_size: int = GRID_SIZE,
) -> None:
    """Paint one snapshot. Text is skipped when no font is given."""
    surface.fill(BACKGROUND)
    for x, y in all_cells(grid_size):
        pygame.draw.rect(surface, GRID_LINE, _cell_rect(x, y, cell_size), 1)

    # Later channels paint over earlier ones, so the head ends up on top.
    board = encode_grid(state, grid_size)
    for channel in PAINT_ORDER:
        for y, x in np.argwhere(board[channel] > 0):
            pygame.draw.rect(surface, CHANNEL_COLORS[channel], _cell_rect(int(x), int(y), cell_size))

    if font is None:
        return

    surface.blit(font.render(f"Score: {state.score}", True, TEXT), (8, 6))

    message = OVERLAY_TEXT.get(state.status)
    if message:
        width, height = surface.get_size()
        overlay = pygame.Surface((width, height - HUD_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        surface.blit(overlay, (0, HUD_HEIGHT))
        label = font.render(message, True, (250, 250, 250))
        surface.blit(label, label.get_rect(center=(width // 2, HUD_HEIGHT + (height - HUD_HEIGHT) // 2)))
