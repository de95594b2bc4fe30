from __future__ import annotations

import argparse
import logging
import sys

import pygame

from snakegrid.config import DEFAULT_CONFIG
from snakegrid.direction import DIRECTIONS, swipe_direction
from snakegrid.game import Game
from snakegrid.render import draw, window_size
from snakegrid.state import GameState
from snakegrid.status import GameStatus

KEY_DIRECTIONS = {
    pygame.K_UP: DIRECTIONS["UP"],
    pygame.K_w: DIRECTIONS["UP"],
    pygame.K_DOWN: DIRECTIONS["DOWN"],
    pygame.K_s: DIRECTIONS["DOWN"],
    pygame.K_LEFT: DIRECTIONS["LEFT"],
    pygame.K_a: DIRECTIONS["LEFT"],
    pygame.K_RIGHT: DIRECTIONS["RIGHT"],
    pygame.K_d: DIRECTIONS["RIGHT"],
}
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake on a 10x10 board")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--cell-size", type=int, default=48)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args()


def report_game_over(previous: GameStatus, state: GameState) -> None:
    if state.status is GameStatus.GAME_OVER:
        print(f"Game over! Final score: {state.score}")


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode(window_size(args.cell_size))
    pygame.display.set_caption("Snake")
    font = pygame.font.SysFont(None, 24)
    clock = pygame.time.Clock()

    game = Game(config=DEFAULT_CONFIG, seed=args.seed, clock=pygame.time.get_ticks)
    game.add_listener(report_game_over)

    elapsed = 0
    drag_start = None
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            # Touch input arrives as emulated left-button mouse events.
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                drag_start = event.pos
                continue
            if event.type == pygame.MOUSEBUTTONUP and event.button == 1 and drag_start is not None:
                swiped = swipe_direction(drag_start, event.pos)
                drag_start = None
                if swiped is not None:
                    game.set_direction(swiped)
                continue
            if event.type != pygame.KEYDOWN:
                continue
            if event.key in KEY_DIRECTIONS:
                game.set_direction(KEY_DIRECTIONS[event.key])
            elif event.key == pygame.K_SPACE:
                game.toggle_pause()
            elif event.key in START_KEYS and game.status in (GameStatus.IDLE, GameStatus.GAME_OVER):
                game.start()
                elapsed = 0

        elapsed += clock.tick(args.fps)
        while elapsed >= game.config.tick_ms:
            elapsed -= game.config.tick_ms
            game.tick()
        game.poll()

        draw(screen, game.snapshot(), args.cell_size, font)
        pygame.display.flip()


if __name__ == "__main__":
    main()
