from __future__ import annotations

import logging
import sys

import pygame

from . import config
from .assets import AssetError, load_clips
from .audio import AudioPlayer, open_mixer
from .logic import advance
from .render import draw_state
from .state import Direction, GameState

log = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def read_input(events) -> tuple[Direction | None, bool, bool]:
    """Returns (direction request, restart, quit). The last arrow key of the frame wins."""
    requested = None
    restart = False
    quit_ = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_ = True
        elif event.type == pygame.KEYDOWN:
            if event.key in KEY_DIRECTIONS:
                requested = KEY_DIRECTIONS[event.key]
            elif event.key == pygame.K_SPACE:
                restart = True
            elif event.key in QUIT_KEYS:
                quit_ = True
    return requested, restart, quit_


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # The mixer goes first so pygame.init() does not open it with default settings.
    try:
        open_mixer()
        clips = load_clips(config.ASSETS_DIR)
        pygame.init()
        screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
        pygame.display.set_caption(config.TITLE)
        font = pygame.font.Font(None, config.FONT_SIZE)
    except (pygame.error, AssetError) as e:
        log.critical("startup failed: %s", e)
        pygame.quit()
        sys.exit(1)

    clock = pygame.time.Clock()

    audio = AudioPlayer(clips)
    audio.start_music()
    state = GameState()
    log.info("game started")

    try:
        while True:
            requested, restart, quit_ = read_input(pygame.event.get())
            if quit_:
                break

            dt = clock.tick(config.FPS) / 1000.0
            result = advance(state, requested, dt, restart=restart)
            audio.handle(result)

            draw_state(screen, state.snapshot(), font)
            pygame.display.flip()
    finally:
        audio.close()
        pygame.quit()
    log.info("exiting, final score %d", state.score)
