from __future__ import annotations

import logging
import random

import pygame

from . import config
from .controls import InputAdapter
from .engine import GameEngine
from .render import draw_state

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


def run(
    width: int = config.WIDTH,
    height: int = config.HEIGHT,
    cell_size: int = config.CELL_SIZE,
    tick_ms: int = config.TICK_MS,
    seed: int | None = None,
) -> int:
    engine = GameEngine(width, height, rng=random.Random(seed))
    controls = InputAdapter(engine)

    pygame.init()
    try:
        screen = pygame.display.set_mode((width * cell_size, config.HEADER_HEIGHT + height * cell_size))
        pygame.display.set_caption("wrapsnake")
        font = pygame.font.Font(None, config.HEADER_HEIGHT - 8)
        clock = pygame.time.Clock()
        pygame.time.set_timer(TICK_EVENT, tick_ms)
        logger.info("Running %dx%d board, tick every %d ms", width, height, tick_ms)

        running = True
        dirty = True
        while running:
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
                elif event.type == TICK_EVENT:
                    engine.tick()
                    dirty = True
                elif controls.handle([event]):
                    dirty = True

            if dirty:
                draw_state(screen, engine.get_state(), font, cell_size)
                pygame.display.flip()
                dirty = False

            clock.tick(config.FPS)
    finally:
        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.quit()

    score = engine.get_state().score
    logger.info("Stopped with score %d", score)
    return score
