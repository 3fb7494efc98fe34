from __future__ import annotations

import logging

import pygame

from .state import Direction

logger = logging.getLogger(__name__)

ARROW_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


class InputAdapter:
    """Turns key events into set_direction() calls on an engine."""

    def __init__(self, engine, key_map=None):
        self.engine = engine
        self.key_map = dict(ARROW_KEYS if key_map is None else key_map)

    def direction_for(self, event) -> Direction | None:
        if event.type != pygame.KEYDOWN:
            return None
        return self.key_map.get(event.key)

    def handle(self, events) -> int:
        forwarded = 0
        for event in events:
            direction = self.direction_for(event)
            if direction is None:
                continue
            if not self.engine.set_direction(direction):
                logger.debug("Ignored turn to %s", direction.name)
            forwarded += 1
        return forwarded
