"""
Tests for controls.py - key events to direction requests.
"""

import pygame
import pytest

from wrapsnake import Direction, GameEngine
from wrapsnake.controls import ARROW_KEYS, InputAdapter


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


@pytest.fixture
def engine():
    return GameEngine(20, 20)


class TestInputAdapter:

    def test_arrow_key_turns(self, engine):
        adapter = InputAdapter(engine)
        assert adapter.handle([key(pygame.K_UP)]) == 1
        assert engine.direction is Direction.UP

    def test_wasd_turns(self, engine):
        adapter = InputAdapter(engine)
        adapter.handle([key(pygame.K_s)])
        assert engine.direction is Direction.DOWN

    def test_reversal_is_forwarded_but_ignored(self, engine):
        adapter = InputAdapter(engine)
        assert adapter.handle([key(pygame.K_LEFT)]) == 1
        assert engine.direction is Direction.RIGHT

    def test_other_events_are_skipped(self, engine):
        adapter = InputAdapter(engine)
        events = [
            key(pygame.K_SPACE),
            pygame.event.Event(pygame.KEYUP, key=pygame.K_UP),
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)),
        ]
        assert adapter.handle(events) == 0
        assert engine.direction is Direction.RIGHT

    def test_custom_key_map(self, engine):
        adapter = InputAdapter(engine, key_map={pygame.K_k: Direction.UP})
        adapter.handle([key(pygame.K_UP)])
        assert engine.direction is Direction.RIGHT
        adapter.handle([key(pygame.K_k)])
        assert engine.direction is Direction.UP

    def test_default_map_covers_all_directions(self):
        assert set(ARROW_KEYS.values()) == set(Direction)
