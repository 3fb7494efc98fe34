"""
Tests for render.py - cell classification and board drawing.
"""

import pygame

from wrapsnake import config
from wrapsnake.render import CellType, cell_rect, cell_type, draw_state
from wrapsnake.state import Direction, State

CELL = 16


def rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


class TestCellType:

    def test_classification(self):
        state = State(snake=((2, 2), (1, 2)), direction=Direction.RIGHT, food=(5, 5), score=0)
        assert cell_type((2, 2), state) is CellType.SNAKE
        assert cell_type((1, 2), state) is CellType.SNAKE
        assert cell_type((5, 5), state) is CellType.FOOD
        assert cell_type((0, 0), state) is CellType.EMPTY

    def test_food_wins_over_snake(self):
        state = State(snake=((3, 3),), direction=Direction.RIGHT, food=(3, 3), score=0)
        assert cell_type((3, 3), state) is CellType.FOOD


class TestDrawState:

    def test_cells_are_drawn_below_header(self):
        surface = pygame.Surface((10 * CELL, config.HEADER_HEIGHT + 10 * CELL))
        state = State(snake=((2, 3), (1, 3)), direction=Direction.RIGHT, food=(7, 7), score=4)

        draw_state(surface, state, cell_size=CELL)

        assert rgb(surface, cell_rect(2, 3, CELL).center) == config.SNAKE_COLOR
        assert rgb(surface, cell_rect(1, 3, CELL).center) == config.SNAKE_COLOR
        assert rgb(surface, cell_rect(7, 7, CELL).center) == config.FOOD_COLOR
        assert rgb(surface, cell_rect(5, 5, CELL).center) == config.BACKGROUND
        assert rgb(surface, (2, 2)) == config.HEADER_BG

    def test_cell_rect_offsets_header(self):
        rect = cell_rect(1, 2, CELL)
        assert rect.topleft == (CELL, config.HEADER_HEIGHT + 2 * CELL)
        assert rect.size == (CELL, CELL)
