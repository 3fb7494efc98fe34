from __future__ import annotations

from enum import Enum

import pygame

from . import config
from .state import Cell, State


class CellType(Enum):
    SNAKE = "snake"
    FOOD = "food"
    EMPTY = "empty"


def cell_type(cell: Cell, state: State) -> CellType:
    if cell == state.food:
        return CellType.FOOD
    if cell in state.snake:
        return CellType.SNAKE
    return CellType.EMPTY


def cell_rect(x: int, y: int, cell_size: int = config.CELL_SIZE) -> pygame.Rect:
    return pygame.Rect(x * cell_size, config.HEADER_HEIGHT + y * cell_size, cell_size, cell_size)


def draw_state(
    surface: pygame.Surface,
    state: State,
    font: pygame.font.Font | None = None,
    cell_size: int = config.CELL_SIZE,
) -> None:
    surface.fill(config.BACKGROUND)
    surface.fill(config.HEADER_BG, pygame.Rect(0, 0, surface.get_width(), config.HEADER_HEIGHT))

    inset = max(1, cell_size // 16)
    for x, y in state.snake:
        rect = cell_rect(x, y, cell_size).inflate(-2 * inset, -2 * inset)
        pygame.draw.rect(surface, config.SNAKE_COLOR, rect, border_radius=cell_size // 4)

    fx, fy = state.food
    pygame.draw.ellipse(surface, config.FOOD_COLOR, cell_rect(fx, fy, cell_size))

    if font is not None:
        text = font.render(f"Score: {state.score}", True, config.TEXT_COLOR)
        surface.blit(text, (10, (config.HEADER_HEIGHT - text.get_height()) // 2))
