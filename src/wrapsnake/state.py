from __future__ import annotations

from collections import namedtuple
from enum import Enum

State = namedtuple("State", ["snake", "direction", "food", "score"])
# snake: tuple[(x, y), ...], head is first element.
# direction: Direction
# food: (x, y)
# score: int

Cell = tuple[int, int]

DEFAULT_SNAKE: tuple[Cell, ...] = ((8, 12), (7, 12), (6, 12))
DEFAULT_FOOD: Cell = (4, 10)


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


def wrap(cell: Cell, width: int, height: int) -> Cell:
    """Fold a cell back onto the torus (-1 -> max index, size -> 0)."""
    return (cell[0] % width, cell[1] % height)


def in_bounds(cell: Cell, width: int, height: int) -> bool:
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def default_layout(width: int, height: int) -> tuple[tuple[Cell, ...], Cell]:
    """Starting snake and food for a grid.

    The fixed layout is used whenever it fits. Smaller grids get a centred
    three-cell snake facing right, with the food at the fixed layout's offset
    from the head (-4, -2) folded onto the grid.
    """
    if all(in_bounds(c, width, height) for c in (*DEFAULT_SNAKE, DEFAULT_FOOD)):
        return DEFAULT_SNAKE, DEFAULT_FOOD

    hx, hy = width // 2, height // 2
    snake = ((hx, hy), (hx - 1, hy), (hx - 2, hy))
    # MIN_GRID >= 4 keeps the food two rows off the snake's row.
    food = wrap((hx - 4, hy - 2), width, height)
    return snake, food


def initial_state(width: int, height: int) -> State:
    snake, food = default_layout(width, height)
    return State(snake=snake, direction=Direction.RIGHT, food=food, score=0)


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
