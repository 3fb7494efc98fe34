"""
Game loop engine for a single snake on a toroidal grid.

The engine owns one immutable State and replaces it on every tick. It has no
timer or renderer of its own: a tick source calls tick(), an input adapter
calls set_direction(), and a renderer polls get_state(). Calls are expected to
come from one thread at a time.
"""

from __future__ import annotations

import logging
import random

from . import config
from .logic import game_tick
from .state import Direction, State, in_bounds, initial_state

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns snake, direction, food and score for one board.

    Attributes:
        width, height: grid size in cells (None until initialize())
        rng: random source for food placement, anything with randrange()
    """

    def __init__(self, width: int | None = None, height: int | None = None, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.width: int | None = None
        self.height: int | None = None
        self._state: State | None = None
        # Direction the last tick actually moved in.
        self._moved: Direction | None = None
        if width is not None or height is not None:
            self.initialize(width, height)

    def initialize(self, width: int, height: int) -> State:
        """Set the grid bounds and put the board into its starting layout."""
        for name, value in (("width", width), ("height", height)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Grid {name} must be an integer, got {value!r}.")
            if value < config.MIN_GRID:
                raise ValueError(f"Grid {name} must be at least {config.MIN_GRID}, got {value}.")

        self.width, self.height = width, height
        self._state = initial_state(width, height)
        self._moved = self._state.direction
        logger.debug("Initialized %dx%d board: %s", width, height, self._state)
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is not None

    def _require_state(self) -> State:
        if self._state is None:
            raise RuntimeError("GameEngine.initialize() must be called first.")
        return self._state

    @property
    def direction(self) -> Direction:
        return self._require_state().direction

    def tick(self) -> State:
        """Advance the board by one step and return the new snapshot."""
        state = self._require_state()
        self._state = game_tick(state, self.width, self.height, self.rng)
        # A reset restores the starting direction, so read it back.
        self._moved = self._state.direction
        return self._state

    def set_direction(self, requested) -> bool:
        """
        Request a new heading.

        Accepts a Direction or a raw (dx, dy) unit vector. A request that
        reverses the current heading, or the heading the snake last moved in,
        is ignored. Returns True if the direction changed.
        """
        state = self._require_state()
        try:
            direction = Direction(requested)
        except ValueError:
            raise ValueError(f"Not a direction: {requested!r}.") from None

        if direction in (state.direction.opposite, self._moved.opposite):
            return False
        if direction is state.direction:
            return False
        self._state = state._replace(direction=direction)
        return True

    def get_state(self) -> State:
        """Immutable snapshot of the board; safe to hand to a renderer."""
        return self._require_state()

    def place_food(self, cell) -> State:
        """Put the food on a specific free cell."""
        state = self._require_state()
        cell = self._validate_cell(cell, "Food")
        if cell in state.snake:
            raise ValueError(f"Food cannot be placed on the snake at {cell}.")
        self._state = state._replace(food=cell)
        return self._state

    def load_state(self, state: State) -> State:
        """Replace the board with a prepared snapshot, e.g. a scripted scene."""
        self._require_state()
        snake = tuple(self._validate_cell(c, "Snake cell") for c in state.snake)
        if not snake:
            raise ValueError("Snake must have at least one cell.")
        if len(set(snake)) != len(snake):
            raise ValueError(f"Snake has duplicate cells: {snake}.")
        food = self._validate_cell(state.food, "Food")
        if food in snake:
            raise ValueError(f"Food cannot be placed on the snake at {food}.")
        if not isinstance(state.score, int) or isinstance(state.score, bool) or state.score < 0:
            raise ValueError(f"Score must be a non-negative integer, got {state.score!r}.")

        direction = Direction(state.direction)
        self._state = State(snake=snake, direction=direction, food=food, score=state.score)
        self._moved = direction
        return self._state

    def _validate_cell(self, cell, what: str):
        try:
            x, y = cell
        except (TypeError, ValueError):
            raise ValueError(f"{what} must be an (x, y) pair, got {cell!r}.") from None
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y)):
            raise ValueError(f"{what} must have integer coordinates, got {cell!r}.")
        if not in_bounds((x, y), self.width, self.height):
            raise ValueError(f"{what} out of bounds at {(x, y)}.")
        return (x, y)

    def __repr__(self):
        if self._state is None:
            return "<GameEngine uninitialized>"
        return (
            f"<GameEngine {self.width}x{self.height}, length={len(self._state.snake)}, "
            f"food={self._state.food}, score={self._state.score}>"
        )
