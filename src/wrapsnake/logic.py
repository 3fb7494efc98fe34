from __future__ import annotations

import logging

import numpy as np

from . import config
from .state import Cell, Functor, State, add_vectors, initial_state, wrap

logger = logging.getLogger(__name__)


def next_head(state: State, width: int, height: int) -> Cell:
    return wrap(add_vectors(state.snake[0], state.direction.value), width, height)


def is_biting(state: State, head: Cell) -> bool:
    # The tail counts too, even though it would move away this tick.
    return head in state.snake


def move_snake(state: State, head: Cell) -> State:
    if head == state.food:
        new_snake = (head, *state.snake)  # keep entire body: growth
    else:
        new_snake = (head, *state.snake[:-1])
    return state._replace(snake=new_snake)


def free_cells(snake, width: int, height: int) -> np.ndarray:
    """(x, y) rows of every cell not covered by the snake."""
    occupied = np.zeros((height, width), dtype=bool)
    xs, ys = zip(*snake)
    occupied[list(ys), list(xs)] = True
    return np.argwhere(~occupied)[:, ::-1]


def spawn_food(snake, width: int, height: int, rng) -> Cell | None:
    """Pick a food cell uniformly among the cells the snake does not cover.

    Draws random cells until one is free. After MAX_FOOD_ATTEMPTS misses the
    board is treated as dense and the pick is made from the explicit free
    cell set instead. Returns None when the snake covers the whole board.
    """
    body = set(snake)
    for _ in range(config.MAX_FOOD_ATTEMPTS):
        cell = (rng.randrange(width), rng.randrange(height))
        if cell not in body:
            return cell

    free = free_cells(snake, width, height)
    if len(free) == 0:
        return None
    x, y = free[rng.randrange(len(free))]
    return (int(x), int(y))


def reset_state(width: int, height: int) -> State:
    return initial_state(width, height)


def update_food_and_score(state: State, width: int, height: int, rng) -> State:
    if state.snake[0] != state.food:
        return state
    food = spawn_food(state.snake, width, height, rng)
    if food is None:
        logger.info("Board full at score %d, starting a new round", state.score + 1)
        return reset_state(width, height)
    logger.debug("Food eaten at %s, respawned at %s", state.food, food)
    return state._replace(food=food, score=state.score + 1)


def game_tick(state: State, width: int, height: int, rng) -> State:
    head = next_head(state, width, height)
    if is_biting(state, head):
        logger.info("Snake bit itself at %s with score %d, resetting", head, state.score)
        return reset_state(width, height)
    return (
        Functor(state)
        .map(lambda s: move_snake(s, head))
        .map(lambda s: update_food_and_score(s, width, height, rng))
        .get()
    )
