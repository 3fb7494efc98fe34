"""Snake on a wrap-around grid: a tick-driven engine plus a pygame front end."""

from .engine import GameEngine
from .state import DEFAULT_FOOD, DEFAULT_SNAKE, Direction, State

__version__ = "0.1.0"

__all__ = ["DEFAULT_FOOD", "DEFAULT_SNAKE", "Direction", "GameEngine", "State"]
