from __future__ import annotations

# Grid (cells)
WIDTH, HEIGHT = 20, 20
MIN_GRID = 4

# Pixels
CELL_SIZE = 32
HEADER_HEIGHT = 40

# Timing
TICK_MS = 250
FPS = 60

# Food placement: rejection draws before falling back to the free-cell set.
MAX_FOOD_ATTEMPTS = 64

# Colors
BACKGROUND = (24, 24, 24)
HEADER_BG = (40, 40, 40)
SNAKE_COLOR = (154, 205, 50)  # yellowgreen
FOOD_COLOR = (255, 140, 0)  # darkorange
TEXT_COLOR = (230, 230, 230)
