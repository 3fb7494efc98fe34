from __future__ import annotations

import argparse
import logging

from . import config


def _positive(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wrapsnake",
        description="Play snake on a wrap-around grid (arrow keys or WASD, Esc/q to quit).",
    )
    parser.add_argument("--width", type=int, default=config.WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=config.HEIGHT, help="Grid height in cells.")
    parser.add_argument("--cell-size", type=_positive, default=config.CELL_SIZE, help="Cell size in pixels.")
    parser.add_argument("--tick-ms", type=_positive, default=config.TICK_MS, help="Milliseconds per game tick.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    for name in ("width", "height"):
        if getattr(args, name) < config.MIN_GRID:
            parser.error(f"--{name} must be at least {config.MIN_GRID}")

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    # Imported late so --help works without opening a window.
    from .game import run

    score = run(
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        tick_ms=args.tick_ms,
        seed=args.seed,
    )
    print("Game Over! Score:", score)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
