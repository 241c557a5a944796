"""Command-line tools for Classic Snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    ivalue = int(value)
    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"{value} must be a positive integer.")
    return ivalue


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-snake",
        description="Classic Snake headless simulation and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play headless games with a random policy.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument(
        "--difficulty", type=str, default="normal",
        choices=["easy", "normal", "hard"],
    )
    sim_p.add_argument("--cols", type=_positive_int, default=None)
    sim_p.add_argument("--rows", type=_positive_int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--max-ticks", type=_positive_int, default=1_000)
    sim_p.add_argument("--games", type=_positive_int, default=1)

    # --- config ---
    cfg_p = sub.add_parser(
        "config", help="Print or write a game config as JSON.",
    )
    cfg_p.add_argument(
        "--output", type=str, default=None,
        help="Write to this path instead of stdout.",
    )
    cfg_p.add_argument("--board-width", type=_positive_int, default=None)
    cfg_p.add_argument("--board-height", type=_positive_int, default=None)
    cfg_p.add_argument("--cell-size", type=_positive_int, default=None)

    # --- levels ---
    sub.add_parser("levels", help="List difficulty levels.")

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from classic_snake.config import GameConfig
    from classic_snake.difficulty import DifficultyLevel
    from classic_snake.simulate import run_headless

    overrides = {
        name: getattr(args, name)
        for name in ("cols", "rows")
        if getattr(args, name) is not None
    }
    try:
        config = GameConfig.load(args.config) if args.config else GameConfig()
        if overrides:
            config = replace(config, **overrides)
    except ValueError as exc:
        logger.error("Invalid config: %s", exc)
        return 2

    difficulty = DifficultyLevel.from_name(args.difficulty)
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        result = run_headless(
            config, difficulty, seed=seed, max_ticks=args.max_ticks,
        )
        print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from classic_snake.config import CELL_SIZE, GameConfig

    sized = args.board_width is not None or args.board_height is not None
    if sized and (args.board_width is None or args.board_height is None):
        logger.error("--board-width and --board-height must be given together.")
        return 2

    try:
        if sized:
            config = GameConfig.from_board(
                args.board_width,
                args.board_height,
                cell_size=args.cell_size or CELL_SIZE,
            )
        else:
            config = GameConfig()
    except ValueError as exc:
        logger.error("Invalid board size: %s", exc)
        return 2

    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def _run_levels(args: argparse.Namespace) -> int:
    from classic_snake.difficulty import ALL_LEVELS

    for level in ALL_LEVELS:
        print(f"{level.name.lower():<8} {level.interval_ms:>4} ms/tick")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``classic-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
        "levels": _run_levels,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
