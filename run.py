"""Dungeon Generator CLI entry point.

Generates one dungeon and draws it in the terminal: first right after the
corridors and doors are placed, then again once dead ends are pruned.

    python run.py               # 50x50
    python run.py 80 40         # width height
    python run.py 80 40 --seed 7 --no-color

Any positional argument count other than two falls back to 50x50.
Configuration can also come from DUNGEON_* environment variables or a .env
file; CLI flags take precedence. Run `python run.py --help` for details.
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from dungeon_generator import __version__
from dungeon_generator.dungeon import Dungeon, DungeonConfig, DungeonConfigError, analyze
from dungeon_generator.dungeon.diagnostics import summarize
from dungeon_generator.logging_utils import log
from dungeon_generator.render import clear, print_grid


def parse_args(argv: list[str]) -> argparse.Namespace:
    epilog = dedent(
        """
        Environment variables:
          DUNGEON_WIDTH / DUNGEON_HEIGHT   Grid size when no dimensions are given
          DUNGEON_SEED                     Seed for reproducible layouts
          DUNGEON_ROOM_ATTEMPTS            Room placement trials (default: 1000)
          DUNGEON_LOG_LEVEL                debug|info|error (default: error)

        Examples:
          # Default 50x50 dungeon
          python run.py

          # Reproducible 30x20 dungeon without colors
          python run.py 30 20 --seed 1234 --no-color

          # Watch the corridors being carved
          python run.py 40 25 --animate 0.005
        """
    )
    parser = argparse.ArgumentParser(
        prog="dungeon-generator",
        description="Generate a room-and-corridor dungeon and draw it in the terminal.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "dims",
        nargs="*",
        type=int,
        metavar="N",
        help="Optional 'width height' pair; any other count uses 50x50",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator")
    parser.add_argument(
        "--attempts",
        type=int,
        default=None,
        help="Room placement attempts (default: env DUNGEON_ROOM_ATTEMPTS or 1000)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen; print each stage below the previous one",
    )
    parser.add_argument("--final-only", action="store_true", help="Only draw the pruned layout")
    parser.add_argument(
        "--animate",
        type=float,
        default=None,
        metavar="DELAY",
        help="Redraw after every carved cell, sleeping DELAY seconds between frames",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Run structural checks; exit 1 when any invariant is violated",
    )
    parser.add_argument("--metrics", action="store_true", help="Print generation metrics to stderr")
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before reading DUNGEON_* variables",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Dungeon Generator {__version__}",
    )
    return parser.parse_args(argv)


def resolve_dimensions(dims: list[int]):
    """Two positional values are (width, height); anything else means defaults."""
    if len(dims) == 2:
        return dims[0], dims[1]
    return None, None


def build_config(args: argparse.Namespace) -> DungeonConfig:
    width, height = resolve_dimensions(args.dims or [])
    config = DungeonConfig.from_env(
        width=width,
        height=height,
        seed=args.seed,
        room_attempts=args.attempts,
    )
    return config.validate()


def _metrics_block(metrics: dict, color: bool) -> str:
    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    lines = [divider]
    for key in ("rooms", "cells_carved", "doors_created", "doors_into_void", "cells_pruned", "runtime_ms"):
        lines.append(f"  {label(key + ':'):18} {value(metrics.get(key, 0))}")
    lines.append(divider)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.env_file:
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    try:
        config = build_config(args)
    except DungeonConfigError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    out = sys.stdout
    color = not args.no_color and out.isatty()
    if color:
        _color_init()
    interactive = out.isatty() and not args.no_clear
    log.info(event="startup", width=config.width, height=config.height, seed=config.seed)

    if interactive:
        clear(out)

    on_carve = None
    if args.animate is not None:
        delay = max(0.0, args.animate)

        def on_carve(grid, _x, _y):
            print_grid(grid, out, color=color, home=interactive)
            if delay:
                time.sleep(delay)

    try:
        dungeon = Dungeon(config, on_carve=on_carve)
        if not args.final_only:
            print_grid(dungeon.connected, out, color=color, home=interactive)
        print_grid(dungeon.grid, out, color=color, home=interactive)
    except KeyboardInterrupt:
        print("\n[INFO] Stopped by user (Ctrl+C)", file=sys.stderr)
        return 130

    if args.metrics:
        print(_metrics_block(dungeon.metrics, color), file=sys.stderr)

    if args.check:
        report = analyze(dungeon.grid, dungeon.rooms, buffer=config.room_buffer)
        if not config.prune or config.max_prune_removals is not None:
            report["stubs"] = []
        summary = summarize(report)
        print(json.dumps({"seed": dungeon.seed, "issues": summary}, indent=2), file=sys.stderr)
        if any(summary.values()):
            log.error(event="check_failed", seed=dungeon.seed, **summary)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
