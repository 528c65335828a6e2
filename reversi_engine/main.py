# reversi_engine/main.py
# Zachary Chan c3468750
import argparse
import asyncio
import logging
import sys
from typing import Optional

from . import __version__

from .config import EngineConfig, THINK_DELAY, WATCH_DELAY
from .game.coordinator import TurnCoordinator
from .UI.console import announce_outcome, run_console, show


LOG = logging.getLogger("reversi_engine")

MAX_DELAY = 60.0

# Setup and Helper functions
def setup_logging(verbose: bool, log_file: Optional[str] = None) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )

def valid_delay(delay_s: str) -> float:
    try:
        delay = float(delay_s)
    except ValueError:
        raise argparse.ArgumentTypeError("Delay must be a number of seconds.")
    if not (0.0 <= delay <= MAX_DELAY):
        raise argparse.ArgumentTypeError(f"Delay must be in [0..{MAX_DELAY:g}] seconds.")
    return delay

def valid_game_count(count_s: str) -> int:
    try:
        count = int(count_s)
    except ValueError:
        raise argparse.ArgumentTypeError("Game count must be an integer.")
    if count < 1:
        raise argparse.ArgumentTypeError("Game count must be at least 1.")
    return count

def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="reversi-engine",
        description="Reversi (Othello) — play BLACK against the computer in the console",
    )
    p.add_argument("--watch", action="store_true",
                   help="Start in watch mode: the computer plays BLACK too.")
    p.add_argument("--debug", action="store_true",
                   help="Mark BLACK's legal squares on the board.")
    p.add_argument("--think-delay", type=valid_delay, default=THINK_DELAY,
                   help=f"Seconds WHITE waits before moving (default: {THINK_DELAY}).")
    p.add_argument("--watch-delay", type=valid_delay, default=WATCH_DELAY,
                   help=f"Seconds between moves in watch mode (default: {WATCH_DELAY}).")
    p.add_argument("--max-games", type=valid_game_count, default=None,
                   help="Exit after this many finished games (default: play until quit).")
    p.add_argument("--verbose", action="store_true",
                   help="Enable verbose debug logging.")
    p.add_argument("--log-file", type=str, default=None,
                   help="Optional path to write logs to (in addition to stderr).")
    return p.parse_args(argv)

def build_config(args) -> EngineConfig:
    return EngineConfig(
        watch_delay=args.watch_delay,
        think_delay=args.think_delay,
        auto_play=args.watch,
        debug=args.debug,
    )

def build_coordinator(config: EngineConfig) -> TurnCoordinator:
    coord = TurnCoordinator(config, on_game_over=announce_outcome)
    coord.on_board_change = lambda board: show(coord, board)
    return coord

# Runnable main
def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    LOG.info("Reversi engine v%s starting…", __version__)
    coord = build_coordinator(build_config(args))
    try:
        return asyncio.run(run_console(coord, max_games=args.max_games))
    except KeyboardInterrupt:
        LOG.warning("Interrupted by user (Ctrl+C).")
        return 1

if __name__ == "__main__":
    sys.exit(main())
