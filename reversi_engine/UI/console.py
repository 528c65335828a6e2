# reversi_engine/UI/console.py
# Zachary Chan c3468750
from __future__ import annotations

import asyncio
import sys
import threading
from typing import Iterable, Optional, Sequence, TextIO, Tuple

from ..errors import IllegalMoveError
from ..game.board import Board, BLACK, SIZE, Position
from ..game.coordinator import TurnCoordinator
from ..game.outcome import Score, describe
from ..game.rules import valid_positions

# Algebraic helpers (A–H, 1–8)
COL_TO_LET = "ABCDEFGH"
LET_TO_COL = {c: i for i, c in enumerate(COL_TO_LET)}
HINT = "*"

QUIT_WORDS = {"q", "quit", "exit"}
FORFEIT_WORDS = {"f", "forfeit"}
WATCH_WORDS = {"w", "watch"}
DEBUG_WORDS = {"d", "debug"}

Command = Tuple[str, Optional[Position]]


def render_board(board: Board, hints: Iterable[Position] = (), message: str = "") -> None:
    rows = board.to_rows()
    for r, c in hints:
        rows[r][c] = HINT
    b, w, e = board.counts()

    # Header
    print()
    print("=" * 40)
    print(f" Score: BLACK={b}  WHITE={w}  Empty={e}")
    if message:
        print(f" {message}")
    print("    " + "".join(COL_TO_LET))

    for r in range(SIZE):
        line = "".join(rows[r])
        print(f" {r+1:>2} {line}")
    print("=" * 40)


def format_moves(moves: Sequence[Position]) -> str:
    """Human-friendly listing with algebraic notation."""
    return ", ".join(f"{COL_TO_LET[c]}{r+1}" for r, c in moves)


def try_parse_algebraic(s: str) -> Optional[Position]:
    """
    Accepts strings like 'd3', 'D3', 'a8'. Returns (row, col) 0-based or None if invalid.
    """
    s = s.strip()
    if len(s) < 2 or len(s) > 3:
        return None
    col_ch = s[0].upper()
    row_str = s[1:]
    if col_ch not in LET_TO_COL:
        return None
    if not row_str.isdigit():
        return None
    row = int(row_str) - 1
    col = LET_TO_COL[col_ch]
    if 0 <= row < SIZE and 0 <= col < SIZE:
        return (row, col)
    return None


def try_parse_pair(s: str) -> Optional[Position]:
    """Accepts 'row,col' with 0-based integers, e.g. '2,4'. No range check."""
    parts = s.split(",")
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0].strip()), int(parts[1].strip()))
    except ValueError:
        return None


def parse_command(raw: str) -> Optional[Command]:
    """
    Map one line of input to a command:
    ("move", pos), ("forfeit", None), ("watch", None), ("debug", None), ("quit", None).
    None if the line means nothing.
    """
    s = raw.strip()
    low = s.lower()
    if low in QUIT_WORDS:
        return ("quit", None)
    if low in FORFEIT_WORDS:
        return ("forfeit", None)
    if low in WATCH_WORDS:
        return ("watch", None)
    if low in DEBUG_WORDS:
        return ("debug", None)
    pos = try_parse_algebraic(s)
    if pos is None:
        pos = try_parse_pair(s)
    if pos is not None:
        return ("move", pos)
    return None


def announce_winner(black_count: int, white_count: int) -> None:
    print()
    print("#" * 40)
    print(f"FINAL: {describe(Score(black_count, white_count))}")
    print("#" * 40)


def announce_outcome(s: Score) -> None:
    announce_winner(s.black, s.white)
    print("New game — BLACK to move.")


def show(coord: TurnCoordinator, board: Optional[Board] = None) -> None:
    board = board if board is not None else coord.get_board()
    hints = valid_positions(BLACK, board) if coord.debug else ()
    render_board(board, hints, coord.message)
    if hints:
        print(f"BLACK legal moves: {format_moves(hints)}")


def print_help() -> None:
    print("Enter a square (D3 or 2,4), or: forfeit | watch | debug | q")


def handle_command(coord: TurnCoordinator, cmd: Command) -> bool:
    """Apply one command to the coordinator. Returns False when the user quits."""
    kind, pos = cmd
    if kind == "quit":
        return False
    if kind == "forfeit":
        coord.reset_game()
    elif kind == "watch":
        coord.set_auto_play(not coord.auto_play)
        print(f"Watch: {coord.auto_play}")
    elif kind == "debug":
        print(f"Debug: {coord.toggle_debug()}")
        show(coord)
    elif kind == "move":
        try:
            coord.submit_move(pos)
        except IllegalMoveError:
            print(coord.message)
    return True


def _stdin_reader(loop: asyncio.AbstractEventLoop, queue: asyncio.Queue, stream: TextIO) -> None:
    try:
        for raw in iter(stream.readline, ""):
            loop.call_soon_threadsafe(queue.put_nowait, raw)
        # EOF (e.g., Ctrl+D) -> quit
        loop.call_soon_threadsafe(queue.put_nowait, None)
    except RuntimeError:
        # Loop already closed on shutdown
        pass


async def run_console(coord: TurnCoordinator, max_games: Optional[int] = None,
                      stream: Optional[TextIO] = None) -> int:
    """
    Drive a game from the terminal: the coordinator runs as a task and
    stdin lines are read on a daemon thread and fed in as commands.
    """
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()
    reader = threading.Thread(
        target=_stdin_reader, args=(loop, queue, stream or sys.stdin), daemon=True
    )
    reader.start()

    show(coord)
    print_help()
    engine = asyncio.create_task(coord.run(max_games))
    try:
        while True:
            getter = asyncio.ensure_future(queue.get())
            done, _ = await asyncio.wait({engine, getter}, return_when=asyncio.FIRST_COMPLETED)
            if engine in done:
                getter.cancel()
                break
            raw = getter.result()
            if raw is None:
                break
            cmd = parse_command(raw)
            if cmd is None:
                print("Invalid input.")
                print_help()
                continue
            if not handle_command(coord, cmd):
                break
    finally:
        coord.stop()
    await engine
    return 0
