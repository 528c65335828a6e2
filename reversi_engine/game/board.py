# reversi_engine/game/board.py
# Zachary Chan c3468750

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

# Cell values
EMPTY = "."
BLACK = "B"
WHITE = "W"

# Board dimensions
SIZE = 8

Player = str  # "B" or "W"
Position = Tuple[int, int]  # (row, col)
Move = Tuple[Position, Player]
MoveList = Tuple[Move, ...]
Grid = Tuple[Tuple[str, ...], ...]  # immutable (tuple-of-tuples)

# Centre square, as (row, col, colour) placements
INITIAL_LAYOUT: Tuple[Tuple[int, int, Player], ...] = (
    (3, 3, BLACK),
    (3, 4, WHITE),
    (4, 3, WHITE),
    (4, 4, BLACK),
)


def opposite(player: Player) -> Player:
    if player == BLACK:
        return WHITE
    if player == WHITE:
        return BLACK
    raise ValueError(f"Invalid player: {player!r}")


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def on_board(pos: Position) -> bool:
    return in_bounds(pos[0], pos[1])


@dataclass(frozen=True)
class Board:
    """
    Immutable board wrapper around a tuple-of-tuples grid.

    Every update goes through set_tile()/apply_move_list() and returns a new
    Board; the grid of an existing Board never changes.
    Use Board.from_rows for tests, and Board.to_rows() for debugging.
    """

    grid: Grid

    @staticmethod
    def from_rows(rows: Sequence[Sequence[str]]) -> "Board":
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError("Board must be 8x8")
        for rr in rows:
            for cell in rr:
                if cell not in (EMPTY, BLACK, WHITE):
                    raise ValueError(f"Invalid cell: {cell!r}")
        return Board(tuple(tuple(r) for r in rows))

    def to_rows(self) -> List[List[str]]:
        return [list(r) for r in self.grid]

    def cell(self, r: int, c: int) -> str:
        if not in_bounds(r, c):
            raise IndexError(f"Out of bounds: {(r, c)}")
        return self.grid[r][c]

    def count(self, player: Player) -> int:
        return sum(cell == player for row in self.grid for cell in row)

    def counts(self) -> Tuple[int, int, int]:
        b = self.count(BLACK)
        w = self.count(WHITE)
        e = SIZE * SIZE - (b + w)
        return b, w, e


def empty_board() -> Board:
    return Board(tuple(tuple(EMPTY for _ in range(SIZE)) for _ in range(SIZE)))


def get_tile(board: Board, pos: Position) -> str:
    """Cell value at pos. Callers check on_board() first; off-board raises IndexError."""
    return board.cell(pos[0], pos[1])


def set_tile(board: Board, pos: Position, color: str) -> Board:
    """Returns a NEW Board identical to `board` except that `pos` holds `color`."""
    r, c = pos
    if not in_bounds(r, c):
        raise IndexError(f"Out of bounds: {pos}")
    if color not in (EMPTY, BLACK, WHITE):
        raise ValueError(f"Invalid cell: {color!r}")
    row = board.grid[r]
    new_row = row[:c] + (color,) + row[c + 1:]
    return Board(board.grid[:r] + (new_row,) + board.grid[r + 1:])


def apply_move_list(board: Board, moves: Iterable[Move]) -> Board:
    """Folds set_tile over `moves` in order (later entries win on the same square)."""
    for pos, color in moves:
        board = set_tile(board, pos, color)
    return board


def initial_board() -> Board:
    return apply_move_list(empty_board(), (((r, c), color) for r, c, color in INITIAL_LAYOUT))
