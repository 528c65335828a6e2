# reversi_engine/game/rules.py
# Zachary Chan c3468750
from __future__ import annotations
from typing import List, Optional, Tuple
from .board import (
    Board,
    BLACK,
    WHITE,
    EMPTY,
    SIZE,
    Move,
    MoveList,
    Player,
    Position,
    apply_move_list,
    in_bounds,
    opposite,
)

# Directions: NW, N, NE, E, SE, S, SW, W
DIRS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1), (0, 1),
    (1, 1), (1, 0), (1, -1), (0, -1),
)


def _line_flips(board: Board, player: Player, r: int, c: int, dr: int, dc: int) -> List[Move]:
    """
    If placing at (r,c) brackets opponent stones along (dr,dc),
    return them (nearest first) recoloured to `player`; else [].
    """
    flips: List[Move] = []
    rr, cc = r + dr, c + dc
    opp = opposite(player)

    if not in_bounds(rr, cc) or board.cell(rr, cc) != opp:
        return []  # immediate neighbor must be opponent

    # Collect opponent stones until we see our own stone
    while in_bounds(rr, cc):
        cell = board.cell(rr, cc)
        if cell == opp:
            flips.append(((rr, cc), player))
        elif cell == player:
            return flips  # bracketed successfully
        else:  # EMPTY
            return []
        rr += dr
        cc += dc
    return []  # ran off board without closing bracket


def legal_move(player: Player, pos: Position, board: Board) -> Optional[MoveList]:
    """
    Returns the move list for `player` playing at `pos`:
    the placed stone first, then every captured stone in direction order.
    None if the square is off-board, occupied, or captures nothing.
    """
    r, c = pos
    if not in_bounds(r, c) or board.cell(r, c) != EMPTY:
        return None
    flips: List[Move] = []
    for dr, dc in DIRS:
        flips.extend(_line_flips(board, player, r, c, dr, dc))
    if not flips:
        return None
    return ((pos, player),) + tuple(flips)


def any_legal_move(player: Player, board: Board) -> Optional[Tuple[MoveList, ...]]:
    """
    Every legal move list for `player`, scanned row-major over the whole board.
    None when the player has no move at all.
    """
    out: List[MoveList] = []
    for r in range(SIZE):
        for c in range(SIZE):
            mv = legal_move(player, (r, c), board)
            if mv is not None:
                out.append(mv)
    return tuple(out) if out else None


def valid_positions(player: Player, board: Board) -> List[Position]:
    """Squares where `player` may place a stone, row-major."""
    return [mv[0][0] for mv in any_legal_move(player, board) or ()]


def commit(board: Board, move_list: MoveList) -> Board:
    """The single point where a turn's move list is written to a board."""
    return apply_move_list(board, move_list)


def has_any_move(player: Player, board: Board) -> bool:
    return any_legal_move(player, board) is not None


def is_game_over(board: Board) -> bool:
    """
    The game ends when neither player has a legal move
    (a full board is just a special case of that).
    """
    return not (has_any_move(BLACK, board) or has_any_move(WHITE, board))
