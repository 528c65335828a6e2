# reversi_engine/game/strategy.py
# Zachary Chan c3468750
from __future__ import annotations

from typing import Optional, Sequence

from .board import MoveList


def select_move(candidates: Sequence[MoveList]) -> MoveList:
    """
    Greedy one-ply pick: the move list that flips the most stones.
    Ties keep the first one seen, so scan order decides.
    """
    if not candidates:
        raise ValueError("select_move needs at least one candidate")
    best: Optional[MoveList] = None
    for mv in candidates:
        if best is None or len(mv) > len(best):
            best = mv
    return best
