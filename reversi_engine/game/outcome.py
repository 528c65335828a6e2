# reversi_engine/game/outcome.py
# Zachary Chan c3468750
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .board import Board, BLACK, WHITE, Player


@dataclass(frozen=True)
class Score:
    black: int
    white: int

    def as_dict(self) -> Dict[str, int]:
        return {"black": self.black, "white": self.white}

    @property
    def winner(self) -> Optional[Player]:
        if self.black > self.white:
            return BLACK
        if self.white > self.black:
            return WHITE
        return None


def score(board: Board) -> Score:
    """Stone counts, derived from the board every time."""
    b, w, _ = board.counts()
    return Score(b, w)


def describe(s: Score) -> str:
    if s.winner == BLACK:
        return f"BLACK wins {s.black}–{s.white}"
    if s.winner == WHITE:
        return f"WHITE wins {s.white}–{s.black}"
    return f"DRAW {s.black}–{s.white}"
