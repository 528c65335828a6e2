# reversi_engine/game/coordinator.py
# Zachary Chan c3468750
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from ..config import EngineConfig
from ..errors import IllegalMoveError
from .board import Board, BLACK, WHITE, MoveList, Player, Position, initial_board
from .outcome import Score, describe, score
from .rules import any_legal_move, commit, has_any_move, is_game_over, legal_move
from .strategy import select_move


LOG = logging.getLogger("reversi_engine.coordinator")

NOT_VALID_MOVE = "Not a valid move"


class MoveSlot:
    """
    Single-slot, overwriting hand-off for the human side's move.
    put() replaces whatever has not been taken yet; take() waits for a value.
    """

    def __init__(self):
        self._move: Optional[MoveList] = None
        self._ready = asyncio.Event()

    @property
    def pending(self) -> bool:
        return self._move is not None

    def put(self, move_list: MoveList) -> None:
        self._move = move_list
        self._ready.set()

    def clear(self) -> None:
        self._move = None
        self._ready.clear()

    def interrupt(self) -> None:
        """Wake a waiting take() without a move (it returns None)."""
        self._ready.set()

    async def take(self) -> Optional[MoveList]:
        await self._ready.wait()
        mv = self._move
        self.clear()
        return mv


class TurnCoordinator:
    """
    Owns the one authoritative board and alternates BLACK (human, or the
    computer in auto-play) and WHITE (always the computer).

    Only run() writes the board through commit(); everything else reads
    snapshots via get_board()/get_score().
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        board: Optional[Board] = None,
        on_board_change: Optional[Callable[[Board], None]] = None,
        on_game_over: Optional[Callable[[Score], None]] = None,
    ):
        self.config = config or EngineConfig()
        self.on_board_change = on_board_change
        self.on_game_over = on_game_over
        self._board = board if board is not None else initial_board()
        self._slot = MoveSlot()
        self._auto_play = self.config.auto_play
        self._debug = self.config.debug
        self._message = ""
        self._generation = 0
        self._awaiting_human = False
        self._stopped = False
        self.games_played = 0
        self.last_score: Optional[Score] = None

    # ---- read-only views ----
    def get_board(self) -> Board:
        return self._board

    def get_score(self) -> dict:
        return score(self._board).as_dict()

    @property
    def message(self) -> str:
        return self._message

    @property
    def auto_play(self) -> bool:
        return self._auto_play

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def awaiting_human(self) -> bool:
        return self._awaiting_human

    @property
    def has_pending_move(self) -> bool:
        return self._slot.pending

    # ---- presentation-layer inputs ----
    def submit_move(self, pos: Position) -> None:
        """
        Validate a human move against the current board and hand it to the loop.
        Raises IllegalMoveError (and sets message) if the square is not playable.
        """
        mv = legal_move(BLACK, pos, self._board)
        if mv is None:
            self._message = NOT_VALID_MOVE
            LOG.debug("Rejected human move at %s", pos)
            raise IllegalMoveError(f"{NOT_VALID_MOVE}: {pos}")
        self._message = ""
        self._slot.put(mv)

    def reset_game(self) -> None:
        """Start over from the initial layout, whatever the loop is doing."""
        LOG.info("Game reset.")
        self._replace_board(initial_board())
        self._slot.clear()
        self._message = ""

    def set_auto_play(self, enabled: bool) -> None:
        self._auto_play = bool(enabled)
        LOG.info("Auto-play %s.", "on" if self._auto_play else "off")
        if self._auto_play and self._awaiting_human:
            # The loop is parked on the human slot: feed it the computer's pick.
            moves = any_legal_move(BLACK, self._board)
            if moves is not None:
                self._slot.put(select_move(moves))

    def set_debug(self, enabled: bool) -> None:
        self._debug = bool(enabled)

    def toggle_debug(self) -> bool:
        self._debug = not self._debug
        return self._debug

    def stop(self) -> None:
        self._stopped = True
        self._slot.interrupt()

    # ---- the loop ----
    async def run(self, max_games: Optional[int] = None) -> None:
        """
        Play games until stop() is called, or until `max_games` games have ended.
        """
        self._stopped = False
        while not self._stopped:
            if is_game_over(self._board):
                self._finish_game()
                if max_games is not None and self.games_played >= max_games:
                    return
                continue

            black = await self._black_turn()
            if black is None:
                continue
            self._commit(BLACK, black)

            white = await self._white_turn(self._generation)
            if white is None:
                continue
            self._commit(WHITE, white)

    async def _black_turn(self) -> Optional[MoveList]:
        player = BLACK
        if not has_any_move(player, self._board):
            # Nothing typed now belongs to this turn.
            self._slot.clear()
            LOG.info("%s has no legal moves and passes.", _name(player))
            return ()

        if self._auto_play:
            gen = self._generation
            await asyncio.sleep(self.config.watch_delay)
            self._slot.clear()
            return self._computer_pick(player, gen)

        return await self._await_human()

    async def _await_human(self) -> Optional[MoveList]:
        player = BLACK
        self._awaiting_human = True
        try:
            while True:
                mv = await self._slot.take()
                if self._stopped:
                    return None
                if mv is None:
                    continue
                # The board may have moved on (reset) since the move was queued.
                fresh = legal_move(player, mv[0][0], self._board)
                if fresh is None:
                    LOG.debug("Dropping stale human move at %s", mv[0][0])
                    continue
                return fresh
        finally:
            self._awaiting_human = False

    async def _white_turn(self, gen: int) -> Optional[MoveList]:
        delay = self.config.watch_delay if self._auto_play else self.config.think_delay
        await asyncio.sleep(delay)
        return self._computer_pick(WHITE, gen)

    def _computer_pick(self, player: Player, gen: int) -> Optional[MoveList]:
        if self._stopped or gen != self._generation:
            return None
        moves = any_legal_move(player, self._board)
        if moves is None:
            LOG.info("%s has no legal moves and passes.", _name(player))
            return ()
        return select_move(moves)

    def _commit(self, player: Player, move_list: MoveList) -> None:
        if move_list:
            LOG.debug("%s plays %s, flipping %d", _name(player), move_list[0][0], len(move_list) - 1)
        self._board = commit(self._board, move_list)
        self._notify()

    def _finish_game(self) -> None:
        s = score(self._board)
        self.games_played += 1
        self.last_score = s
        LOG.info("Game over: %s", describe(s))
        if self.on_game_over is not None:
            self.on_game_over(s)
        self._replace_board(initial_board())

    def _replace_board(self, board: Board) -> None:
        self._board = board
        self._generation += 1
        self._notify()

    def _notify(self) -> None:
        if self.on_board_change is not None:
            self.on_board_change(self._board)


def _name(player: Player) -> str:
    return "BLACK" if player == BLACK else "WHITE"
