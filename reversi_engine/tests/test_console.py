import asyncio
import io
import threading

from reversi_engine.config import EngineConfig
from reversi_engine.game.board import BLACK, initial_board
from reversi_engine.game.coordinator import TurnCoordinator
from reversi_engine.game.rules import valid_positions
from reversi_engine.UI.console import (
    try_parse_algebraic, try_parse_pair, format_moves, render_board, parse_command,
    handle_command, announce_winner, run_console,
)

FAST = EngineConfig(watch_delay=0.0, think_delay=0.0)


def test_try_parse_algebraic_valid_and_invalid():
    assert try_parse_algebraic("D3") == (2, 3)
    assert try_parse_algebraic("a8") == (7, 0)
    assert try_parse_algebraic("H1") == (0, 7)
    assert try_parse_algebraic("Z9") is None
    assert try_parse_algebraic("33") is None
    assert try_parse_algebraic("") is None

def test_try_parse_pair():
    assert try_parse_pair("2,4") == (2, 4)
    assert try_parse_pair(" 9 , -1 ") == (9, -1)
    assert try_parse_pair("2;4") is None
    assert try_parse_pair("a,b") is None

def test_format_moves_has_human_labels():
    s = format_moves([(2, 3), (2, 4)])
    assert s == "D3, E3"

def test_parse_command_words_and_moves():
    assert parse_command("q\n") == ("quit", None)
    assert parse_command("Forfeit") == ("forfeit", None)
    assert parse_command("watch") == ("watch", None)
    assert parse_command("d") == ("debug", None)
    assert parse_command("E3") == ("move", (2, 4))
    assert parse_command("2,4") == ("move", (2, 4))
    assert parse_command("hello") is None

def test_render_board_smoke(capsys):
    b = initial_board()
    render_board(b, valid_positions(BLACK, b), "Not a valid move")
    out = capsys.readouterr().out
    assert "Score: BLACK=2  WHITE=2" in out
    assert "ABCDEFGH" in out
    assert "Not a valid move" in out
    assert "*" in out

def test_announce_winner(capsys):
    announce_winner(40, 24)
    assert "FINAL: BLACK wins 40–24" in capsys.readouterr().out

def test_handle_illegal_move_prints_rejection(capsys):
    coord = TurnCoordinator(FAST)
    assert handle_command(coord, ("move", (0, 0))) is True
    assert "Not a valid move" in capsys.readouterr().out
    assert coord.get_board() == initial_board()

def test_handle_toggles_and_quit(capsys):
    coord = TurnCoordinator(FAST)
    assert handle_command(coord, ("watch", None)) is True
    assert coord.auto_play is True
    assert handle_command(coord, ("debug", None)) is True
    assert coord.debug is True
    out = capsys.readouterr().out
    assert "*" in out
    assert "BLACK legal moves: E3, F4, C5, D6" in out
    assert handle_command(coord, ("forfeit", None)) is True
    assert coord.get_board() == initial_board()
    assert handle_command(coord, ("quit", None)) is False

def test_run_console_quits_cleanly(capsys):
    coord = TurnCoordinator(FAST)
    rc = asyncio.run(asyncio.wait_for(run_console(coord, stream=io.StringIO("nonsense\nq\n")), 5.0))
    assert rc == 0
    out = capsys.readouterr().out
    assert "Invalid input." in out
    assert "Score:" in out

class _SilentStream:
    """stdin that never produces a line, so only the engine can end the session."""
    def readline(self):
        threading.Event().wait()
        return ""

def test_run_console_returns_when_games_are_done():
    cfg = EngineConfig(watch_delay=0.0, think_delay=0.0, auto_play=True)
    coord = TurnCoordinator(cfg)
    rc = asyncio.run(asyncio.wait_for(run_console(coord, max_games=1, stream=_SilentStream()), 10.0))
    assert rc == 0
    assert coord.games_played == 1
