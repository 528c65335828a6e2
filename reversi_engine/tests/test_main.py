import argparse
import pytest

from reversi_engine.main import parse_args, build_config, build_coordinator, valid_delay, valid_game_count
from reversi_engine.config import THINK_DELAY, WATCH_DELAY


def test_parse_args_defaults():
    args = parse_args([])
    assert args.watch is False
    assert args.debug is False
    assert args.think_delay == THINK_DELAY
    assert args.watch_delay == WATCH_DELAY
    assert args.max_games is None


def test_parse_args_to_config():
    args = parse_args(["--watch", "--debug", "--think-delay", "0", "--watch-delay", "0.05", "--max-games", "3"])
    cfg = build_config(args)
    assert cfg.auto_play is True
    assert cfg.debug is True
    assert cfg.think_delay == 0.0
    assert cfg.watch_delay == 0.05
    assert args.max_games == 3


def test_validators_reject_bad_values():
    with pytest.raises(argparse.ArgumentTypeError):
        valid_delay("soon")
    with pytest.raises(argparse.ArgumentTypeError):
        valid_delay("-1")
    with pytest.raises(argparse.ArgumentTypeError):
        valid_game_count("0")


def test_build_coordinator_wires_console_callbacks(capsys):
    coord = build_coordinator(build_config(parse_args(["--think-delay", "0"])))
    coord.reset_game()
    assert "Score:" in capsys.readouterr().out
