# reversi_engine/config.py
# Zachary Chan c3468750
from __future__ import annotations

from dataclasses import dataclass

WATCH_DELAY = 0.2   # seconds between moves when the computer plays both sides
THINK_DELAY = 1.5   # seconds the computer "thinks" against a human


@dataclass(frozen=True)
class EngineConfig:
    watch_delay: float = WATCH_DELAY
    think_delay: float = THINK_DELAY
    auto_play: bool = False
    debug: bool = False

    def __post_init__(self):
        if self.watch_delay < 0 or self.think_delay < 0:
            raise ValueError("Delays must be non-negative.")
