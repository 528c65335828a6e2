class ReversiError(Exception):
    """Base exception for the engine."""

class IllegalMoveError(ReversiError):
    """Move not legal under current board state."""
