"""Replay PGN movetext and report the final FEN piece placement."""

from pgnreplay.config import ReplayOptions
from pgnreplay.replay import apply_san, final_position, replay_game, replay_moves

__all__ = [
    "ReplayOptions",
    "apply_san",
    "final_position",
    "replay_game",
    "replay_moves",
]

__version__ = "0.1.0"
