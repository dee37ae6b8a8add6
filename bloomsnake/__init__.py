"""Influence-grid Battlesnake: per-turn move selection from a scored board."""

__version__ = "0.1.0"

from bloomsnake.config import DIRECTIONS, Weights  # noqa: E402
from bloomsnake.snake import Decision, Snake, decide  # noqa: E402
from bloomsnake.snapshot import GameSnapshot  # noqa: E402

__all__ = [
    "DIRECTIONS",
    "Decision",
    "GameSnapshot",
    "Snake",
    "Weights",
    "decide",
]
