# src/snake/__init__.py
"""Grid snake: game engine plus a pygame front end."""

from .config import ConfigError, GameConfig
from .game import Game, Outcome, Snapshot, Status
from .grid import Direction, Position

__all__ = [
    "ConfigError",
    "GameConfig",
    "Game",
    "Outcome",
    "Snapshot",
    "Status",
    "Direction",
    "Position",
]
