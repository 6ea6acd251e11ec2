# rules.py
from itertools import islice
from typing import Optional, Sequence

from .config import GameConfig
from .grid import Position
from .snake import Snake


def hits_wall(head: Position, cfg: GameConfig) -> bool:
    return not (0 <= head.x < cfg.width and 0 <= head.y < cfg.height)


def hits_self(body: Sequence[Position]) -> bool:
    """True if the head shares a cell with any other segment."""
    if len(body) <= 1:
        return False
    head = body[0]
    return any(seg == head for seg in islice(body, 1, None))


def is_collision(snake: Snake, cfg: GameConfig) -> bool:
    return hits_wall(snake.head, cfg) or hits_self(snake.body)


def is_won(free_position: Optional[Position]) -> bool:
    """The board is full once food has nowhere left to go."""
    return free_position is None
