"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Deque, Iterable, Set

import numpy as np  # type: ignore

from .config import GameConfig
from .grid import Direction, Position, random_position


class Snake:
    """
    The player's snake.

    Attributes:
        body: deque of Positions from head at index 0 to tail at the end
        body_set: the same cells as a set, for O(1) membership tests
        direction: current heading, used by the next move
        step: distance covered by one move (the cell size)
    """

    def __init__(self, body: Iterable[Position], direction: Direction, step: int):
        self.body: Deque[Position] = deque(body)
        if not self.body:
            raise ValueError("a snake needs at least one cell")
        self.body_set: Set[Position] = set(self.body)
        self.direction = direction
        self.step = step

    @classmethod
    def new(cls, cfg: GameConfig, rng: np.random.Generator) -> "Snake":
        direction = Direction.random(rng)
        return cls([random_position(cfg, rng)], direction, cfg.cell_size)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, position: Position) -> bool:
        return position in self.body_set

    def move_forward(self, grow: bool) -> None:
        """
        Advance one cell in the current direction. The tail is kept when
        `grow` is True, so the body gets one cell longer.
        """
        new_head = self.head.moved(self.direction, self.step)

        # Drop the tail first: the head may legally take the cell it leaves.
        if not grow:
            tail = self.body.pop()
            self.body_set.discard(tail)

        self.body.appendleft(new_head)
        self.body_set.add(new_head)

    def can_turn(self, direction: Direction) -> bool:
        """No 180° turns."""
        return not direction.is_opposite(self.direction)

    def turn(self, direction: Direction) -> bool:
        if not self.can_turn(direction):
            return False
        self.direction = direction
        return True

    def __repr__(self) -> str:
        return f"Snake(len={len(self)}, head={tuple(self.head)}, {self.direction.name})"
