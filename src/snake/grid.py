# grid.py
from enum import Enum
from typing import NamedTuple, Tuple

import numpy as np  # type: ignore

from .config import GameConfig


class Direction(Enum):
    """Heading as a unit (dx, dy) vector; origin is the top-left corner."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other: "Direction") -> bool:
        return other is self.opposite

    @classmethod
    def random(cls, rng: np.random.Generator) -> "Direction":
        members = list(cls)
        return members[int(rng.integers(len(members)))]


class Position(NamedTuple):
    x: int
    y: int

    def moved(self, direction: Direction, step: int) -> "Position":
        dx, dy = direction.value
        return Position(self.x + dx * step, self.y + dy * step)


def cell_range(extent: int, cell_size: int) -> range:
    """Pixel offsets of every cell whose origin lies inside `extent`."""
    return range(0, extent, cell_size)


def grid_universe(cfg: GameConfig) -> Tuple[Position, ...]:
    """Every valid cell on the board, column by column."""
    return tuple(
        Position(x, y)
        for x in cell_range(cfg.width, cfg.cell_size)
        for y in cell_range(cfg.height, cfg.cell_size)
    )


def random_position(cfg: GameConfig, rng: np.random.Generator) -> Position:
    xs = cell_range(cfg.width, cfg.cell_size)
    ys = cell_range(cfg.height, cfg.cell_size)
    return Position(xs[int(rng.integers(len(xs)))], ys[int(rng.integers(len(ys)))])
