# food.py
from typing import AbstractSet, Optional, Sequence

import numpy as np  # type: ignore

from .config import GameConfig
from .grid import Position, random_position

# Past this occupied share, random probing is replaced by listing the free cells.
MAX_PROBE_SHARE = 0.5
MAX_PROBES = 32


class Food:
    def __init__(self, position: Position, rng: np.random.Generator):
        self.position = position
        self.rng = rng

    @classmethod
    def new(cls, cfg: GameConfig, rng: np.random.Generator) -> "Food":
        return cls(random_position(cfg, rng), rng)

    def refresh_position(
        self,
        all_positions: Sequence[Position],
        invalid_positions: AbstractSet[Position],
    ) -> Optional[Position]:
        """
        Pick a uniformly random cell of `all_positions` that is not in
        `invalid_positions`. Returns None when no such cell exists, i.e. the
        snake covers the whole board. Neither argument is modified.
        """
        n = len(all_positions)
        if n == 0:
            return None

        if len(invalid_positions) < n * MAX_PROBE_SHARE:
            for _ in range(MAX_PROBES):
                cand = all_positions[int(self.rng.integers(n))]
                if cand not in invalid_positions:
                    return cand

        free = [p for p in all_positions if p not in invalid_positions]
        if not free:
            return None
        return free[int(self.rng.integers(len(free)))]

    def __repr__(self) -> str:
        return f"Food({self.position.x}, {self.position.y})"
