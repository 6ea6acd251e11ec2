# game.py
from dataclasses import dataclass
from enum import Enum
import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np  # type: ignore

from .config import GameConfig
from .food import Food
from .grid import Direction, Position, grid_universe
from .rules import is_collision, is_won
from .snake import Snake

logger = logging.getLogger(__name__)


class Status(Enum):
    RUNNING = "running"
    OVER = "over"


class Outcome(Enum):
    COLLIDED = "collided"
    WON = "won"


class Segment(NamedTuple):
    position: Position
    is_head: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one committed tick, all the render sink needs."""
    segments: Tuple[Segment, ...]
    food: Position
    width: int
    height: int
    cell_size: int
    score: int
    status: Status
    outcome: Optional[Outcome]

    @property
    def over(self) -> bool:
        return self.status is Status.OVER


class Game:
    """
    Tick-driven state machine tying Snake, Food and the collision rules
    together. It has no notion of wall-clock time: the caller decides when
    `update()` runs.
    """

    def __init__(
        self,
        cfg: GameConfig,
        rng: Optional[np.random.Generator] = None,
        snake: Optional[Snake] = None,
        food: Optional[Food] = None,
    ):
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.universe = grid_universe(cfg)
        self.snake = snake if snake is not None else Snake.new(cfg, self.rng)
        self.food = food if food is not None else self._spawn_food()
        self.status = Status.RUNNING
        self.outcome: Optional[Outcome] = None
        self.score = 0
        self.ticks = 0
        self.pending: Optional[Direction] = None
        logger.debug("new game %dx%d cells, %r, %r",
                     cfg.columns, cfg.rows, self.snake, self.food)

    @classmethod
    def new(cls, cfg: GameConfig) -> "Game":
        return cls(cfg)

    def _spawn_food(self) -> Food:
        food = Food.new(self.cfg, self.rng)
        if self.cfg.spawn_exclusion and food.position in self.snake:
            spot = food.refresh_position(self.universe, self.snake.body_set)
            # A one-cell board has nowhere else to go; leave it where it is.
            if spot is not None:
                food.position = spot
        return food

    @property
    def over(self) -> bool:
        return self.status is Status.OVER

    @property
    def won(self) -> bool:
        return self.outcome is Outcome.WON

    def _finish(self, outcome: Outcome) -> None:
        self.status = Status.OVER
        self.outcome = outcome
        logger.info("game over after %d ticks: %s, score %d",
                    self.ticks, outcome.value, self.score)

    # ---------- Input / Update / Snapshot ----------
    def handle_direction_intent(self, direction: Direction) -> bool:
        """
        Queue a heading for the next tick. Reversals are dropped, and so is
        anything arriving after a change has already been queued this tick.
        Returns True if the intent was accepted.
        """
        if self.over:
            return False
        if self.pending is not None:
            return False
        if not self.snake.can_turn(direction):
            return False
        if direction is not self.snake.direction:
            self.pending = direction
        return True

    def update(self) -> bool:
        """
        Advance the game by one tick.
        Returns True while the game is still running.
        """
        if self.over:
            return False

        # Commit direction once per tick
        if self.pending is not None:
            self.snake.turn(self.pending)
            self.pending = None

        grow = self.snake.head == self.food.position
        self.snake.move_forward(grow)
        self.ticks += 1

        if is_collision(self.snake, self.cfg):
            self._finish(Outcome.COLLIDED)
            return False

        if grow:
            self.score += 1
            spot = self.food.refresh_position(self.universe, self.snake.body_set)
            if is_won(spot):
                self._finish(Outcome.WON)
                return False
            self.food.position = spot
            logger.debug("ate food, score %d, next food at %s", self.score, tuple(spot))

        return True

    def snapshot(self) -> Snapshot:
        segments = tuple(
            Segment(pos, i == 0) for i, pos in enumerate(self.snake.body)
        )
        return Snapshot(
            segments=segments,
            food=self.food.position,
            width=self.cfg.width,
            height=self.cfg.height,
            cell_size=self.cfg.cell_size,
            score=self.score,
            status=self.status,
            outcome=self.outcome,
        )

    def end_message(self) -> str:
        if self.won:
            return f"You won! The board is full. Score: {self.score}"
        return f"Game over! Score: {self.score}"
