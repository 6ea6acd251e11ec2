from dataclasses import dataclass
from typing import Optional

# ----- Colors -----
BG    = (255, 255, 255)
HEAD  = (255, 0, 0)
BODY  = (0, 0, 255)
FOOD  = (0, 255, 0)
TEXT  = (40, 40, 48)


class ConfigError(ValueError):
    """Raised for a board or pace the game cannot run with."""


# ----- Tunables (what you'd tweak for board size and pace) -----
@dataclass(frozen=True)
class GameConfig:
    cell_size: int = 9
    width: int = 300
    height: int = 300
    tick_rate: int = 10            # updates per second
    fps: int = 60                  # render cap; movement is gated by tick_rate
    seed: Optional[int] = None
    spawn_exclusion: bool = False  # keep the first food off the snake
    game_over_ms: int = 1500

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ConfigError(f"cell_size must be positive, got {self.cell_size}")
        if self.width < self.cell_size or self.height < self.cell_size:
            raise ConfigError(
                f"board {self.width}x{self.height} is smaller than one "
                f"{self.cell_size}px cell"
            )
        if self.tick_rate <= 0:
            raise ConfigError(f"tick_rate must be positive, got {self.tick_rate}")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")

    @property
    def columns(self) -> int:
        return -(-self.width // self.cell_size)

    @property
    def rows(self) -> int:
        return -(-self.height // self.cell_size)

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    @property
    def tick_ms(self) -> float:
        return 1000.0 / self.tick_rate


DEFAULT = GameConfig()
