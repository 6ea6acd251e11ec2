# main.py
import argparse
import logging
import sys

import pygame # type: ignore

from .clock import TickClock
from .config import DEFAULT, ConfigError, GameConfig
from .controls import handle_input
from .game import Game
from .render import draw_game, draw_game_over

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--cell-size", type=int, default=DEFAULT.cell_size)
    parser.add_argument("--width", type=int, default=DEFAULT.width)
    parser.add_argument("--height", type=int, default=DEFAULT.height)
    parser.add_argument(
        "--tick-rate",
        type=int,
        default=DEFAULT.tick_rate,
        help="game updates per second",
    )
    parser.add_argument("--fps", type=int, default=DEFAULT.fps, help="render frame cap")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible runs")
    parser.add_argument(
        "--spawn-exclusion",
        action="store_true",
        help="never place the first food on the snake",
    )
    parser.add_argument(
        "--game-over-ms",
        type=int,
        default=DEFAULT.game_over_ms,
        help="how long the final frame stays up",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        cell_size=args.cell_size,
        width=args.width,
        height=args.height,
        tick_rate=args.tick_rate,
        fps=args.fps,
        seed=args.seed,
        spawn_exclusion=args.spawn_exclusion,
        game_over_ms=args.game_over_ms,
    )


def run(cfg: GameConfig) -> Game:
    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode((cfg.width, cfg.height))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()

        game = Game.new(cfg)
        ticker = TickClock(cfg.tick_rate, pygame.time.get_ticks())
        running = True

        while running:
            # 1) input
            running = handle_input(game)
            if not running:
                logger.info("quit by player, score %d", game.score)
                break

            # 2) update, stopping on the first terminal tick
            for _ in range(ticker.due(pygame.time.get_ticks())):
                if not game.update():
                    break
            if game.over:
                # draw final frame with overlay
                snap = game.snapshot()
                draw_game(screen, font, snap)
                draw_game_over(screen, font, snap)
                pygame.display.flip()
                pygame.time.wait(cfg.game_over_ms)
                break

            # 3) render
            draw_game(screen, font, game.snapshot())
            pygame.display.flip()
            clock.tick(cfg.fps)  # high FPS; movement gated by the tick clock
    finally:
        pygame.quit()
    return game


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        cfg = config_from_args(args)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    game = run(cfg)
    print(game.end_message())
    return 0


if __name__ == "__main__":
    sys.exit(main())
