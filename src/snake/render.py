# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import BG, BODY, FOOD, HEAD, TEXT
from .game import Outcome, Snapshot
from .grid import Position


def draw_cell(screen: pygame.Surface, pos: Position, size: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(pos.x, pos.y, size, size)
    pygame.draw.rect(screen, color, rect)


def draw_board(screen: pygame.Surface, snap: Snapshot) -> None:
    screen.fill(BG)
    # snake
    for pos, is_head in snap.segments:
        draw_cell(screen, pos, snap.cell_size, HEAD if is_head else BODY)
    # food
    draw_cell(screen, snap.food, snap.cell_size, FOOD)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    draw_board(screen, snap)
    txt = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(txt, (8, 6))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((snap.width, snap.height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("YOU WIN" if snap.outcome is Outcome.WON else "GAME OVER", True, (240, 240, 250))
    sco   = font.render(f"Score: {snap.score}", True, (220, 220, 230))

    tx = title.get_rect(center=(snap.width // 2, snap.height // 2 - 12))
    cx = sco.get_rect(center=(snap.width // 2, snap.height // 2 + 16))

    screen.blit(title, tx)
    screen.blit(sco, cx)
