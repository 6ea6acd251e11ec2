# controls.py
from typing import Optional

import pygame  # type: ignore

from .game import Game
from .grid import Direction

KEYMAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def direction_for_key(key: int) -> Optional[Direction]:
    return KEYMAP.get(key)


def apply_event(game: Game, event: pygame.event.Event) -> bool:
    """Feed one event to the game. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        cand = direction_for_key(event.key)
        if cand is not None:
            game.handle_direction_intent(cand)
    return True


def handle_input(game: Game) -> bool:
    """Process pending events; key releases and unknown keys are ignored."""
    running = True
    for event in pygame.event.get():
        running = apply_event(game, event) and running
    return running
