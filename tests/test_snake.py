"""
Tests for snake.py - movement, growth and turning.
"""

from collections import deque

import pytest

from snake.config import GameConfig
from snake.grid import Direction, Position, grid_universe
from snake.snake import Snake


def make_snake(cells, direction=Direction.RIGHT, step=9):
    return Snake([Position(*c) for c in cells], direction, step)


class TestSnakeInit:

    def test_single_cell_body(self):
        snake = make_snake([(0, 0)])
        assert list(snake.body) == [Position(0, 0)]
        assert snake.body_set == {Position(0, 0)}
        assert isinstance(snake.body, deque)

    def test_head_is_first_cell(self):
        snake = make_snake([(18, 0), (9, 0), (0, 0)])
        assert snake.head == Position(18, 0)

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError):
            Snake([], Direction.UP, 9)

    def test_new_is_random_single_cell(self, rng):
        cfg = GameConfig()
        snake = Snake.new(cfg, rng)
        assert len(snake) == 1
        assert snake.head in set(grid_universe(cfg))
        assert snake.direction in set(Direction)
        assert snake.step == cfg.cell_size


class TestMoveForward:

    @pytest.mark.parametrize(
        "direction, expected",
        [
            (Direction.UP, (18, 9)),
            (Direction.DOWN, (18, 27)),
            (Direction.LEFT, (9, 18)),
            (Direction.RIGHT, (27, 18)),
        ],
    )
    def test_moves_one_cell(self, direction, expected):
        snake = make_snake([(18, 18)], direction)
        snake.move_forward(grow=False)
        assert list(snake.body) == [Position(*expected)]
        assert snake.body_set == {Position(*expected)}

    def test_right_from_origin(self):
        snake = make_snake([(0, 0)], Direction.RIGHT)
        snake.move_forward(grow=False)
        assert list(snake.body) == [Position(9, 0)]

    def test_slide_keeps_length(self):
        snake = make_snake([(18, 0), (9, 0), (0, 0)])
        snake.move_forward(grow=False)
        assert list(snake.body) == [Position(27, 0), Position(18, 0), Position(9, 0)]
        assert snake.body_set == set(snake.body)

    def test_grow_adds_one_cell(self):
        snake = make_snake([(18, 0), (9, 0)])
        snake.move_forward(grow=True)
        assert len(snake) == 3
        assert list(snake.body) == [Position(27, 0), Position(18, 0), Position(9, 0)]
        assert snake.body_set == set(snake.body)

    def test_head_may_take_the_vacated_tail_cell(self):
        """Chasing the tail keeps the body and its set in sync."""
        snake = make_snake([(0, 0), (9, 0), (9, 9), (0, 9)], Direction.DOWN)
        snake.move_forward(grow=False)
        assert snake.head == Position(0, 9)
        assert len(snake.body_set) == len(snake.body) == 4
        assert snake.body_set == set(snake.body)

    def test_contains_uses_body(self):
        snake = make_snake([(9, 0), (0, 0)])
        assert Position(0, 0) in snake
        assert Position(18, 0) not in snake


class TestTurning:

    @pytest.mark.parametrize("current", list(Direction))
    def test_only_reversal_is_rejected(self, current):
        for cand in Direction:
            snake = make_snake([(18, 18)], current)
            accepted = snake.turn(cand)
            assert accepted == (cand is not current.opposite)
            assert snake.direction is (cand if accepted else current)

    def test_can_turn_does_not_change_direction(self):
        snake = make_snake([(0, 0)], Direction.UP)
        assert snake.can_turn(Direction.LEFT)
        assert snake.direction is Direction.UP
