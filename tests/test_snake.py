"""Tests for the Snake module."""

import pytest

from reactive_snake.board import Position
from reactive_snake.snake import (
    InvariantViolation,
    Snake,
    advance,
    contains,
    head,
)

P = Position


def _snake(*points):
    return Snake.from_positions(P(*p) for p in points)


class TestSnakeInit:
    def test_from_positions(self):
        snake = _snake((0, 0), (0, -1), (0, -2))
        assert snake.head == (0, 0)
        assert len(snake) == 3
        assert snake.body == (P(0, 0), P(0, -1), P(0, -2))

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="at least one"):
            Snake.from_positions([])

    def test_head_of_empty_snake_is_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            Snake().head

    def test_advance_empty_snake_is_invariant_violation(self):
        with pytest.raises(InvariantViolation):
            Snake().advance(P(0, 0))

    def test_advance_empty_snake_with_growth_is_invariant_violation(self):
        with pytest.raises(InvariantViolation, match="no segments"):
            Snake().advance(P(0, 0), grow=True)

    def test_constructor_counts_segments(self):
        snake = Snake([(0, 0), (0, -1), (0, -2)])
        assert len(snake) == 3
        assert snake.body == (P(0, 0), P(0, -1), P(0, -2))
        assert len(Snake()) == 0

    def test_length_tracks_moves(self):
        snake = _snake((0, 0), (0, -1))
        snake = snake.advance(P(0, 1)).advance(P(0, 2), grow=True)
        assert len(snake) == len(snake.body) == 3


class TestSnakeAdvance:
    def test_advance_without_growth(self):
        snake = _snake((0, 0), (0, -1), (0, -2))
        moved = advance(snake, P(0, 1), grow=False)
        assert moved.body == (P(0, 1), P(0, 0), P(0, -1))
        assert len(moved) == 3

    def test_advance_with_growth(self):
        snake = _snake((0, 0), (0, -1))
        moved = advance(snake, P(1, 0), grow=True)
        assert moved.body == (P(1, 0), P(0, 0), P(0, -1))
        assert len(moved) == 3

    def test_advance_does_not_mutate(self):
        snake = _snake((0, 0), (0, -1), (0, -2))
        snake.advance(P(0, 1))
        assert snake.body == (P(0, 0), P(0, -1), P(0, -2))
        assert len(snake) == 3

    def test_rebalances_front_into_back(self):
        snake = _snake((0, 0), (0, -1), (0, -2))
        assert snake.back is None
        moved = snake.advance(P(0, 1))
        # Front was reversed into back to reach the tail.
        assert moved.front is None
        assert moved.back is not None
        assert head(moved) == P(0, 1)

    def test_mixed_partitions_keep_order(self):
        snake = _snake((0, 0), (0, -1), (0, -2))
        snake = snake.advance(P(0, 1))
        snake = snake.advance(P(0, 2))
        snake = snake.advance(P(1, 2), grow=True)
        assert snake.front is not None and snake.back is not None
        assert snake.body == (P(1, 2), P(0, 2), P(0, 1), P(0, 0))
        assert snake.head == P(1, 2)

    def test_single_segment_moves(self):
        snake = _snake((3, 3))
        moved = snake.advance(P(4, 3))
        assert moved.body == (P(4, 3),)
        assert moved.head == P(4, 3)

    def test_long_walk(self):
        snake = _snake((0, 0), (0, -1), (0, -2), (0, -3))
        for y in range(1, 50):
            snake = snake.advance(P(0, y))
        assert snake.body == (P(0, 49), P(0, 48), P(0, 47), P(0, 46))


class TestSnakeContains:
    def test_contains_across_partitions(self):
        snake = _snake((0, 0), (0, -1), (0, -2))
        snake = snake.advance(P(0, 1)).advance(P(0, 2))
        for seg in [(0, 2), (0, 1), (0, 0)]:
            assert contains(snake, P(*seg))
        assert not contains(snake, P(0, -1))
        assert not contains(snake, P(5, 5))


class TestSnakeEquality:
    def test_equality_ignores_partition_split(self):
        direct = _snake((0, 1), (0, 0), (0, -1))
        moved = _snake((0, 0), (0, -1), (0, -2)).advance(P(0, 1))
        assert direct.front is not None and moved.front is None
        assert direct == moved
        assert hash(direct) == hash(moved)

    def test_different_bodies_differ(self):
        assert _snake((0, 0), (0, -1)) != _snake((0, 0), (-1, 0))


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = _snake((0, 0), (0, -1))
        d = snake.to_dict()
        assert d["body"] == [[0, 0], [0, -1]]
        assert d["length"] == 2
