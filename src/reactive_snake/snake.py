"""Immutable snake body with amortized O(1) head push and tail drop."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple

from reactive_snake.board import Position


class InvariantViolation(RuntimeError):
    """A structural contract of the game core was broken."""


class _Link(NamedTuple):
    """Cell of a persistent singly linked list."""

    value: Position
    rest: _Link | None


def _iter_links(link: _Link | None) -> Iterator[Position]:
    while link is not None:
        yield link.value
        link = link.rest


def _reversed(link: _Link | None) -> _Link | None:
    out: _Link | None = None
    for value in _iter_links(link):
        out = _Link(value, out)
    return out


class Snake:
    """A snake body split into two persistent partitions.

    ``front`` holds segments head first and ``back`` holds segments tail
    first, so the full body from head to tail is ``front`` followed by
    ``back`` reversed. Pushing a head conses onto ``front``; dropping the
    tail pops from ``back``, refilling it by reversing ``front`` only when
    it runs dry. Instances are never mutated; every move returns a new one
    sharing structure with the old.
    """

    __slots__ = ("front", "back", "_length")

    def __init__(self, positions: Iterable[Position] = ()) -> None:
        body = [Position(*p) for p in positions]
        front: _Link | None = None
        for pos in reversed(body):
            front = _Link(pos, front)
        self.front = front
        self.back: _Link | None = None
        self._length = len(body)

    @classmethod
    def from_positions(cls, positions: Iterable[Position]) -> Snake:
        """Build a snake from head-to-tail positions."""
        body = list(positions)
        if not body:
            raise ValueError("Snake must have at least one segment.")
        return cls(body)

    @classmethod
    def _from_parts(
        cls, front: _Link | None, back: _Link | None, length: int,
    ) -> Snake:
        snake = cls.__new__(cls)
        snake.front = front
        snake.back = back
        snake._length = length
        return snake

    @property
    def head(self) -> Position:
        """Return the head segment."""
        if self.front is not None:
            return self.front.value
        if self.back is None:
            raise InvariantViolation("Snake has no segments.")
        last = self.back
        while last.rest is not None:
            last = last.rest
        return last.value

    @property
    def body(self) -> tuple[Position, ...]:
        """All segments from head to tail."""
        return tuple(self)

    def __iter__(self) -> Iterator[Position]:
        yield from _iter_links(self.front)
        yield from _iter_links(_reversed(self.back))

    def __len__(self) -> int:
        return self._length

    def __contains__(self, position: object) -> bool:
        return any(seg == position for seg in _iter_links(self.front)) or any(
            seg == position for seg in _iter_links(self.back)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snake):
            return NotImplemented
        return len(self) == len(other) and self.body == other.body

    def __hash__(self) -> int:
        return hash(self.body)

    def __repr__(self) -> str:
        return f"Snake({list(self.body)!r})"

    def advance(self, new_head: Position, grow: bool = False) -> Snake:
        """Return the snake moved onto *new_head*.

        The tail is dropped unless *grow* is set, in which case the body
        lengthens by one segment.
        """
        if self.front is None and self.back is None:
            raise InvariantViolation("Snake has no segments to move.")
        front = _Link(Position(*new_head), self.front)
        if grow:
            return Snake._from_parts(front, self.back, self._length + 1)
        back = self.back
        if back is None:
            front, back = None, _reversed(front)
        return Snake._from_parts(front, back.rest, self._length)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self],
            "length": len(self),
        }


def head(snake: Snake) -> Position:
    """Return the head of *snake*."""
    return snake.head


def advance(snake: Snake, new_head: Position, grow: bool = False) -> Snake:
    """Return *snake* moved onto *new_head*, growing when *grow* is set."""
    return snake.advance(new_head, grow)


def contains(snake: Snake, position: Position) -> bool:
    """Check whether any segment of *snake* sits on *position*."""
    return position in snake
