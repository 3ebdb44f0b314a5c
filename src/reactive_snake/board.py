"""Board geometry: logical coordinates, movement deltas and bounds."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

# Half-extent of the playable board; valid coordinates lie in
# [-BOARD_SIZE, BOARD_SIZE] on both axes.
BOARD_SIZE = 15


class Position(NamedTuple):
    """Board-relative logical coordinate. The y axis points up."""

    x: int
    y: int

    def moved(self, delta: Delta) -> Position:
        """Return the position one *delta* step away."""
        return Position(self.x + delta.dx, self.y + delta.dy)


@dataclass(frozen=True)
class Delta:
    """Unit movement vector along exactly one axis."""

    dx: int
    dy: int

    def __post_init__(self) -> None:
        if abs(self.dx) + abs(self.dy) != 1:
            raise ValueError(
                f"Delta must move one unit along one axis, got "
                f"({self.dx}, {self.dy})."
            )

    @property
    def is_horizontal(self) -> bool:
        return self.dx != 0

    def to_list(self) -> list[int]:
        return [self.dx, self.dy]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Delta:
        return Delta(*self.value)


def is_out_of_bounds(position: Position, board_size: int = BOARD_SIZE) -> bool:
    """Check whether a position lies outside the playable board."""
    return abs(position.x) > board_size or abs(position.y) > board_size


def cells(board_size: int = BOARD_SIZE) -> int:
    """Number of cells along one side of the board."""
    return 2 * board_size + 1


def to_grid(position: Position, board_size: int = BOARD_SIZE) -> tuple[int, int]:
    """Map a logical position to a ``(row, col)`` array index.

    Row 0 is the top edge of the board, so larger ``y`` maps to smaller rows.
    """
    return board_size - position.y, position.x + board_size
