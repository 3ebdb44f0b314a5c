"""Aggregate game state."""

from __future__ import annotations

from dataclasses import dataclass

from reactive_snake.board import Delta, Direction, Position
from reactive_snake.snake import Snake

_INITIAL_BODY = (
    Position(0, 0),
    Position(0, -1),
    Position(0, -2),
    Position(0, -3),
)


@dataclass(frozen=True)
class GameState:
    """Everything a renderer needs to draw one frame.

    Transitions replace the whole value; no field is ever mutated in place.
    """

    snake: Snake
    direction: Delta
    food: Position | None = None
    tick_count: int = 0
    is_over: bool = False

    @property
    def score(self) -> int:
        """Segments grown since the start of the game."""
        return len(self.snake) - len(_INITIAL_BODY)

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick_count,
            "score": self.score,
            "game_over": self.is_over,
            "direction": self.direction.to_list(),
            "food": list(self.food) if self.food is not None else None,
            "snake": self.snake.to_dict(),
        }


def initial_state() -> GameState:
    """Return the fixed starting board."""
    return GameState(
        snake=Snake.from_positions(_INITIAL_BODY),
        direction=Direction.UP.delta,
    )
