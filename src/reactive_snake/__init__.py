"""Reactive Snake: deterministic snake game core."""

from reactive_snake.board import BOARD_SIZE, Delta, Direction, Position
from reactive_snake.config import DEFAULT_CONFIG, VELOCITY, GameConfig
from reactive_snake.engine import fold, replay, step
from reactive_snake.events import ChangeDirection, Event, Ignore, Restart, Tick
from reactive_snake.snake import InvariantViolation, Snake
from reactive_snake.state import GameState, initial_state

__all__ = [
    "BOARD_SIZE",
    "DEFAULT_CONFIG",
    "VELOCITY",
    "ChangeDirection",
    "Delta",
    "Direction",
    "Event",
    "GameConfig",
    "GameState",
    "Ignore",
    "InvariantViolation",
    "Position",
    "Restart",
    "Snake",
    "Tick",
    "fold",
    "initial_state",
    "replay",
    "step",
]
