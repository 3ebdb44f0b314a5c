"""Input events and the keyboard boundary that builds them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from reactive_snake.board import (
    BOARD_SIZE,
    Delta,
    Direction,
    Position,
    is_out_of_bounds,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tick:
    """Timer pulse carrying a candidate food position."""

    food: Position


@dataclass(frozen=True)
class ChangeDirection:
    """Request to steer the snake along *delta*."""

    delta: Delta


@dataclass(frozen=True)
class Restart:
    """Return to the initial board."""


@dataclass(frozen=True)
class Ignore:
    """Input that carries no game meaning."""


Event = Union[Tick, ChangeDirection, Restart, Ignore]

_KEY_MAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_RESTART_KEYS = frozenset({"space", "restart"})


def from_arrows(x: int, y: int, space: bool = False) -> Event:
    """Map a sampled arrow-key vector and space bar state to an event.

    Diagonal or non-unit vectors never reach the game as a direction;
    they are dropped here as ``Ignore``.
    """
    if space:
        return Restart()
    if x == 0 and y == 0:
        return Ignore()
    try:
        return ChangeDirection(Delta(x, y))
    except ValueError:
        logger.debug("Dropping malformed arrow input (%d, %d).", x, y)
        return Ignore()


def from_key(name: str) -> Event:
    """Map a named key press to an event."""
    key = name.strip().lower()
    if key in _RESTART_KEYS:
        return Restart()
    direction = _KEY_MAP.get(key)
    if direction is None:
        return Ignore()
    return ChangeDirection(direction.delta)


def event_type(event: Event) -> str:
    """Return the wire tag for *event*."""
    if isinstance(event, Tick):
        return "tick"
    if isinstance(event, ChangeDirection):
        return "direction"
    if isinstance(event, Restart):
        return "restart"
    if isinstance(event, Ignore):
        return "ignore"
    raise TypeError(f"Not an event: {event!r}")


def event_to_dict(event: Event) -> dict:
    """Serialize an event for replay logs."""
    data: dict = {"type": event_type(event)}
    if isinstance(event, Tick):
        data["food"] = list(event.food)
    elif isinstance(event, ChangeDirection):
        data["delta"] = event.delta.to_list()
    return data


def event_from_dict(data: dict, board_size: int = BOARD_SIZE) -> Event:
    """Rebuild an event serialized by :func:`event_to_dict`.

    Raises ``ValueError`` for unknown tags, malformed payloads and tick
    food candidates off a board of half-extent *board_size*.
    """
    kind = data.get("type") if isinstance(data, dict) else None
    try:
        if kind == "tick":
            x, y = data["food"]
            food = Position(int(x), int(y))
            if is_out_of_bounds(food, board_size):
                raise ValueError(f"Tick food {tuple(food)} is off the board.")
            return Tick(food)
        if kind == "direction":
            dx, dy = data["delta"]
            return ChangeDirection(Delta(int(dx), int(dy)))
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed {kind} event: {data!r}") from exc
    if kind == "restart":
        return Restart()
    if kind == "ignore":
        return Ignore()
    raise ValueError(f"Unknown event type: {kind!r}")
