"""Deterministic transition function and folds over event streams."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from reactive_snake.board import is_out_of_bounds
from reactive_snake.config import DEFAULT_CONFIG, GameConfig
from reactive_snake.events import ChangeDirection, Event, Ignore, Restart, Tick
from reactive_snake.state import GameState, initial_state

logger = logging.getLogger(__name__)


def step(
    event: Event,
    state: GameState,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Apply one event to *state* and return the successor state.

    ``Restart`` always yields the initial state. Once the game is over every
    other event leaves the state untouched.
    """
    if isinstance(event, Restart):
        return initial_state()
    if state.is_over:
        return state
    if isinstance(event, ChangeDirection):
        return _turn(event, state)
    if isinstance(event, Tick):
        return _tick(event, state, config)
    if isinstance(event, Ignore):
        return state
    raise TypeError(f"Not an event: {event!r}")


def _turn(event: ChangeDirection, state: GameState) -> GameState:
    # Only an axis change is adopted; reversals and re-presses are dropped.
    if abs(event.delta.dx) == abs(state.direction.dx):
        return state
    return replace(state, direction=event.delta)


def _tick(event: Tick, state: GameState, config: GameConfig) -> GameState:
    snake = state.snake
    next_head = snake.head.moved(state.direction)
    on_move = state.tick_count % config.velocity == 0

    ate = False
    if on_move:
        if is_out_of_bounds(next_head, config.board_size) or next_head in snake:
            logger.info(
                "Game over at tick %d with score %d.",
                state.tick_count, state.score,
            )
            return replace(state, is_over=True)
        ate = state.food is not None and state.food == next_head
        snake = snake.advance(next_head, grow=ate)

    if state.food is not None:
        food = None if ate else state.food
    elif event.food in snake:
        food = None
    else:
        food = event.food

    if ate:
        logger.debug("Food eaten at %s; length now %d.", next_head, len(snake))

    return replace(
        state,
        snake=snake,
        food=food,
        tick_count=state.tick_count + 1,
    )


def replay(
    events: Iterable[Event],
    state: GameState | None = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> Iterator[GameState]:
    """Yield the state after each event, starting from *state*."""
    current = initial_state() if state is None else state
    for event in events:
        current = step(event, current, config)
        yield current


def fold(
    events: Iterable[Event],
    state: GameState | None = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Apply *events* in order and return the final state."""
    current = initial_state() if state is None else state
    for current in replay(events, current, config):
        pass
    return current
