"""Single-consumer event loop folding timer and keyboard input into state."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Union

from reactive_snake.board import Position
from reactive_snake.config import DEFAULT_CONFIG, GameConfig
from reactive_snake.engine import step
from reactive_snake.events import Event, Tick
from reactive_snake.food import PositionSampler
from reactive_snake.state import GameState, initial_state

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], Union[None, Awaitable[None]]]


class GameLoop:
    """Owns the current game state and the queue feeding it.

    Producers call :meth:`submit` from anywhere on the event loop; only the
    consumer in :meth:`run` (or an explicit :meth:`process_pending`) applies
    events, one at a time and strictly in arrival order.
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        sampler: Callable[[], Position] | None = None,
        state: GameState | None = None,
    ) -> None:
        self.config = config
        self.sampler = (
            sampler if sampler is not None
            else PositionSampler(config.board_size, seed=config.seed)
        )
        self.state = initial_state() if state is None else state
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        self._listeners: list[Listener] = []
        self._timer: asyncio.Task | None = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def add_listener(self, listener: Listener) -> None:
        """Register a callback invoked with every folded state."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def submit(self, event: Event) -> None:
        """Queue an event for the consumer."""
        self._queue.put_nowait(event)

    async def process_pending(self) -> int:
        """Fold every queued event now. Returns the number applied."""
        count = 0
        while True:
            try:
                event = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return count
            if event is _STOP:
                continue
            await self._apply(event)
            count += 1

    async def run(self) -> None:
        """Drive the timer and consume events until :meth:`stop`."""
        self._running = True
        self._timer = asyncio.create_task(self._tick_loop())
        logger.info(
            "Game loop started (tick=%dms, velocity=%d).",
            self.config.tick_rate_ms, self.config.velocity,
        )
        try:
            while self._running:
                event = await self._queue.get()
                if event is _STOP:
                    break
                await self._apply(event)
        except asyncio.CancelledError:
            logger.info("Game loop cancelled at tick %d.", self.state.tick_count)
            raise
        finally:
            self._running = False
            await self._stop_timer()

    def stop(self) -> None:
        """Ask the consumer to exit after the event it is handling.

        Also honoured by a :meth:`run` task that has not started yet.
        """
        self._running = False
        # Wakes a blocked consumer; a not-yet-started one exits on reading it.
        self._queue.put_nowait(_STOP)

    async def _tick_loop(self) -> None:
        interval = self.config.tick_rate_ms / 1000.0
        while self._running:
            await asyncio.sleep(interval)
            self.submit(Tick(self.sampler()))

    async def _stop_timer(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None or timer.done():
            return
        timer.cancel()
        try:
            await timer
        except asyncio.CancelledError:
            pass

    async def _apply(self, event: Event) -> None:
        self.state = step(event, self.state, self.config)
        await self._notify(self.state)

    async def _notify(self, state: GameState) -> None:
        for listener in list(self._listeners):
            try:
                result = listener(state)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("State listener %r failed.", listener)


class _Stop:
    """Sentinel placed on the queue by :meth:`GameLoop.stop`."""


_STOP = _Stop()
