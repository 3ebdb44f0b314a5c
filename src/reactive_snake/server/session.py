"""Game session: one game loop plus its websocket subscribers."""

from __future__ import annotations

import asyncio
import json
import logging

from starlette.websockets import WebSocket, WebSocketState

from reactive_snake.config import GameConfig
from reactive_snake.loop import GameLoop
from reactive_snake.state import GameState

logger = logging.getLogger(__name__)


class GameSession:
    """Runs a :class:`GameLoop` and streams its states to subscribers."""

    def __init__(self, config: GameConfig | None = None) -> None:
        self.loop = GameLoop(config) if config is not None else GameLoop()
        self.subscribers: list[WebSocket] = []
        self.loop.add_listener(self._broadcast)
        self._task: asyncio.Task | None = None

    @property
    def config(self) -> GameConfig:
        return self.loop.config

    @property
    def state(self) -> GameState:
        return self.loop.state

    def start(self) -> None:
        """Start the loop as a background task."""
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.create_task(self.loop.run())
        logger.info("Game session started.")

    async def _broadcast(self, state: GameState) -> None:
        """Send game state to all connected subscribers."""
        if not self.subscribers:
            return
        payload = json.dumps(state.to_dict(), separators=(",", ":"))
        dead: list[WebSocket] = []
        # Iterate over a snapshot so disconnect handlers can mutate the list.
        for ws in list(self.subscribers):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)
        for ws in dead:
            self.unsubscribe(ws)

    def subscribe(self, ws: WebSocket) -> None:
        self.subscribers.append(ws)

    def unsubscribe(self, ws: WebSocket) -> None:
        if ws in self.subscribers:
            self.subscribers.remove(ws)

    async def cleanup(self) -> None:
        """Stop the loop and wait for it to exit."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            self.loop.stop()
            try:
                await asyncio.wait_for(task, timeout=1.0)
            except (asyncio.TimeoutError, asyncio.CancelledError):
                task.cancel()
                await asyncio.gather(task, return_exceptions=True)
        self.subscribers.clear()
        logger.info("Game session cleanup complete.")
