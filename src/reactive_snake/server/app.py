"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from reactive_snake.config import GameConfig
from reactive_snake.server.routes import router
from reactive_snake.server.session import GameSession
from reactive_snake.server.websocket import ws_router


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session = GameSession(config)
        app.state.session.start()
        yield
        await app.state.session.cleanup()

    app = FastAPI(
        title="Reactive Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
