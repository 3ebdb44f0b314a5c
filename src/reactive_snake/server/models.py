"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from reactive_snake.events import Event, from_arrows, from_key


class Arrows(BaseModel):
    """Sampled arrow-key vector, one component per axis."""

    x: int = Field(default=0, ge=-1, le=1)
    y: int = Field(default=0, ge=-1, le=1)


class KeyRequest(BaseModel):
    """Request body for POST /keys.

    Either a named ``key`` or an ``arrows`` vector with an optional
    ``space`` flag.
    """

    key: str | None = Field(default=None, min_length=1, max_length=16)
    arrows: Arrows | None = None
    space: bool = False

    @model_validator(mode="after")
    def _require_input(self) -> KeyRequest:
        if self.key is None and self.arrows is None and not self.space:
            raise ValueError("Provide 'key', 'arrows' or 'space'.")
        return self

    def to_event(self) -> Event:
        """Map the pressed keys to a game event."""
        if self.key is not None and not self.space:
            return from_key(self.key)
        arrows = self.arrows or Arrows()
        return from_arrows(arrows.x, arrows.y, space=self.space)


class KeyResponse(BaseModel):
    """Acknowledges a queued event."""

    event: str
    pending: int


class ConfigResponse(BaseModel):
    """Active game configuration."""

    board_size: int
    velocity: int
    tick_rate_ms: int
    seed: int | None = None


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
