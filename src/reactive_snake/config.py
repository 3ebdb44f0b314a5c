"""Game configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from reactive_snake.board import BOARD_SIZE

logger = logging.getLogger(__name__)

# Ticks per board move.
VELOCITY = 5


@dataclass(frozen=True)
class GameConfig:
    """Tunable game constants.

    ``velocity`` decouples the timer frequency from game speed: the snake
    moves one cell every ``velocity`` ticks, and the timer fires every
    ``tick_rate_ms`` milliseconds.
    """

    board_size: int = BOARD_SIZE
    velocity: int = VELOCITY
    tick_rate_ms: int = 20
    seed: int | None = None

    def __post_init__(self) -> None:
        # The initial snake reaches down to y = -3.
        if self.board_size < 4:
            raise ValueError("board_size must be at least 4.")
        if self.velocity < 1:
            raise ValueError("velocity must be at least 1.")
        if self.tick_rate_ms < 1:
            raise ValueError("tick_rate_ms must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file.

        Raises ``ValueError`` for malformed JSON, unknown keys or values
        that fail validation.
        """
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config in {path} must be a JSON object.")
        unknown = set(raw) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}.")
        try:
            return cls(**raw)
        except TypeError as exc:
            raise ValueError(f"Invalid config in {path}: {exc}") from exc


DEFAULT_CONFIG = GameConfig()
