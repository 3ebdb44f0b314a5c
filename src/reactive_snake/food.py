"""Random candidate positions for food placement."""

from __future__ import annotations

import numpy as np

from reactive_snake.board import BOARD_SIZE, Position


class PositionSampler:
    """Uniform sampler over every cell of the board.

    Uses a seeded NumPy RNG for deterministic, reproducible placement. The
    game core only ever sees the positions it yields, packed into ``Tick``
    events, so any source of positions can stand in for it.
    """

    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        if board_size < 0:
            raise ValueError("board_size must be non-negative.")
        self.board_size = board_size
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def sample(self) -> Position:
        """Return a position with both coordinates in ``[-size, size]``."""
        x, y = self.rng.integers(
            -self.board_size, self.board_size, size=2, endpoint=True,
        )
        return Position(int(x), int(y))

    def __call__(self) -> Position:
        return self.sample()
