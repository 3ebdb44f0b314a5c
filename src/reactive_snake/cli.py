"""Command line tools for headless simulation and replay."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from reactive_snake.board import BOARD_SIZE
from reactive_snake.config import GameConfig
from reactive_snake.engine import fold, step
from reactive_snake.events import (
    Event,
    Tick,
    event_from_dict,
    event_to_dict,
    from_key,
)
from reactive_snake.food import PositionSampler
from reactive_snake.render import render_text
from reactive_snake.state import GameState, initial_state

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reactive-snake",
        description="Reactive Snake simulation and replay tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser("simulate", help="Run a headless game.")
    sim_p.add_argument("--config", type=str, default=None)
    sim_p.add_argument("--ticks", type=int, default=200)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--keys", type=str, default="",
        help="Comma-separated KEY@TICK presses, e.g. 'left@12,down@40'.",
    )
    sim_p.add_argument(
        "--record", type=str, default=None,
        help="Write the event log as JSON lines to this path.",
    )
    sim_p.add_argument("--render", action="store_true")

    # --- replay ---
    replay_p = sub.add_parser("replay", help="Fold a recorded event log.")
    replay_p.add_argument("log", help="Path to a JSON lines event log.")
    replay_p.add_argument("--config", type=str, default=None)
    replay_p.add_argument("--render", action="store_true")

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write the default config as JSON.",
    )
    init_p.add_argument("output", help="Destination path.")

    return parser


def parse_keys(spec: str) -> dict[int, list[Event]]:
    """Parse ``KEY@TICK`` presses into events keyed by tick index."""
    presses: dict[int, list[Event]] = {}
    for item in filter(None, (part.strip() for part in spec.split(","))):
        key, sep, tick = item.partition("@")
        if not sep or not tick.isdigit():
            raise ValueError(f"Bad key press {item!r}; expected KEY@TICK.")
        presses.setdefault(int(tick), []).append(from_key(key))
    return presses


def scripted_events(
    ticks: int,
    presses: dict[int, list[Event]],
    sampler: PositionSampler,
) -> Iterator[Event]:
    """Interleave key presses with *ticks* timer events."""
    for i in range(ticks):
        yield from presses.get(i, [])
        yield Tick(sampler())


def read_log(
    path: str | Path, board_size: int = BOARD_SIZE,
) -> Iterator[Event]:
    """Yield events from a JSON lines log."""
    with Path(path).open() as fh:
        for line_no, line in enumerate(fh, start=1):
            if not line.strip():
                continue
            try:
                yield event_from_dict(json.loads(line), board_size)
            except (json.JSONDecodeError, ValueError) as exc:
                raise ValueError(f"{path}:{line_no}: {exc}") from exc


def _load_config(path: str | None) -> GameConfig:
    return GameConfig.load(path) if path else GameConfig()


def _summary(state: GameState) -> str:
    return (
        f"Game: tick={state.tick_count} score={state.score} "
        f"length={len(state.snake)} head={tuple(state.snake.head)} "
        f"over={state.is_over}"
    )


def _run_simulate(args: argparse.Namespace) -> int:
    try:
        config = _load_config(args.config)
        presses = parse_keys(args.keys)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2
    seed = args.seed if args.seed is not None else config.seed
    sampler = PositionSampler(config.board_size, seed=seed)

    recorded: list[Event] = []
    state = initial_state()
    for event in scripted_events(args.ticks, presses, sampler):
        recorded.append(event)
        state = step(event, state, config)
        if state.is_over:
            break

    if args.record:
        out = Path(args.record)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(
            "".join(json.dumps(event_to_dict(e)) + "\n" for e in recorded),
        )
        logger.info("Recorded %d events to %s", len(recorded), out)

    if args.render:
        print(render_text(state, config.board_size))  # noqa: T201
    print(_summary(state))  # noqa: T201
    return 0


def _run_replay(args: argparse.Namespace) -> int:
    try:
        config = _load_config(args.config)
        state = fold(read_log(args.log, config.board_size), config=config)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2
    if args.render:
        print(render_text(state, config.board_size))  # noqa: T201
    print(_summary(state))  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``reactive-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "replay": _run_replay,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
