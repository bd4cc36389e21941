"""Command line entry point.

Run with: `python -m fruitcatch`

Controls: ``a`` moves the basket left, ``d`` moves it right and ``q`` quits.
Diagnostics go to standard error; redirect them (``2> /dev/null``) or pass
``--log-file`` to keep them off the playfield.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from .game_state import GameState
from .run_terminal import POLL_INTERVAL, GameRunner


LOGGER = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fruitcatch",
        description="Catch the falling fruit with your basket (a/d to move, q to quit).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the lane generator. Defaults to OS entropy.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write diagnostics to this file instead of standard error.",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=POLL_INTERVAL,
        help="Seconds to sleep between input polls (0 busy-waits).",
    )
    return parser.parse_args(argv)


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    # basicConfig rejects ``filename`` and ``stream`` passed together.
    target = {"filename": log_file} if log_file else {"stream": sys.stderr}
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        **target,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    state = GameState(rng=np.random.default_rng(args.seed))
    runner = GameRunner(state=state, poll_interval=args.poll_interval)
    LOGGER.info("Game started (seed=%s)", args.seed)
    try:
        status = runner.run()
    except KeyboardInterrupt:
        LOGGER.info("Interrupted")
        return EXIT_INTERRUPTED
    LOGGER.info("Game stopped with status %d, score %d", status, state.score.value)
    return status


if __name__ == "__main__":  # pragma: no cover - manual execution only
    sys.exit(main())
