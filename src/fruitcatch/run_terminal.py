"""Terminal front-end for the fruit catcher.

This module glues the game state, the ANSI renderer and the raw terminal
together into a fixed-tick loop.  Input is polled without blocking on every
pass through the loop while the simulation only advances once the current
tick interval has elapsed.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .board import MIN_COLUMNS, MIN_ROWS, Playfield
from .entities import Position
from .game_state import GameState
from .render import Renderer
from .terminal import Terminal
from .utils import MOVE_KEYS, QUIT_KEY


LOGGER = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Seconds to sleep between input polls.  Zero busy-waits.
POLL_INTERVAL = 0.001


class StartupError(Exception):
    """Raised when the game cannot start on this terminal."""


class TerminalSizeQueryError(StartupError):
    """Raised when the terminal does not answer the size query."""


class TerminalTooSmallError(StartupError, ValueError):
    """Raised when the terminal cannot fit the playfield."""

    def __init__(self, size: Position) -> None:
        self.size = size
        super().__init__(
            f"Terminal window must be at least {MIN_ROWS} by {MIN_COLUMNS} "
            f"to run this game (got {size.row} by {size.col})"
        )


def check_terminal_size(size: Position) -> None:
    """Raise :class:`TerminalTooSmallError` if ``size`` is below the minimum."""

    if not Playfield.fits(size):
        raise TerminalTooSmallError(size)


class GameRunner:
    """Run one game session from terminal setup to the final frame."""

    def __init__(
        self,
        *,
        terminal: Optional[Terminal] = None,
        renderer: Optional[Renderer] = None,
        state: Optional[GameState] = None,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
        poll_interval: float = POLL_INTERVAL,
    ) -> None:
        self.renderer = renderer or Renderer()
        self.terminal = terminal or Terminal(out=self.renderer.out)
        self.state = state or GameState()
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep
        self.poll_interval = poll_interval

    def run(self) -> int:
        """Play until the player quits or misses; return the exit status."""

        try:
            with self.terminal:
                try:
                    self._setup()
                    self._loop()
                    self.renderer.draw_final_frame(self.state)
                finally:
                    self.renderer.show_cursor()
        except StartupError as exc:
            LOGGER.warning("%s", exc)
            self.renderer.out.write(f"\n{exc}\n")
            self.renderer.out.flush()
            return EXIT_FAILURE
        self.renderer.out.write("\n")
        self.renderer.out.flush()
        return EXIT_SUCCESS

    def _setup(self) -> None:
        try:
            size = self.terminal.query_size()
        except (OSError, ValueError) as exc:
            LOGGER.error("Terminal size query failed [%s]", exc)
            raise TerminalSizeQueryError(
                f"Could not read the terminal size: {exc}"
            ) from exc
        LOGGER.debug("Terminal size %d x %d", size.row, size.col)
        check_terminal_size(size)
        self.terminal.set_non_blocking(True)
        self.renderer.clear()
        self.renderer.hide_cursor()
        self.renderer.draw_border()
        self.renderer.draw_score(self.state.score)

    def _loop(self) -> None:
        state = self.state
        pending: Optional[str] = None
        last_tick = self._clock()
        while state.running:
            now = self._clock()
            elapsed_ms = (now - last_tick) * 1000.0
            if elapsed_ms >= state.tick_ms:
                LOGGER.debug(
                    "Ticks [%d] elapsed [%.1f] currentChar [%r]",
                    state.ticks + 1,
                    elapsed_ms,
                    pending,
                )
                state.tick(pending)
                if not state.running:
                    break
                self.renderer.draw_frame(state)
                last_tick = now
                pending = None

            # A pending move is kept until the next tick consumes it.
            if pending not in MOVE_KEYS:
                pending = self.terminal.read_char()
                if pending == QUIT_KEY:
                    state.quit()
                    break
            if self.poll_interval > 0:
                self._sleep(self.poll_interval)
