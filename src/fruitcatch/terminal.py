"""Raw terminal access for keystroke-driven games.

:class:`Terminal` switches standard input into non-canonical, non-echoing
mode so that every key press is delivered immediately, and optionally makes
reads non-blocking so the game loop can poll for input.  Use it as a context
manager; leaving the ``with`` block restores the saved settings on every exit
path, including exceptions.
"""

from __future__ import annotations

import logging
import os
import sys
import termios
from typing import Optional, TextIO

from .entities import Position


LOGGER = logging.getLogger(__name__)

CSI = "\033["

# Fields of the list returned by ``termios.tcgetattr``.
_LFLAG = 3
_CC = 6


class Terminal:
    """Scoped owner of the terminal mode for one process."""

    def __init__(self, fd: Optional[int] = None, out: Optional[TextIO] = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.out = out or sys.stdout
        self._saved: Optional[list] = None
        self._non_blocking = False

    def __enter__(self) -> "Terminal":
        self.enter_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._non_blocking:
            self.set_non_blocking(False)
        self.restore_mode()
        return None

    def enter_raw_mode(self) -> None:
        """Disable line buffering and echo, keeping the old attributes.

        Failure to apply the new attributes is logged; the game keeps
        running with whatever mode the terminal is in.
        """

        try:
            self._saved = termios.tcgetattr(self.fd)
        except termios.error as exc:
            LOGGER.error("Error reading terminal attributes [%s]", exc)
            return

        attrs = list(self._saved)
        attrs[_CC] = list(attrs[_CC])
        attrs[_LFLAG] &= ~(termios.ICANON | termios.ECHO)
        attrs[_CC][termios.VMIN] = 1
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, attrs)
        except termios.error as exc:
            LOGGER.error("Error setting terminal attributes [%s]", exc)
            return
        LOGGER.debug("Raw mode enabled")

    def restore_mode(self) -> None:
        """Reapply the attributes captured by :meth:`enter_raw_mode`.

        Calling this more than once, or without entering raw mode first,
        does nothing.
        """

        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, saved)
        except termios.error as exc:
            LOGGER.error("Error restoring terminal attributes [%s]", exc)
            return
        LOGGER.debug("Terminal mode restored")

    def set_non_blocking(self, enabled: bool = True) -> None:
        """Make :meth:`read_char` return immediately when no key is waiting."""

        try:
            os.set_blocking(self.fd, not enabled)
        except OSError as exc:
            LOGGER.error("Error changing blocking mode [%s]", exc)
            return
        self._non_blocking = enabled
        LOGGER.debug("SetNonblockingReadState [%s]", enabled)

    def read_char(self) -> Optional[str]:
        """Read one character, or return ``None`` if nothing is available."""

        try:
            data = os.read(self.fd, 1)
        except BlockingIOError:
            return None
        if not data:
            return None
        return data.decode("latin-1")

    def query_size(self) -> Position:
        """Return the terminal size as ``Position(rows, cols)``.

        The cursor is pushed to an out-of-range corner, which the terminal
        clamps to its last cell, and a cursor position report is requested.
        The reply ``ESC[<rows>;<cols>R`` is read back synchronously, so this
        must run before non-blocking reads are enabled.
        """

        self.out.write(f"{CSI}999;999H")
        self.out.write(f"{CSI}6n")
        self.out.flush()

        response = ""
        while True:
            char = self.read_char()
            if char is None:
                raise OSError("Terminal closed while reading size report")
            if char == "R":
                break
            response += char
        return parse_size_report(response)


def parse_size_report(response: str) -> Position:
    """Parse the body of a cursor position report into ``Position``.

    ``response`` is everything the terminal sent before the final ``R``,
    e.g. ``"\\x1b[24;80"``.

    Raises:
        ValueError: If the report does not contain ``rows;cols``.
    """

    start = response.rfind("[")
    body = response[start + 1 :]
    rows, sep, cols = body.partition(";")
    if not sep:
        raise ValueError(f"Malformed cursor position report: {response!r}")
    return Position(int(rows), int(cols))
