"""Plain records for the objects on screen.

The fruit, the basket and the score are all mutated in place by the game
rules in :mod:`fruitcatch.utils`; one instance of each lives for the whole
session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Colour(IntEnum):
    """ANSI 3-bit foreground colour codes.

    ``IGNORE`` is a sentinel meaning "no colour"; it is only meaningful as a
    background.
    """

    IGNORE = 0
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


@dataclass
class Position:
    """Terminal cell as ``(row, col)``, both 1-based."""

    row: int
    col: int


@dataclass
class Fruit:
    """The single falling fruit."""

    position: Position
    colour: Colour = Colour.GREEN


@dataclass
class Basket:
    """Player-controlled basket on the row above the bottom border."""

    position: Position
    colour: Colour = Colour.MAGENTA


@dataclass
class Score:
    value: int = 0
    colour: Colour = field(default=Colour.GREEN)
