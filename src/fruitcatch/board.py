"""Playfield geometry for the fruit catcher."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .entities import Position


# Border rows and columns of the playfield, in 1-based terminal coordinates.
START_ROW = 1
END_ROW = 16
START_COLUMN = 1
MIDDLE_COLUMN = 17
END_COLUMN = 37

SPAWN_ROW = START_ROW + 1
CATCH_ROW = END_ROW - 1

LANE_COUNT = 7
LANE_WIDTH = 5

FRUIT_GLYPH = "O"
BASKET_GLYPH = "\\___/"
BASKET_WIDTH = len(BASKET_GLYPH)

# Smallest terminal that fits the board plus the score label.
MIN_ROWS = 20
MIN_COLUMNS = 38


class Playfield:
    """Bordered rectangle the fruit falls through."""

    left: int = START_COLUMN
    right: int = END_COLUMN

    @classmethod
    def lane_columns(cls) -> NDArray[np.int_]:
        """Return the screen column of every lane, left to right."""

        return np.arange(1, LANE_COUNT + 1) * LANE_WIDTH - 1

    @classmethod
    def clamp_basket(cls, column: int) -> int:
        """Clamp ``column`` so the basket glyph stays inside the side borders."""

        return max(cls.left + 1, min(cls.right - BASKET_WIDTH, column))

    @staticmethod
    def fits(size: Position) -> bool:
        """Return ``True`` if a terminal of ``size`` can show the game."""

        return size.row >= MIN_ROWS and size.col >= MIN_COLUMNS
