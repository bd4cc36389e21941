"""Game rules for the fruit catcher.

Every function here is pure or mutates only the record it is given, so the
loop controller and the tests can drive the rules without a terminal.
"""

from __future__ import annotations

import numpy as np

from .board import (
    END_ROW,
    LANE_WIDTH,
    MIDDLE_COLUMN,
    SPAWN_ROW,
    Playfield,
)
from .entities import Basket, Fruit, Position, Score


LEFT_KEY = "a"
RIGHT_KEY = "d"
QUIT_KEY = "q"
MOVE_KEYS = (LEFT_KEY, RIGHT_KEY)

INITIAL_TICK_MS = 100
TICK_STEP_MS = 3
MIN_TICK_MS = 50


def lane_column(rng: np.random.Generator) -> int:
    """Return the column of a uniformly chosen lane."""

    return int(rng.choice(Playfield.lane_columns()))


def spawn_fruit(rng: np.random.Generator) -> Fruit:
    """Create a fruit on the spawn row in a random lane."""

    return Fruit(Position(SPAWN_ROW, lane_column(rng)))


def spawn_basket() -> Basket:
    """Create the basket centred on the row above the bottom border."""

    return Basket(Position(END_ROW - 1, MIDDLE_COLUMN))


def advance_fruit(fruit: Fruit) -> None:
    """Move ``fruit`` one row down.

    No clamping is applied; the caller decides when the fruit has reached
    the catch row.
    """

    fruit.position.row += 1


def move_basket(basket: Basket, key: str | None) -> None:
    """Shift ``basket`` one lane for ``key`` and clamp it inside the border.

    Any key other than ``a`` or ``d`` (including ``None``) leaves the column
    unchanged apart from clamping.
    """

    change = 0
    if key == LEFT_KEY:
        change -= LANE_WIDTH
    if key == RIGHT_KEY:
        change += LANE_WIDTH
    basket.position.col = Playfield.clamp_basket(basket.position.col + change)


def is_caught(fruit: Fruit, basket: Basket) -> bool:
    """Return ``True`` if ``fruit`` sits over the middle of ``basket``.

    The fruit glyph is one cell wide and the basket glyph is five cells wide
    and drawn from its left edge, so the fruit must be exactly two columns
    right of the basket column.
    """

    return fruit.position.col - 2 == basket.position.col


def reset_fruit(fruit: Fruit, rng: np.random.Generator) -> None:
    """Send ``fruit`` back to the spawn row in a freshly chosen lane."""

    fruit.position.col = lane_column(rng)
    fruit.position.row = SPAWN_ROW


def increment_score(score: Score) -> None:
    score.value += 1


def next_tick_interval(interval_ms: int) -> int:
    """Return the tick interval to use after a catch.

    The interval shrinks by ``TICK_STEP_MS`` per catch and never goes below
    ``MIN_TICK_MS``.
    """

    if interval_ms >= MIN_TICK_MS:
        return max(MIN_TICK_MS, interval_ms - TICK_STEP_MS)
    return interval_ms
