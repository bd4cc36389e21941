"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging

import numpy as np

from .board import CATCH_ROW
from .entities import Basket, Fruit, Score
from .utils import (
    INITIAL_TICK_MS,
    MOVE_KEYS,
    advance_fruit,
    increment_score,
    is_caught,
    move_basket,
    next_tick_interval,
    reset_fruit,
    spawn_basket,
    spawn_fruit,
)


LOGGER = logging.getLogger(__name__)


class Status(str, Enum):
    """Lifecycle of a single game session."""

    RUNNING = "running"
    OVER = "over"
    QUIT = "quit"


@dataclass
class GameState:
    """Mutable state for a fruit catching session.

    ``rng`` is the only random source of the session; every spawn and reset
    draws from it.  Pass a seeded generator for reproducible lanes.
    """

    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    fruit: Optional[Fruit] = None
    basket: Basket = field(default_factory=spawn_basket)
    score: Score = field(default_factory=Score)
    tick_ms: int = INITIAL_TICK_MS
    ticks: int = 0
    status: Status = Status.RUNNING

    def __post_init__(self) -> None:
        if self.fruit is None:
            self.fruit = spawn_fruit(self.rng)

    @property
    def running(self) -> bool:
        return self.status is Status.RUNNING

    def tick(self, key: str | None = None) -> Status:
        """Advance the game by one tick and return the resulting status.

        ``key`` is the input pending since the previous tick.  The basket
        moves first; then, if the fruit is on the catch row, it is either
        caught (score and speed go up, the fruit respawns) or missed (the
        game is over and nothing else happens).  Unless the game ended, the
        fruit then falls one row, so a respawned fruit is already one row
        below the spawn row.  Finished games ignore further ticks.
        """

        if not self.running:
            return self.status

        self.ticks += 1
        if key in MOVE_KEYS:
            move_basket(self.basket, key)

        if self.fruit.position.row == CATCH_ROW:
            if is_caught(self.fruit, self.basket):
                reset_fruit(self.fruit, self.rng)
                increment_score(self.score)
                self.tick_ms = next_tick_interval(self.tick_ms)
                LOGGER.info(
                    "Caught fruit. Score: %d, tick: %d ms",
                    self.score.value,
                    self.tick_ms,
                )
            else:
                self.status = Status.OVER
                LOGGER.info("Missed fruit. Final score: %d", self.score.value)
                return self.status

        advance_fruit(self.fruit)
        return self.status

    def quit(self) -> None:
        """End a running game at the player's request."""

        if self.running:
            self.status = Status.QUIT
            LOGGER.info("Quit requested after %d ticks", self.ticks)
