"""ANSI escape sequence renderer.

Each draw call positions the cursor and writes straight to the output
stream, flushing after every write so the terminal reflects the escape
sequence immediately.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .board import (
    BASKET_GLYPH,
    END_COLUMN,
    END_ROW,
    FRUIT_GLYPH,
    START_COLUMN,
    START_ROW,
)
from .entities import Basket, Colour, Fruit, Score
from .game_state import GameState


CSI = "\033["
COLOUR_PREFIX = "1;"
COLOUR_SUFFIX = "m"
STOP_COLOUR = "\033[0m"

# Background SGR codes sit 10 above the matching foreground code.
BACKGROUND_OFFSET = 10

GAME_OVER_TEXT = "GAME OVER :("
GAME_OVER_POSITION = (8, 14)
FINAL_SCORE_POSITION = (9, 16)


def make_colour(
    text: str,
    foreground: Colour = Colour.WHITE,
    background: Colour = Colour.IGNORE,
) -> str:
    """Wrap ``text`` in SGR codes for ``foreground`` and ``background``.

    ``Colour.IGNORE`` as the background leaves the background untouched.
    """

    codes = f"{COLOUR_PREFIX}{int(foreground)}"
    if background is not Colour.IGNORE:
        codes += f";{int(background) + BACKGROUND_OFFSET}"
    return f"{CSI}{codes}{COLOUR_SUFFIX}{text}{STOP_COLOUR}"


class Renderer:
    """Stateless drawing operations over a text stream."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out or sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def move_to(self, row: int, col: int) -> None:
        self._write(f"{CSI}{row};{col}H")

    def clear(self) -> None:
        self._write(f"{CSI}2J")

    def hide_cursor(self) -> None:
        self._write(f"{CSI}?25l")

    def show_cursor(self) -> None:
        self._write(f"{CSI}?25h")

    def draw_border(self) -> None:
        """Draw ``-`` along the top and bottom rows and ``|`` down the sides."""

        for row in range(START_ROW, END_ROW + 1):
            if row in (START_ROW, END_ROW):
                for col in range(START_COLUMN, END_COLUMN + 1):
                    self.move_to(row, col)
                    self._write("-")
            else:
                self.move_to(row, START_COLUMN)
                self._write("|")
                self.move_to(row, END_COLUMN)
                self._write("|")

    def draw_fruit(self, fruit: Fruit) -> None:
        self.move_to(fruit.position.row, fruit.position.col)
        self._write(make_colour(FRUIT_GLYPH, fruit.colour))

    def draw_basket(self, basket: Basket) -> None:
        self.move_to(basket.position.row, basket.position.col)
        self._write(make_colour(BASKET_GLYPH, basket.colour))

    def draw_score(self, score: Score) -> None:
        """Write the score label just right of the top-right corner."""

        self.move_to(START_ROW, END_COLUMN + 2)
        self._write(make_colour(f"score: {score.value}", score.colour))

    def draw_game_over(self, score: Score) -> None:
        """Show the final banner, then park the cursor below the board."""

        self.move_to(*GAME_OVER_POSITION)
        self._write(make_colour(GAME_OVER_TEXT, Colour.RED))
        self.move_to(*FINAL_SCORE_POSITION)
        self._write(f"Score: {score.value}")
        self.move_to(END_ROW, START_COLUMN)

    def draw_frame(self, state: GameState) -> None:
        """Redraw the whole screen for a running game."""

        self.clear()
        self.hide_cursor()
        self.draw_border()
        self.draw_fruit(state.fruit)
        self.draw_basket(state.basket)
        self.draw_score(state.score)

    def draw_final_frame(self, state: GameState) -> None:
        self.clear()
        self.draw_border()
        self.draw_fruit(state.fruit)
        self.draw_basket(state.basket)
        self.draw_game_over(state.score)
        self.show_cursor()
