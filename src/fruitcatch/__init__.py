"""Terminal fruit catching game."""

from .board import Playfield
from .entities import Basket, Colour, Fruit, Position, Score
from .game_state import GameState, Status
from .render import Renderer, make_colour
from .run_terminal import (
    GameRunner,
    StartupError,
    TerminalSizeQueryError,
    TerminalTooSmallError,
    check_terminal_size,
)
from .terminal import Terminal, parse_size_report
from .utils import (
    advance_fruit,
    increment_score,
    is_caught,
    move_basket,
    next_tick_interval,
    reset_fruit,
)

__all__ = [
    "Playfield",
    "Basket",
    "Colour",
    "Fruit",
    "Position",
    "Score",
    "GameState",
    "Status",
    "Renderer",
    "make_colour",
    "GameRunner",
    "StartupError",
    "TerminalSizeQueryError",
    "TerminalTooSmallError",
    "check_terminal_size",
    "Terminal",
    "parse_size_report",
    "advance_fruit",
    "increment_score",
    "is_caught",
    "move_basket",
    "next_tick_interval",
    "reset_fruit",
]
