import numpy as np

from fruitcatch.board import CATCH_ROW, MIDDLE_COLUMN, SPAWN_ROW
from fruitcatch.entities import Fruit, Position
from fruitcatch.game_state import GameState, Status


class FixedLanes:
    """Stand-in generator that hands out lanes from a list."""

    def __init__(self, *lanes: int) -> None:
        self.lanes = list(lanes)

    def choice(self, columns):
        lane = self.lanes.pop(0)
        assert 1 <= lane <= len(columns)
        return columns[lane - 1]


def _ticks_to_catch_row(state: GameState) -> int:
    return CATCH_ROW - state.fruit.position.row


def test_new_game_defaults():
    state = GameState(rng=np.random.default_rng(0))
    assert state.status is Status.RUNNING
    assert state.score.value == 0
    assert state.tick_ms == 100
    assert state.fruit.position.row == SPAWN_ROW
    assert state.basket.position.col == MIDDLE_COLUMN


def test_miss_ends_game_without_scoring():
    # Lane 1 -> column 4; the centred basket at 17 cannot catch it.
    state = GameState(rng=FixedLanes(1))
    rows = [state.fruit.position.row]
    for _ in range(_ticks_to_catch_row(state)):
        state.tick()
        rows.append(state.fruit.position.row)
    assert rows == list(range(SPAWN_ROW, CATCH_ROW + 1))
    assert state.running

    state.tick()
    assert state.status is Status.OVER
    assert state.score.value == 0
    assert state.tick_ms == 100


def test_aligned_basket_catches_fruit():
    # Lane 6 -> column 29; two presses of ``d`` move the basket 17 -> 27.
    state = GameState(rng=FixedLanes(6, 2))
    state.tick("d")
    state.tick("d")
    assert state.basket.position.col == 27
    while state.fruit.position.row < CATCH_ROW:
        state.tick()

    state.tick()
    assert state.status is Status.RUNNING
    assert state.score.value == 1
    assert state.tick_ms == 97
    assert state.fruit.position == Position(SPAWN_ROW + 1, 9)


def test_caught_fruit_respawns_and_falls_in_same_tick():
    state = GameState(rng=FixedLanes(4, 3))
    state.fruit.position = Position(CATCH_ROW, state.basket.position.col + 2)
    state.tick()
    assert state.score.value == 1
    assert state.fruit.position == Position(SPAWN_ROW + 1, 14)
    state.tick()
    assert state.fruit.position.row == SPAWN_ROW + 2


def test_non_movement_keys_are_ignored():
    state = GameState(rng=FixedLanes(4))
    state.tick("x")
    assert state.basket.position.col == MIDDLE_COLUMN
    assert state.fruit.position.row == SPAWN_ROW + 1


def test_score_only_changes_on_catch():
    state = GameState(rng=np.random.default_rng(3))
    state.fruit = Fruit(Position(CATCH_ROW, 19))
    state.tick()
    assert state.score.value == 1
    for _ in range(5):
        state.tick()
        assert state.score.value == 1


def test_consecutive_catches_respect_speed_floor():
    state = GameState(rng=np.random.default_rng(4))
    previous = state.tick_ms
    for expected in range(1, 40):
        state.fruit.position = Position(CATCH_ROW, state.basket.position.col + 2)
        state.tick()
        assert state.score.value == expected
        assert state.tick_ms <= previous
        assert state.tick_ms >= 50
        previous = state.tick_ms
    assert state.tick_ms == 50


def test_quit_is_terminal():
    state = GameState(rng=np.random.default_rng(5))
    state.quit()
    assert state.status is Status.QUIT
    row = state.fruit.position.row
    assert state.tick("d") is Status.QUIT
    assert state.fruit.position.row == row
    assert state.ticks == 0


def test_game_over_ignores_quit_and_ticks():
    state = GameState(rng=FixedLanes(1))
    state.fruit.position.row = CATCH_ROW
    state.tick()
    assert state.status is Status.OVER
    state.quit()
    state.tick()
    assert state.status is Status.OVER
