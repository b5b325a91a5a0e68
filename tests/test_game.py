"""
Tests for game.py - per-tick movement, collisions and food effects.
"""

import pytest

from snakegame.config import GRID_W, GRID_H
from snakegame.food import Food, FoodKind
from snakegame.game import (
    Direction,
    GameState,
    change_direction,
    is_opposite,
    new_game_state,
    step_game,
)

FAR_FOOD = Food((20, 20), FoodKind.NORMAL)


def make_state(snake, direction=Direction.RIGHT, food=FAR_FOOD, score=0):
    return GameState(snake=list(snake), direction=direction, food=food, score=score, start_ms=0)


class SpawnStub:
    """Hands out a fixed food and counts calls."""

    def __init__(self, food=Food((0, 0), FoodKind.NORMAL)):
        self.food = food
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.food


class TestDirection:
    def test_opposites(self):
        """Each direction's opposite negates its vector."""
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT

    def test_is_opposite_only_for_reversals(self):
        """Perpendicular and identical headings are not opposite."""
        assert is_opposite(Direction.LEFT, Direction.RIGHT)
        assert not is_opposite(Direction.UP, Direction.RIGHT)
        assert not is_opposite(Direction.RIGHT, Direction.RIGHT)


class TestNewGameState:
    def test_defaults(self):
        """A new game has one segment at the start cell heading right."""
        state = new_game_state(1234, FAR_FOOD)
        assert state.snake == [(5, 5)]
        assert state.direction is Direction.RIGHT
        assert state.score == 0
        assert state.start_ms == 1234
        assert state.running is True
        assert state.death_reason is None

    def test_grid_is_24_by_24(self):
        """Window and tile sizes leave a 24x24 playfield."""
        assert (GRID_W, GRID_H) == (24, 24)


class TestMovement:
    @pytest.mark.parametrize("direction, expected_head", [
        (Direction.UP, (5, 4)),
        (Direction.DOWN, (5, 6)),
        (Direction.LEFT, (4, 5)),
        (Direction.RIGHT, (6, 5)),
    ])
    def test_single_cell_moves_one_step(self, direction, expected_head):
        """The head moves one cell along the heading."""
        state = make_state([(5, 5)], direction)
        assert step_game(state, SpawnStub()) is True
        assert state.snake == [expected_head]

    def test_body_follows_head(self):
        """Length is unchanged and every segment shifts into its predecessor's cell."""
        state = make_state([(5, 5), (4, 5), (3, 5)], Direction.DOWN)
        step_game(state, SpawnStub())
        assert state.snake == [(5, 6), (5, 5), (4, 5)]

    def test_no_food_no_spawn_no_score(self):
        """A plain move leaves score and food alone."""
        spawn = SpawnStub()
        state = make_state([(5, 5)])
        step_game(state, spawn)
        assert state.score == 0
        assert state.food == FAR_FOOD
        assert spawn.calls == 0

    def test_not_running_is_noop(self):
        """Stepping a finished game changes nothing."""
        state = make_state([(5, 5)])
        state.running = False
        assert step_game(state, SpawnStub()) is False
        assert state.snake == [(5, 5)]


class TestFood:
    def test_gold_example(self):
        """Gold food at the next cell: +3 score, one extra segment, new food."""
        spawn = SpawnStub(Food((10, 10), FoodKind.BAD))
        state = make_state([(5, 5)], Direction.RIGHT, Food((6, 5), FoodKind.GOLD))
        assert step_game(state, spawn) is True
        assert state.snake == [(6, 5), (5, 5)]
        assert state.score == 3
        assert state.direction is Direction.RIGHT
        assert state.food == Food((10, 10), FoodKind.BAD)
        assert spawn.calls == 1

    def test_normal_food_grows_and_scores_one(self):
        """Normal food: +1 score, one extra segment."""
        state = make_state([(5, 5), (4, 5)], Direction.RIGHT, Food((6, 5), FoodKind.NORMAL), score=4)
        step_game(state, SpawnStub())
        assert state.snake == [(6, 5), (5, 5), (4, 5)]
        assert state.score == 5

    def test_bad_food_shrinks_by_one(self):
        """Bad food: -5 score and one segment shorter than before the tick."""
        state = make_state([(5, 5), (4, 5), (3, 5)], Direction.RIGHT, Food((6, 5), FoodKind.BAD), score=12)
        step_game(state, SpawnStub())
        assert state.snake == [(6, 5), (5, 5)]
        assert state.score == 7

    def test_bad_food_score_clamps_at_zero(self):
        """Score never goes negative."""
        state = make_state([(5, 5), (4, 5)], Direction.RIGHT, Food((6, 5), FoodKind.BAD), score=2)
        step_game(state, SpawnStub())
        assert state.score == 0

    def test_bad_food_keeps_at_least_one_segment(self):
        """A one-segment snake stays one segment long."""
        state = make_state([(5, 5)], Direction.RIGHT, Food((6, 5), FoodKind.BAD))
        step_game(state, SpawnStub())
        assert state.snake == [(6, 5)]

    def test_bad_food_from_two_segments(self):
        """Two segments shrink to one."""
        state = make_state([(5, 5), (4, 5)], Direction.RIGHT, Food((6, 5), FoodKind.BAD))
        step_game(state, SpawnStub())
        assert state.snake == [(6, 5)]

    def test_food_under_body_is_not_eaten(self):
        """Food sitting under the body is only eaten by the head."""
        food = Food((4, 5), FoodKind.GOLD)
        state = make_state([(5, 5), (4, 5), (3, 5)], Direction.UP, food)
        step_game(state, SpawnStub())
        assert state.snake == [(5, 4), (5, 5), (4, 5)]
        assert state.food == food
        assert state.score == 0


class TestCollisions:
    @pytest.mark.parametrize("head, direction", [
        ((0, 5), Direction.LEFT),
        ((23, 5), Direction.RIGHT),
        ((5, 0), Direction.UP),
        ((5, 23), Direction.DOWN),
    ])
    def test_wall(self, head, direction):
        """Leaving the grid on any side ends the game without moving."""
        state = make_state([head], direction)
        assert step_game(state, SpawnStub()) is False
        assert state.death_reason == "wall"
        assert state.snake == [head]

    def test_self(self):
        """Running into the body ends the game."""
        snake = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]
        state = make_state(snake, Direction.DOWN)
        assert step_game(state, SpawnStub()) is False
        assert state.death_reason == "self"
        assert state.snake == snake

    def test_tail_counts_as_body(self):
        """The tail cell is checked before it moves away."""
        state = make_state([(5, 5), (6, 5), (6, 6), (5, 6)], Direction.DOWN)
        assert step_game(state, SpawnStub()) is False
        assert state.death_reason == "self"

    def test_wall_takes_priority_over_food(self):
        """Food never matters on a fatal tick."""
        state = make_state([(0, 0)], Direction.UP, Food((0, 0), FoodKind.GOLD))
        assert step_game(state, SpawnStub()) is False
        assert state.score == 0


class TestChangeDirection:
    def test_reversal_rejected(self):
        """Reversing is silently dropped."""
        state = make_state([(5, 5)], Direction.RIGHT)
        assert change_direction(state, Direction.LEFT) is False
        assert state.direction is Direction.RIGHT

    @pytest.mark.parametrize("requested", [Direction.UP, Direction.DOWN, Direction.RIGHT])
    def test_perpendicular_or_same_applied(self, requested):
        """Anything but a reversal becomes the heading."""
        state = make_state([(5, 5)], Direction.RIGHT)
        assert change_direction(state, requested) is True
        assert state.direction is requested

    def test_applied_immediately(self):
        """A second key in the same tick is checked against the updated heading."""
        state = make_state([(5, 5)], Direction.RIGHT)
        change_direction(state, Direction.UP)
        assert change_direction(state, Direction.LEFT) is True
        assert state.direction is Direction.LEFT
