# game.py
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
import logging

from .config import GRID_W, GRID_H, CFG
from .food import Food, FoodKind

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class Direction(Enum):
    UP    = (0, -1)
    DOWN  = (0, 1)
    LEFT  = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


def in_bounds(cell: Cell, grid_w: int = GRID_W, grid_h: int = GRID_H) -> bool:
    x, y = cell
    return 0 <= x < grid_w and 0 <= y < grid_h

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction
    food: Food
    score: int
    start_ms: int                  # origin of the elapsed-time display
    running: bool = True
    death_reason: Optional[str] = None   # "wall" or "self" once dead

    @property
    def head(self) -> Cell:
        return self.snake[0]


def new_game_state(now_ms: int, food: Food, start_cell: Cell = CFG.start_cell) -> GameState:
    return GameState(
        snake=[start_cell],
        direction=Direction.RIGHT,
        food=food,
        score=0,
        start_ms=now_ms,
    )

# ---------- Input / Update ----------
def change_direction(state: GameState, requested: Direction) -> bool:
    """Apply a heading right away unless it reverses the current one. Return True if applied."""
    if is_opposite(requested, state.direction):
        logger.debug("Ignored reversal %s while heading %s", requested.name, state.direction.name)
        return False
    state.direction = requested
    return True


def step_game(
    state: GameState,
    spawn: Callable[[], Food],
    grid_w: int = GRID_W,
    grid_h: int = GRID_H,
) -> bool:
    """
    Advance the game by one tick.
    Collision checks run against the body as it was before the move, tail included.
    Returns True if alive, False if game over (state is left untouched on death).
    """
    if not state.running:
        return False

    hx, hy = state.head
    dx, dy = state.direction.value
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(new_head, grid_w, grid_h):
        state.death_reason = "wall"
        return False

    # Self collision
    if new_head in state.snake:
        state.death_reason = "self"
        return False

    state.snake.insert(0, new_head)

    if new_head == state.food.cell:
        kind = state.food.kind
        state.score = max(0, state.score + kind.score_delta)
        if kind is FoodKind.BAD:
            # the insert above already grew by one, so this nets -1
            if len(state.snake) > 1:
                state.snake.pop()
                if len(state.snake) > 1:
                    state.snake.pop()
        state.food = spawn()
    else:
        state.snake.pop()

    assert state.snake, "snake must keep at least one segment"
    assert state.score >= 0
    return True
