# food.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import logging
import random

from .config import GRID_W, GRID_H, RED, YELLOW, PURPLE

logger = logging.getLogger(__name__)

# Cumulative thresholds for a single uniform draw in [0, 1)
BAD_CHANCE = 0.1
GOLD_CHANCE = 0.2


class FoodKind(Enum):
    """(score_delta, length_delta, color) for each kind of food."""
    NORMAL = (1, 1, RED)
    GOLD   = (3, 1, YELLOW)
    BAD    = (-5, -2, PURPLE)

    def __init__(self, score_delta: int, length_delta: int, color: Tuple[int, int, int]):
        self.score_delta = score_delta
        self.length_delta = length_delta
        self.color = color


@dataclass(frozen=True)
class Food:
    cell: Tuple[int, int]
    kind: FoodKind = FoodKind.NORMAL


def pick_kind(chance: float) -> FoodKind:
    if chance < BAD_CHANCE:
        return FoodKind.BAD
    if chance < GOLD_CHANCE:
        return FoodKind.GOLD
    return FoodKind.NORMAL


class FoodGenerator:
    """
    Places food anywhere on the grid.

    The snake body is deliberately not excluded: food may land under the
    snake and stay there until the body moves off it.
    """

    def __init__(self, rng: random.Random, grid_w: int = GRID_W, grid_h: int = GRID_H):
        self.rng = rng
        self.grid_w = grid_w
        self.grid_h = grid_h

    def spawn(self) -> Food:
        x = self.rng.randrange(self.grid_w)
        y = self.rng.randrange(self.grid_h)
        food = Food((x, y), pick_kind(self.rng.random()))
        logger.debug("Spawned %s food at %s", food.kind.name, food.cell)
        return food
