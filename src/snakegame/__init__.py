# src/snakegame/__init__.py
"""Grid snake game: state and tick logic, timers, and pygame presentation."""

from .food import Food, FoodGenerator, FoodKind
from .game import Direction, GameState, change_direction, new_game_state, step_game
from .session import GameSession

__all__ = [
    "Food", "FoodGenerator", "FoodKind",
    "Direction", "GameState", "change_direction", "new_game_state", "step_game",
    "GameSession",
]
