# session.py
from typing import Callable, Optional
import logging
import random

from .config import CFG, Config, GRID_W, GRID_H
from .food import FoodGenerator
from .game import Direction, GameState, change_direction, new_game_state, step_game
from .notifier import Notifier
from .render import format_elapsed
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class GameSession:
    """
    One window's worth of game: the state, the two timers driving it and
    the restart-on-death policy.

    The fast timer advances the snake and asks for a redraw; the slow one
    only asks for a redraw so the elapsed time keeps ticking on screen.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        notifier: Notifier,
        clock: Callable[[], int],
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.notifier = notifier
        self.clock = clock
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.foods = FoodGenerator(self.rng, GRID_W, GRID_H)
        self.tick_timer = scheduler.timer(cfg.tick_ms, self.on_tick)
        self.clock_timer = scheduler.timer(cfg.clock_ms, self.on_clock)
        self.state: Optional[GameState] = None
        self.needs_redraw = False
        self.games_played = 0

    # ---------- lifecycle ----------
    def start(self) -> GameState:
        """Fresh state first, timers last, so no callback sees a half-built game."""
        self.state = new_game_state(self.clock(), self.foods.spawn(), self.cfg.start_cell)
        self.games_played += 1
        self.needs_redraw = True
        self.tick_timer.start()
        self.clock_timer.start()
        logger.info("Game %d started", self.games_played)
        return self.state

    def stop(self) -> None:
        self.tick_timer.stop()
        self.clock_timer.stop()

    def game_over(self) -> None:
        state = self.state
        state.running = False
        self.stop()
        logger.info(
            "Game over (%s): score=%d length=%d time=%s",
            state.death_reason, state.score, len(state.snake), format_elapsed(self.elapsed_ms()),
        )
        self.notifier.announce(f"Game Over! Score: {state.score}")
        self.start()

    # ---------- callbacks ----------
    def on_tick(self) -> None:
        if self.state is None:
            return
        if not step_game(self.state, self.foods.spawn, GRID_W, GRID_H):
            self.game_over()
        self.needs_redraw = True

    def on_clock(self) -> None:
        self.needs_redraw = True

    def on_direction_key(self, requested: Direction) -> bool:
        if self.state is None or not self.state.running:
            return False
        return change_direction(self.state, requested)

    # ---------- queries ----------
    def elapsed_ms(self) -> int:
        if self.state is None:
            return 0
        return max(0, self.clock() - self.state.start_ms)

    def consume_redraw(self) -> bool:
        """Return whether a redraw was requested and clear the request."""
        pending = self.needs_redraw
        self.needs_redraw = False
        return pending
