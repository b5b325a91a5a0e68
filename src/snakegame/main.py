# main.py
import argparse
import logging
from dataclasses import replace
from typing import Optional, Sequence

import pygame # type: ignore

from .config import WIDTH, HEIGHT, FONT_NAME, FONT_SIZE, CFG, Config
from .game import Direction
from .notifier import PygameNotifier
from .render import draw_game
from .scheduler import PygameScheduler
from .session import GameSession

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Grid snake with normal, gold and bad food.")
    p.add_argument("--seed", type=int, default=CFG.seed,
                   help="seed for food placement (default: random)")
    p.add_argument("--tick-ms", type=_positive_int, default=CFG.tick_ms,
                   help="milliseconds between snake moves")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="logging verbosity")
    return p.parse_args(argv)


def handle_event(session: GameSession, scheduler: PygameScheduler, event: pygame.event.Event) -> bool:
    """Route one event. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        direction = KEY_DIRECTIONS.get(event.key)
        if direction is not None:
            session.on_direction_key(direction)
        return True
    scheduler.dispatch(event)
    return True


def process_events(session: GameSession, scheduler: PygameScheduler, events: Sequence[pygame.event.Event]) -> bool:
    """Route a batch of events. Return False to quit."""
    game = session.games_played
    for event in events:
        # ticks queued before a restart belong to the finished game
        if session.games_played != game and scheduler.owns(event):
            continue
        if not handle_event(session, scheduler, event):
            return False
    return True


def run(cfg: Config) -> None:
    pygame.init()
    font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    scheduler = PygameScheduler()
    session = GameSession(scheduler, PygameNotifier(screen, font), pygame.time.get_ticks, cfg)
    session.start()
    running = True

    while running:
        # 1) input + timers
        running = process_events(session, scheduler, pygame.event.get())

        # 2) render
        if running and session.consume_redraw():
            draw_game(screen, font, session.state, session.elapsed_ms())
            pygame.display.flip()
        clock.tick(60)  # timers drive movement; this only bounds the poll rate

    session.stop()
    pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = replace(CFG, seed=args.seed, tick_ms=args.tick_ms)
    logger.info("Starting with %s", cfg)
    run(cfg)

if __name__ == "__main__":
    main()
