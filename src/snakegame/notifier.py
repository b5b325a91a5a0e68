"""Blocking end-of-game announcements."""
from typing import List

import pygame  # type: ignore

from .render import draw_game_over

# Arrow keys steer the snake, so they never dismiss the notice
ACK_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE, pygame.K_ESCAPE)


class Notifier:
    def announce(self, message: str) -> None:
        """Show `message` and return only once the player has acknowledged it."""
        raise NotImplementedError


class NullNotifier(Notifier):
    """Acknowledges instantly. Keeps every message for inspection."""

    def __init__(self):
        self.messages: List[str] = []

    def announce(self, message: str) -> None:
        self.messages.append(message)


class PygameNotifier(Notifier):
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, fps: int = 30):
        self.screen = screen
        self.font = font
        self.fps = fps
        self.clock = pygame.time.Clock()

    def announce(self, message: str) -> None:
        self.show(message)
        self.wait()

    def show(self, message: str) -> None:
        # dim whatever frame is currently on screen
        draw_game_over(self.screen, self.font, message)
        pygame.display.flip()
        # presses made before the notice appeared are not an answer to it
        pygame.event.clear((pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN))

    def wait(self) -> None:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    # let the main loop see it after the restart
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                    return
                if self.acknowledges(event):
                    return
            self.clock.tick(self.fps)

    @staticmethod
    def acknowledges(event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN:
            return True
        return event.type == pygame.KEYDOWN and event.key in ACK_KEYS
