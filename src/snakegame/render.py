# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, TILE_SIZE, SCOREBOARD_HEIGHT,
    BG, GREEN, WHITE, TEXT,
    SCORE_POS, TIME_POS,
)
from .game import GameState

# ---------- Helpers ----------
def format_elapsed(ms: int) -> str:
    """MM:SS, minutes wrap at an hour."""
    return f"{(ms // 60000) % 60:02d}:{(ms // 1000) % 60:02d}"

def cell_rect(gx: int, gy: int) -> pygame.Rect:
    # 2px gap on the right/bottom keeps segments visually apart
    return pygame.Rect(gx * TILE_SIZE, SCOREBOARD_HEIGHT + gy * TILE_SIZE, TILE_SIZE - 2, TILE_SIZE - 2)

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy))

def blit_baseline(screen: pygame.Surface, font: pygame.font.Font, text: str, pos: Tuple[int, int]) -> None:
    surf = font.render(text, True, TEXT)
    x, y = pos
    screen.blit(surf, (x, y - font.get_ascent()))

# ---------- Draw ----------
def draw_scoreboard(screen: pygame.Surface, font: pygame.font.Font, score: int, elapsed_ms: int) -> None:
    pygame.draw.rect(screen, WHITE, pygame.Rect(0, 0, WIDTH, SCOREBOARD_HEIGHT))
    blit_baseline(screen, font, f"Score: {score}", SCORE_POS)
    blit_baseline(screen, font, f"Time: {format_elapsed(elapsed_ms)}", TIME_POS)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, elapsed_ms: int) -> None:
    screen.fill(BG)
    draw_scoreboard(screen, font, state.score, elapsed_ms)
    # snake
    for x, y in state.snake:
        draw_cell(screen, x, y, GREEN)
    # food on top, so food under the body stays visible
    fx, fy = state.food.cell
    draw_cell(screen, fx, fy, state.food.kind.color)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, message: str) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    box = pygame.Rect(0, 0, 320, 110)
    box.center = (WIDTH // 2, HEIGHT // 2)
    pygame.draw.rect(screen, WHITE, box)

    title = font.render(message, True, TEXT)
    sub   = font.render("Press Enter to play again", True, TEXT)

    tx = title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 16))
    sx = sub.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 16))

    screen.blit(title, tx)
    screen.blit(sub, sx)
