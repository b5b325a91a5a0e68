from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 600, 650
TILE_SIZE = 25
SCOREBOARD_HEIGHT = 50
GRID_W, GRID_H = WIDTH // TILE_SIZE, (HEIGHT - SCOREBOARD_HEIGHT) // TILE_SIZE

# ----- Colors -----
BG     = (0, 0, 0)
GREEN  = (0, 255, 0)
RED    = (255, 0, 0)
YELLOW = (255, 255, 0)
PURPLE = (128, 0, 128)
WHITE  = (255, 255, 255)
TEXT   = (0, 0, 0)

# ----- Scoreboard text -----
FONT_NAME = "arial"
FONT_SIZE = 16
SCORE_POS = (20, 30)                 # baseline, not top-left
TIME_POS = (WIDTH - 150, 30)

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None       # None -> fresh entropy every run
    tick_ms: int = 100               # snake moves once per tick
    clock_ms: int = 1000             # redraw-only timer for the elapsed time
    start_cell: Tuple[int, int] = (5, 5)

CFG = Config()
