"""
Configuration for the maze chase simulation.

Every tunable lives here as a module constant; ``Settings`` bundles them so a
simulation (or a test) can run with different values without touching the
module globals.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

# ---------------------------------------------------------------------------
# TIMING
# ---------------------------------------------------------------------------

FPS = 60
STEP_FRAMES = 10          # agents move on every 10th frame
SCATTER_SECONDS = 7       # one-shot Scatter -> Chase switch
FRIGHTENED_SECONDS = 10   # countdown restarted by each power pellet

# ---------------------------------------------------------------------------
# SCORING
# ---------------------------------------------------------------------------

PELLET_POINTS = 10
POWER_PELLET_POINTS = 50

# ---------------------------------------------------------------------------
# WORLD
# ---------------------------------------------------------------------------

MAZE_ROWS = 32
MAZE_COLS = 40

# (row, col)
PLAYER_SPAWN = (16, 20)
ADVERSARY_SPAWNS = (
    (8, 16),    # BLINKY
    (10, 14),   # PINKY
    (10, 15),   # INKY
    (10, 16),   # CLYDE
)
RESPAWN = (8, 16)

CLYDE_SHY_DISTANCE = 8

# ---------------------------------------------------------------------------
# GLYPHS
# ---------------------------------------------------------------------------

# Player icon pairs per facing: (mouth open, mouth closed)
PLAYER_ICONS = {
    "UP": ("v", "o"),
    "DOWN": ("^", "o"),
    "LEFT": (">", "o"),
    "RIGHT": ("<", "o"),
}

ADVERSARY_ICONS = {
    "BLINKY": "B",
    "PINKY": "P",
    "INKY": "I",
    "CLYDE": "C",
}
FRIGHTENED_ICON = "X"

# ---------------------------------------------------------------------------
# DISPLAY (pygame front end)
# ---------------------------------------------------------------------------

TILE_SIZE = 8
SCALE = 2
HUD_HEIGHT = 28

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
WALL_BLUE = (33, 33, 222)
PEN_GREY = (40, 40, 70)
PELLET_COLOR = (255, 184, 174)
PORTAL_GREEN = (0, 200, 120)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
PINK = (255, 184, 255)
CYAN = (0, 255, 255)
ORANGE = (255, 184, 82)
BLUE_FRIGHTENED = (33, 33, 255)

# ---------------------------------------------------------------------------
# DEFAULT MAZE (32 x 40)
# '#' wall  '.' pellet  '@' power pellet  '[' ']' portal pair  '~' pen floor
# ---------------------------------------------------------------------------

MAZE_LAYOUT: List[str] = [
    "########################################",
    "#......................................#",
    "#.######.#####.##########.#####.######.#",
    "#@######.#####.##########.#####.######@#",
    "#.######.#####.##########.#####.######.#",
    "#......................................#",
    "#.###.#####.################.#####.###.#",
    "#.###.#####.################.#####.###.#",
    "#..............   .....................#",
    "#.####.###.##~~~~~###########.###.####.#",
    "#.####.###.##~~~~~###########.###.####.#",
    "#.####.###.##################.###.####.#",
    "#......................................#",
    "#.#####.#####.############.#####.#####.#",
    "[......................................]",
    "#.#####.#####.############.#####.#####.#",
    "#..................   .................#",
    "#.#######.#######.####.#######.#######.#",
    "#.#######.#######.####.#######.#######.#",
    "#.#######.#######.####.#######.#######.#",
    "#......................................#",
    "#.####.#####.##############.#####.####.#",
    "#@####.#####.##############.#####.####@#",
    "#.####.#####.##############.#####.####.#",
    "#......................................#",
    "#.########.#####.######.#####.########.#",
    "#.########.#####.######.#####.########.#",
    "#.########.#####.######.#####.########.#",
    "#......................................#",
    "#.############.##########.############.#",
    "#......................................#",
    "########################################",
]


@dataclass(frozen=True)
class Settings:
    fps: int = FPS
    step_frames: int = STEP_FRAMES
    scatter_seconds: int = SCATTER_SECONDS
    frightened_seconds: int = FRIGHTENED_SECONDS
    pellet_points: int = PELLET_POINTS
    power_pellet_points: int = POWER_PELLET_POINTS
    rows: int = MAZE_ROWS
    cols: int = MAZE_COLS
    player_spawn: Tuple[int, int] = PLAYER_SPAWN
    adversary_spawns: Tuple[Tuple[int, int], ...] = ADVERSARY_SPAWNS
    respawn: Tuple[int, int] = RESPAWN
    clyde_proximity: bool = False
    clyde_shy_distance: int = CLYDE_SHY_DISTANCE

    def __post_init__(self):
        if self.fps <= 0 or self.step_frames <= 0:
            raise ValueError("fps and step_frames must be positive")
        if len(self.adversary_spawns) != 4:
            raise ValueError("exactly four adversary spawns are required")


DEFAULT_SETTINGS = Settings()
