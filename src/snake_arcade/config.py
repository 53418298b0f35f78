from dataclasses import dataclass
from typing import Optional
import random
import time

# ----- Window & grid -----
WIDTH, HEIGHT = 800, 600
CELL_SIZE = 25
OBSTACLE_SIZE = 2 * CELL_SIZE
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE

# ----- Colors -----
BG          = (245, 245, 240)
SNAKE_HEAD  = (0, 204, 0)
SNAKE_TAIL  = (0, 102, 0)
VIPER_HEAD  = (255, 165, 0)
VIPER_TAIL  = (255, 140, 0)
RED         = (200, 40, 40)
YELLOW      = (240, 210, 40)
STONE       = (120, 120, 128)
BORDER      = (0, 0, 0)
TEXT        = (0, 0, 0)
BOX         = (230, 230, 210)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Level labels -----
LEVEL_LABELS = {1: "level 1", 2: "level 2", 3: "level 3"}

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: Optional[int] = None         # None -> seeded from wall-clock time
    initial_speed_ms: int = 130        # tick delay for a length-1 snake
    min_speed_ms: int = 50             # fastest the game ever gets
    speed_step_ms: int = 5             # delay shaved off per extra segment
    level_2_score: int = 8
    level_3_score: int = 15
    level_up_ms: int = 3000
    countdown_ms: int = 3000
    bonus_min_score: int = 5
    bonus_pacing: int = 3              # food points needed between bananas
    bonus_lifetime_ms: int = 5000
    bonus_points: int = 3
    hazard_length: int = 3
    hazard_move_ms: int = 500
    hazard_turn_chance: int = 4        # 1-in-N chance to pick a new heading
    obstacle_count: int = 3
    placement_attempts: int = 1000
    log_level: str = "INFO"
    assets_dir: Optional[str] = None   # textures are optional; shapes otherwise

    def make_rng(self) -> random.Random:
        seed = self.seed if self.seed is not None else int(time.time())
        return random.Random(seed)

CFG = Config()
