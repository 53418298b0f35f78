# snake.py
from dataclasses import dataclass, field
from typing import List, Sequence
import random

from .config import WIDTH, HEIGHT, CELL_SIZE, GRID_W, GRID_H, DIRECTIONS, RIGHT
from .geometry import Cell, Direction, Rect, shift, wrap, is_opposite, cell_hits_any

# ---------- Player snake ----------
@dataclass
class Snake:
    body: List[Cell]               # head at index 0
    heading: Direction = RIGHT
    grow: bool = False             # one-shot: consumed by the next advance

    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def turn(self, direction: Direction) -> bool:
        """Commit a new heading unless it is a u-turn. Returns True if accepted."""
        if is_opposite(direction, self.heading):
            return False
        self.heading = direction
        return True

    def advance(self) -> Cell:
        """Step one cell along the heading. Bounds are the collision engine's problem."""
        new_head = shift(self.head, self.heading)
        self.body.insert(0, new_head)
        if self.grow:
            self.grow = False
        else:
            self.body.pop()
        return new_head


def new_snake() -> Snake:
    return Snake(body=[(WIDTH // 2, HEIGHT // 2)], heading=RIGHT)


# ---------- Wandering viper ----------
@dataclass
class WanderingHazard:
    body: List[Cell]
    heading: Direction
    last_move_ms: int
    move_interval_ms: int
    turn_chance: int               # 1-in-N chance to roll a new heading per move

    @property
    def head(self) -> Cell:
        return self.body[0]

    def update(self, now_ms: int, obstacles: Sequence[Rect], rng: random.Random) -> bool:
        """
        Move one cell if the move interval has elapsed.
        - occasionally picks a fresh random heading
        - wraps across the board edges
        - stays put (timer untouched) if the next cell is a stone
        Returns True if the viper moved.
        """
        if now_ms - self.last_move_ms <= self.move_interval_ms:
            return False

        if rng.randrange(self.turn_chance) == 0:
            self.heading = DIRECTIONS[rng.randrange(len(DIRECTIONS))]

        candidate = wrap(shift(self.head, self.heading))
        if cell_hits_any(candidate, obstacles):
            return False

        self.body.insert(0, candidate)
        self.body.pop()
        self.last_move_ms = now_ms
        return True


def new_hazard(
    rng: random.Random,
    now_ms: int,
    length: int,
    move_interval_ms: int,
    turn_chance: int,
) -> WanderingHazard:
    sx = rng.randrange(GRID_W) * CELL_SIZE
    sy = rng.randrange(GRID_H) * CELL_SIZE
    body = [wrap((sx + i * CELL_SIZE, sy)) for i in range(length)]
    return WanderingHazard(
        body=body,
        heading=DIRECTIONS[rng.randrange(len(DIRECTIONS))],
        last_move_ms=now_ms,
        move_interval_ms=move_interval_ms,
        turn_chance=turn_chance,
    )
