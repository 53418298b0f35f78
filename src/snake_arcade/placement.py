"""Procedural placement of food, bananas and stones on free cells."""
from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, List, Optional

import numpy as np  # type: ignore

from .config import WIDTH, HEIGHT, CELL_SIZE, OBSTACLE_SIZE, CFG
from .geometry import Cell, Rect, cell_rect, overlaps

logger = logging.getLogger(__name__)

Blocked = Callable[[Cell], bool]


# ---------- Exclusion predicates ----------
def on_cells(cells: Iterable[Cell]) -> Blocked:
    taken = set(cells)
    return lambda cell: cell in taken


def on_rects(rects: Iterable[Rect], size: int = CELL_SIZE) -> Blocked:
    """Blocks any candidate whose footprint of side `size` overlaps a rect."""
    rects = list(rects)
    return lambda cell: any(overlaps(Rect(cell[0], cell[1], size, size), r) for r in rects)


def covers_cells(cells: Iterable[Cell], size: int = OBSTACLE_SIZE) -> Blocked:
    """Blocks a coarse candidate whose square would cover any of `cells`."""
    cells = [cell_rect(c) for c in cells]
    return lambda cell: any(overlaps(Rect(cell[0], cell[1], size, size), r) for r in cells)


# ---------- Placement ----------
def grid_cells(size: int = CELL_SIZE, width: int = WIDTH, height: int = HEIGHT) -> np.ndarray:
    """All top-left corners of a `size` grid, as an (N, 2) array of (x, y)."""
    ys, xs = np.mgrid[0:height // size, 0:width // size]
    return np.stack([xs.ravel() * size, ys.ravel() * size], axis=1)


def place_random(
    rng: random.Random,
    *blocked: Blocked,
    size: int = CELL_SIZE,
    attempts: Optional[int] = None,
) -> Optional[Cell]:
    """
    Pick a uniformly random cell on the `size` grid that no predicate blocks.

    Samples up to `attempts` times, then scans the whole board and picks
    among the free cells. Returns None only when every cell is blocked.
    """
    if attempts is None:
        attempts = CFG.placement_attempts
    cols, rows = WIDTH // size, HEIGHT // size

    for _ in range(attempts):
        cell = (rng.randrange(cols) * size, rng.randrange(rows) * size)
        if not any(b(cell) for b in blocked):
            return cell

    logger.warning("Random placement gave up after %d attempts; scanning board", attempts)
    cells = grid_cells(size)
    free = np.fromiter(
        (not any(b((int(x), int(y))) for b in blocked) for x, y in cells),
        dtype=bool,
        count=len(cells),
    )
    idx = np.flatnonzero(free)
    if idx.size == 0:
        logger.warning("No free cell left on a %dpx grid", size)
        return None
    x, y = cells[idx[rng.randrange(idx.size)]]
    return (int(x), int(y))


def generate_obstacles(
    rng: random.Random,
    snake: Iterable[Cell],
    count: Optional[int] = None,
) -> List[Rect]:
    """Place `count` stones on the coarse grid, clear of the snake and each other."""
    if count is None:
        count = CFG.obstacle_count
    avoid_snake = covers_cells(snake)
    obstacles: List[Rect] = []
    for _ in range(count):
        corner = place_random(rng, avoid_snake, on_rects(obstacles, OBSTACLE_SIZE), size=OBSTACLE_SIZE)
        if corner is None:
            break
        obstacles.append(Rect(corner[0], corner[1], OBSTACLE_SIZE, OBSTACLE_SIZE))
    logger.debug("Obstacles placed: %s", obstacles)
    return obstacles
