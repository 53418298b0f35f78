import random

from snake_arcade.config import WIDTH, HEIGHT, CELL_SIZE, OBSTACLE_SIZE
from snake_arcade.geometry import Rect, overlaps, cell_rect
from snake_arcade.placement import (
    place_random, generate_obstacles, grid_cells, on_cells, on_rects, covers_cells,
)


def all_cells(size=CELL_SIZE):
    return [(x, y) for y in range(0, HEIGHT, size) for x in range(0, WIDTH, size)]


def test_grid_cells_covers_board():
    cells = grid_cells()
    assert len(cells) == (WIDTH // CELL_SIZE) * (HEIGHT // CELL_SIZE)
    assert tuple(cells[0]) == (0, 0)
    assert tuple(cells[-1]) == (WIDTH - CELL_SIZE, HEIGHT - CELL_SIZE)


def test_place_random_avoids_blocked_cells():
    blocked = set(c for c in all_cells() if c[0] < WIDTH // 2)
    stones = [Rect(600, 0, 50, 50)]
    for seed in range(100):
        cell = place_random(random.Random(seed), on_cells(blocked), on_rects(stones))
        assert cell not in blocked
        assert not overlaps(cell_rect(cell), stones[0])
        assert cell[0] % CELL_SIZE == 0 and cell[1] % CELL_SIZE == 0


def test_fallback_scan_finds_last_free_cell():
    free = (WIDTH - CELL_SIZE, HEIGHT - CELL_SIZE)
    taken = set(all_cells()) - {free}
    cell = place_random(random.Random(0), on_cells(taken), attempts=0)
    assert cell == free


def test_saturated_board_returns_none():
    assert place_random(random.Random(0), on_cells(all_cells()), attempts=10) is None


def test_coarse_placement_is_aligned():
    for seed in range(20):
        x, y = place_random(random.Random(seed), size=OBSTACLE_SIZE)
        assert x % OBSTACLE_SIZE == 0 and y % OBSTACLE_SIZE == 0


def test_covers_cells_blocks_coarse_square_over_snake():
    blocked = covers_cells([(75, 75)])
    assert blocked((50, 50))
    assert not blocked((100, 50))


def test_generate_obstacles_avoids_snake_and_each_other():
    snake = [(400, 300), (375, 300), (350, 300)]
    for seed in range(30):
        stones = generate_obstacles(random.Random(seed), snake, count=3)
        assert len(stones) == 3
        for i, s in enumerate(stones):
            assert s.w == s.h == OBSTACLE_SIZE
            assert s.x % OBSTACLE_SIZE == 0 and s.y % OBSTACLE_SIZE == 0
            assert not any(overlaps(cell_rect(c), s) for c in snake)
            for other in stones[i + 1:]:
                assert not overlaps(s, other)
