from snake_arcade.config import WIDTH, HEIGHT, CELL_SIZE, UP, DOWN, LEFT, RIGHT
from snake_arcade.geometry import Rect, shift, wrap, in_bounds, is_opposite, overlaps, cell_hits_any


def test_shift_moves_one_cell():
    assert shift((100, 100), RIGHT) == (100 + CELL_SIZE, 100)
    assert shift((100, 100), UP) == (100, 100 - CELL_SIZE)


def test_wrap_folds_edges():
    assert wrap((-CELL_SIZE, 0)) == (WIDTH - CELL_SIZE, 0)
    assert wrap((WIDTH, 50)) == (0, 50)
    assert wrap((0, -CELL_SIZE)) == (0, HEIGHT - CELL_SIZE)
    assert wrap((0, HEIGHT)) == (0, 0)


def test_in_bounds():
    assert in_bounds((0, 0))
    assert in_bounds((WIDTH - CELL_SIZE, HEIGHT - CELL_SIZE))
    assert not in_bounds((WIDTH, 0))
    assert not in_bounds((0, -1))


def test_is_opposite():
    assert is_opposite(LEFT, RIGHT)
    assert is_opposite(UP, DOWN)
    assert not is_opposite(UP, LEFT)
    assert not is_opposite(RIGHT, RIGHT)


def test_overlaps_is_strict_on_edges():
    stone = Rect(50, 50, 50, 50)
    assert overlaps(Rect(75, 75, 25, 25), stone)
    assert not overlaps(Rect(100, 50, 25, 25), stone)   # touching the right edge
    assert not overlaps(Rect(25, 50, 25, 25), stone)    # touching the left edge


def test_cell_hits_any():
    stones = [Rect(0, 0, 50, 50), Rect(200, 200, 50, 50)]
    assert cell_hits_any((25, 25), stones)
    assert cell_hits_any((225, 200), stones)
    assert not cell_hits_any((50, 0), stones)
    assert not cell_hits_any((25, 25), [])
