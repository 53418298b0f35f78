"""Cell and rectangle helpers. Cells are pixel coordinates snapped to CELL_SIZE."""
from typing import NamedTuple, Sequence, Tuple

from .config import WIDTH, HEIGHT, CELL_SIZE

Cell = Tuple[int, int]
Direction = Tuple[int, int]


class Rect(NamedTuple):
    x: int
    y: int
    w: int
    h: int


def shift(cell: Cell, direction: Direction, size: int = CELL_SIZE) -> Cell:
    return (cell[0] + direction[0] * size, cell[1] + direction[1] * size)


def wrap(cell: Cell, width: int = WIDTH, height: int = HEIGHT) -> Cell:
    """Fold a cell back onto the board, treating it as a torus."""
    return (cell[0] % width, cell[1] % height)


def in_bounds(cell: Cell, width: int = WIDTH, height: int = HEIGHT) -> bool:
    return 0 <= cell[0] < width and 0 <= cell[1] < height


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def cell_rect(cell: Cell, size: int = CELL_SIZE) -> Rect:
    return Rect(cell[0], cell[1], size, size)


def overlaps(a: Rect, b: Rect) -> bool:
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def cell_hits_any(cell: Cell, rects: Sequence[Rect]) -> bool:
    r = cell_rect(cell)
    return any(overlaps(r, o) for o in rects)
