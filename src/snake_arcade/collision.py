"""Collision checks against the player's head. All pure; none mutate state."""
from typing import Optional, Sequence

from .geometry import Cell, Rect, in_bounds, cell_hits_any


def hits_boundary(snake: Sequence[Cell]) -> bool:
    return not in_bounds(snake[0])


def hits_self(snake: Sequence[Cell]) -> bool:
    head = snake[0]
    return any(seg == head for seg in snake[1:])


def hits_obstacle(snake: Sequence[Cell], obstacles: Sequence[Rect]) -> bool:
    return cell_hits_any(snake[0], obstacles)


def hits_hazard(snake: Sequence[Cell], hazard: Sequence[Cell], active: bool = True) -> bool:
    return active and snake[0] in hazard


def hits_cell(snake: Sequence[Cell], target: Optional[Cell]) -> bool:
    """Food or banana pickup; an absent banana is passed as None."""
    return target is not None and snake[0] == target


def is_fatal(
    snake: Sequence[Cell],
    obstacles: Sequence[Rect],
    hazard: Sequence[Cell],
    hazard_active: bool,
) -> bool:
    return (
        hits_boundary(snake)
        or hits_self(snake)
        or hits_obstacle(snake, obstacles)
        or hits_hazard(snake, hazard, hazard_active)
    )
