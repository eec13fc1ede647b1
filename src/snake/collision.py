# src/snake/collision.py
"""Stateless collision tests. Bodies are head-first sequences of cells."""
from typing import Optional, Sequence, Tuple

from .geometry import Bounds

Cell = Tuple[int, int]

WALL = "wall"
SELF = "self"


def hits_wall(head: Cell, bounds: Bounds) -> bool:
    x, y = head
    return x < 0 or x >= bounds.width or y < 0 or y >= bounds.height


def hits_self(head: Cell, body: Sequence[Cell]) -> bool:
    """True if `head` lands on any segment after index 0 (the head never hits itself)."""
    return any(head == segment for i, segment in enumerate(body) if i >= 1)


def hits_food(head: Cell, food: Optional[Cell]) -> bool:
    return food is not None and tuple(head) == tuple(food)


def classify(head: Cell, body: Sequence[Cell], bounds: Bounds) -> Optional[str]:
    """Return the fatal collision kind for a post-move head, wall before self, or None."""
    if hits_wall(head, bounds):
        return WALL
    if hits_self(head, body):
        return SELF
    return None
