# src/snake/geometry.py
from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple


class GridPosition(NamedTuple):
    """Integer cell coordinate. Compares equal to a plain (x, y) tuple."""
    x: int
    y: int

    def step(self, heading: "Heading") -> "GridPosition":
        dx, dy = heading.delta
        return GridPosition(self.x + dx, self.y + dy)


class Heading(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_opposite(self, other: "Heading") -> bool:
        return self.dx == -other.dx and self.dy == -other.dy

    def rotate_left(self) -> "Heading":
        """Rotate 90° counter-clockwise (screen coordinates, y grows down)."""
        return Heading((self.dy, -self.dx))

    def rotate_right(self) -> "Heading":
        """Rotate 90° clockwise (screen coordinates, y grows down)."""
        return Heading((-self.dy, self.dx))


class Bounds(NamedTuple):
    width: int
    height: int

    def contains(self, pos: Tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def area(self) -> int:
        return self.width * self.height


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Manhattan (L1) distance on the grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
