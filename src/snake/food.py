# src/snake/food.py
from __future__ import annotations

import logging
from typing import Protocol

import numpy as np  # type: ignore

from .geometry import Bounds, GridPosition
from .snake import Snake

logger = logging.getLogger(__name__)


class GridFull(RuntimeError):
    """Raised when the snake covers every cell and food has nowhere to go."""


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class FoodSpawner:
    """
    Picks a uniformly random free cell for food.

    Rejection sampling is tried `max_attempts` times; after that the free
    cells are enumerated from an occupancy mask and one is drawn directly.
    This keeps placement bounded when the snake covers most of the board.
    """

    def __init__(self, max_attempts: int = 64):
        self.max_attempts = max_attempts

    def spawn_avoiding(self, snake: Snake, bounds: Bounds, rng: RandomSource) -> GridPosition:
        covered = {cell for cell in snake if bounds.contains(cell)}
        if len(covered) >= bounds.area:
            raise GridFull(f"No free cell left on a {bounds.width}x{bounds.height} grid")

        for _ in range(self.max_attempts):
            cell = GridPosition(rng.randrange(bounds.width), rng.randrange(bounds.height))
            if not snake.occupies(cell, exclude_head=False):
                return cell

        free = self.free_cells(snake, bounds)
        if len(free) == 0:
            raise GridFull(f"No free cell left on a {bounds.width}x{bounds.height} grid")
        logger.debug("Rejection sampling exhausted; drawing from %d free cells", len(free))
        y, x = free[rng.randrange(len(free))]
        return GridPosition(int(x), int(y))

    @staticmethod
    def occupancy(snake: Snake, bounds: Bounds) -> np.ndarray:
        """Boolean (height, width) mask, True where the snake lies. Off-grid cells are ignored."""
        mask = np.zeros((bounds.height, bounds.width), dtype=bool)
        for x, y in snake:
            if bounds.contains((x, y)):
                mask[y, x] = True
        return mask

    @classmethod
    def free_cells(cls, snake: Snake, bounds: Bounds) -> np.ndarray:
        """(row, col) indices of unoccupied cells in row-major order."""
        return np.argwhere(~cls.occupancy(snake, bounds))
