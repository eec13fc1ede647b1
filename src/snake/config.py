# src/snake/config.py
from dataclasses import dataclass

from .geometry import Heading

# ----- Grid (original layout: 25 x 25 cells of 30 px) -----
GRID_W, GRID_H = 25, 25
CELL_SIZE = 30

# ----- Colors -----
BG         = (173, 204, 96)
SNAKE      = (43, 51, 24)
SNAKE_HEAD = (20, 26, 10)
FOOD       = (200, 70, 70)
TEXT       = (43, 51, 24)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = Heading.UP, Heading.DOWN, Heading.LEFT, Heading.RIGHT


# ----- Tunables (fixed at construction) -----
@dataclass
class Config:
    width: int = GRID_W
    height: int = GRID_H
    initial_length: int = 3
    start_x: int = 6
    start_y: int = 9
    start_heading: Heading = RIGHT
    tick_interval_s: float = 0.2   # owned by the driver, the engine never reads it
    cell_size: int = CELL_SIZE
    seed: int = 0
    spawn_attempts: int = 64

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.width}x{self.height}")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be >= 1, got {self.initial_length}")
        if self.initial_length >= self.width * self.height:
            raise ValueError("Initial snake leaves no free cell for food")
        if self.spawn_attempts < 0:
            raise ValueError(f"spawn_attempts must be >= 0, got {self.spawn_attempts}")

        # The tail trails the start cell opposite to the heading; every cell must be on the grid.
        dx, dy = self.start_heading.delta
        tail_x = self.start_x - dx * (self.initial_length - 1)
        tail_y = self.start_y - dy * (self.initial_length - 1)
        for x, y in ((self.start_x, self.start_y), (tail_x, tail_y)):
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(
                    f"Initial body from ({self.start_x}, {self.start_y}) heading "
                    f"{self.start_heading.name} does not fit a {self.width}x{self.height} grid"
                )

    @property
    def window_size(self):
        return (self.width * self.cell_size, self.height * self.cell_size)


CFG = Config()
