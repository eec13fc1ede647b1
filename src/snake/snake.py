# src/snake/snake.py
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator, Optional, Tuple

from .geometry import GridPosition, Heading


class Snake:
    """
    Ordered body of grid cells, head at index 0, tail at the end.

    Two heading slots are kept:
      - direction: the heading committed by the last move
      - heading:   the pending heading the next move will use
    Reversals are judged against the committed direction, so two quick
    turns between moves cannot fold the head back onto the neck.
    """

    def __init__(
        self,
        origin: Tuple[int, int],
        heading: Heading,
        length: int = 3,
        body: Optional[Iterable[Tuple[int, int]]] = None,
    ):
        self.body: Deque[GridPosition] = deque()
        self.direction = heading
        self.heading = heading
        if body is not None:
            cells = [GridPosition(*cell) for cell in body]
            if not cells:
                raise ValueError("Snake body must not be empty")
            self.body.extend(cells)
        else:
            self.reset(origin, heading, length)

    # ---------- Lifecycle ----------
    def reset(self, origin: Tuple[int, int], initial_heading: Heading, length: int) -> None:
        """Rebuild the body as `length` cells trailing `origin` opposite to `initial_heading`."""
        if length < 1:
            raise ValueError(f"Snake length must be >= 1, got {length}")
        ox, oy = origin
        dx, dy = initial_heading.delta
        self.body = deque(GridPosition(ox - dx * i, oy - dy * i) for i in range(length))
        self.direction = initial_heading
        self.heading = initial_heading

    # ---------- Steering / movement ----------
    def set_heading(self, requested: Heading) -> bool:
        """Store `requested` for the next move. Returns False if it was a reversal."""
        if requested.is_opposite(self.direction):
            return False
        self.heading = requested
        return True

    def next_head(self) -> GridPosition:
        return self.head.step(self.heading)

    def move(self, grow: bool = False) -> GridPosition:
        """
        Advance one cell along the pending heading and return the new head.
        The tail is kept when `grow` is True. No bounds checking: the head
        may leave the grid and the caller classifies it.
        """
        new_head = self.next_head()
        self.direction = self.heading
        self.body.appendleft(new_head)
        if not grow:
            self.body.pop()
        return new_head

    # ---------- Queries ----------
    @property
    def head(self) -> GridPosition:
        return self.body[0]

    def occupies(self, pos: Tuple[int, int], exclude_head: bool = False) -> bool:
        cells = iter(self.body)
        if exclude_head:
            next(cells)
        return any(cell == pos for cell in cells)

    def cells(self) -> Tuple[GridPosition, ...]:
        return tuple(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[GridPosition]:
        return iter(self.body)

    def __repr__(self) -> str:
        return f"Snake(head={tuple(self.head)}, len={len(self)}, heading={self.heading.name})"
