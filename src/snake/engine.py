# src/snake/engine.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .collision import classify, hits_food
from .config import CFG, Config
from .food import FoodSpawner, GridFull, RandomSource
from .geometry import Bounds, GridPosition, Heading
from .snake import Snake

logger = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


# ---------- Notifications ----------
@dataclass(frozen=True)
class EatEvent:
    position: GridPosition   # cell that was eaten (the new head)
    score: int               # score after eating
    length: int              # body length after growing


@dataclass(frozen=True)
class GameOverEvent:
    final_score: int         # score before the reset zeroed it
    reason: str              # "wall" or "self"
    head: GridPosition       # fatal head position, possibly off-grid
    length: int              # body length at death


@dataclass(frozen=True)
class GameState:
    score: int
    phase: Phase
    body: Tuple[GridPosition, ...]
    food: Optional[GridPosition]   # None only once the board is full
    heading: Heading
    ticks: int
    board_full: bool = False


EatListener = Callable[[EatEvent], object]
GameOverListener = Callable[[GameOverEvent], object]


class SimulationEngine:
    """
    Tick-driven snake simulation. Owns the snake, the food cell, the score
    and the RUNNING / GAME_OVER phase.

    Once the snake covers every cell the board is full: there is no food,
    the phase stays RUNNING but board_full takes precedence and every tick
    is a no-op until reset().

    Not thread-safe: tick() and set_heading() must be called from a single
    control thread (the driver's loop). External code reads state through
    the accessors and read-only properties; the snake and food are private.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        rng: Optional[RandomSource] = None,
        spawner: Optional[FoodSpawner] = None,
    ):
        self.cfg = cfg
        self.bounds = Bounds(cfg.width, cfg.height)
        self.rng: RandomSource = rng if rng is not None else random.Random(cfg.seed)
        self.spawner = spawner if spawner is not None else FoodSpawner(cfg.spawn_attempts)

        self._eat_listeners: List[EatListener] = []
        self._game_over_listeners: List[GameOverListener] = []

        self._snake = Snake(self._origin, cfg.start_heading, cfg.initial_length)
        self._food: Optional[GridPosition] = self.spawner.spawn_avoiding(self._snake, self.bounds, self.rng)
        self._score = 0
        self._phase = Phase.RUNNING
        self._ticks = 0
        self._board_full = False

    @property
    def _origin(self) -> GridPosition:
        return GridPosition(self.cfg.start_x, self.cfg.start_y)

    # ---------- Listeners ----------
    def on_eat(self, callback: EatListener) -> EatListener:
        self._eat_listeners.append(callback)
        return callback

    def on_game_over(self, callback: GameOverListener) -> GameOverListener:
        self._game_over_listeners.append(callback)
        return callback

    def remove_listener(self, callback: Callable) -> None:
        for listeners in (self._eat_listeners, self._game_over_listeners):
            if callback in listeners:
                listeners.remove(callback)

    # ---------- Mutators ----------
    def tick(self) -> None:
        """
        Advance the simulation by one cell.
        - no-op while GAME_OVER or after the board filled up
        - food is checked before wall and self collisions
        Raises GridFull if the snake just ate the last free cell; the eat is
        still scored and announced, and the board is left without food.
        """
        if self._phase is Phase.GAME_OVER or self._board_full:
            return

        candidate = self._snake.next_head()
        ate = hits_food(candidate, self._food)
        head = self._snake.move(grow=ate)
        self._ticks += 1

        if ate:
            self._score += 1
            try:
                self._food = self.spawner.spawn_avoiding(self._snake, self.bounds, self.rng)
            except GridFull:
                self._food = None
                self._board_full = True
                logger.info("Board full at score %d after %d ticks", self._score, self._ticks)
                self._emit_eat(EatEvent(position=head, score=self._score, length=len(self._snake)))
                raise
            logger.debug("Ate at %s, score=%d, next food at %s", tuple(head), self._score, tuple(self._food))
            self._emit_eat(EatEvent(position=head, score=self._score, length=len(self._snake)))

        reason = classify(head, self._snake.body, self.bounds)
        if reason is not None:
            self.game_over(reason)

    def game_over(self, reason: str) -> GameOverEvent:
        """Reset the board and enter GAME_OVER. The final score is kept in the returned event."""
        event = GameOverEvent(
            final_score=self._score,
            reason=reason,
            head=self._snake.head,
            length=len(self._snake),
        )
        self._snake.reset(self._origin, self.cfg.start_heading, self.cfg.initial_length)
        self._food = self.spawner.spawn_avoiding(self._snake, self.bounds, self.rng)
        self._phase = Phase.GAME_OVER
        self._score = 0
        logger.info("Game over (%s) at %s, final score %d", reason, tuple(event.head), event.final_score)
        for callback in list(self._game_over_listeners):
            callback(event)
        return event

    def set_heading(self, requested: Heading) -> bool:
        """
        Steer the snake. A reversal of the current direction is ignored.
        While GAME_OVER an accepted heading also resumes the game: input
        doubles as the restart signal. A rejected reversal does not resume.
        """
        accepted = self._snake.set_heading(requested)
        if accepted and self._phase is Phase.GAME_OVER and not self._board_full:
            self._phase = Phase.RUNNING
            logger.info("Resumed by input %s", requested.name)
        return accepted

    def reset(self) -> None:
        """Explicit restart: fresh snake and food, score 0, RUNNING."""
        self._snake.reset(self._origin, self.cfg.start_heading, self.cfg.initial_length)
        self._food = self.spawner.spawn_avoiding(self._snake, self.bounds, self.rng)
        self._score = 0
        self._ticks = 0
        self._phase = Phase.RUNNING
        self._board_full = False
        logger.info("Engine reset")

    def place_food(self, pos: Tuple[int, int]) -> None:
        """Put food on a chosen cell (scripted drivers and scenario tests)."""
        cell = GridPosition(*pos)
        if not self.bounds.contains(cell):
            raise ValueError(f"Food cell {tuple(cell)} is outside the {self.bounds.width}x{self.bounds.height} grid")
        if self._snake.occupies(cell):
            raise ValueError(f"Food cell {tuple(cell)} is on the snake")
        self._food = cell

    # ---------- Accessors ----------
    def get_body(self) -> Tuple[GridPosition, ...]:
        return self._snake.cells()

    def get_food_position(self) -> Optional[GridPosition]:
        return self._food

    def get_score(self) -> int:
        return self._score

    def get_phase(self) -> Phase:
        return self._phase

    @property
    def head(self) -> GridPosition:
        return self._snake.head

    @property
    def heading(self) -> Heading:
        """Pending heading the next tick will use."""
        return self._snake.heading

    @property
    def direction(self) -> Heading:
        """Heading committed by the last move."""
        return self._snake.direction

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def board_full(self) -> bool:
        return self._board_full

    def state(self) -> GameState:
        return GameState(
            score=self._score,
            phase=self._phase,
            body=self._snake.cells(),
            food=self._food,
            heading=self._snake.heading,
            ticks=self._ticks,
            board_full=self._board_full,
        )

    # ---------- Internals ----------
    def _emit_eat(self, event: EatEvent) -> None:
        for callback in list(self._eat_listeners):
            callback(event)
