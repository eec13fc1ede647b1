# src/snake/__init__.py
"""Grid snake simulation core. The pygame adapter lives in snake.game / snake.main."""

from .collision import hits_food, hits_self, hits_wall
from .config import CFG, Config
from .engine import EatEvent, GameOverEvent, GameState, Phase, SimulationEngine
from .food import FoodSpawner, GridFull
from .geometry import Bounds, GridPosition, Heading
from .pacing import Pacer
from .snake import Snake

__all__ = [
    "Bounds",
    "CFG",
    "Config",
    "EatEvent",
    "FoodSpawner",
    "GameOverEvent",
    "GameState",
    "GridFull",
    "GridPosition",
    "Heading",
    "Pacer",
    "Phase",
    "SimulationEngine",
    "Snake",
    "hits_food",
    "hits_self",
    "hits_wall",
]
