"""Pytest configuration and fixtures for snake simulation tests."""

import random

import pytest

from snake.config import Config
from snake.engine import SimulationEngine


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def engine(seeded_rng):
    """Default 25x25 engine, body [(6,9),(5,9),(4,9)] heading right, food parked at (0,0)."""
    eng = SimulationEngine(Config(), rng=seeded_rng)
    eng.place_food((0, 0))
    return eng


@pytest.fixture
def make_engine(seeded_rng):
    """Build an engine from Config overrides, food parked at (0,0) unless given."""

    def _make(food=(0, 0), **overrides):
        eng = SimulationEngine(Config(**overrides), rng=seeded_rng)
        if food is not None:
            eng.place_food(food)
        return eng

    return _make
