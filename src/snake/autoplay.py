# src/snake/autoplay.py
from __future__ import annotations

import argparse
import csv
import logging
import os
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np  # type: ignore

from .collision import hits_wall
from .config import Config, UP, DOWN, LEFT, RIGHT
from .engine import GameOverEvent, SimulationEngine
from .food import GridFull
from .geometry import Heading, manhattan

HEADINGS = (UP, DOWN, LEFT, RIGHT)

Policy = Callable[[SimulationEngine, np.random.Generator], Heading]


# --------------------------
# Policies
# --------------------------
def policy_random(engine: SimulationEngine, rng: np.random.Generator) -> Heading:
    """Uniformly random heading. Reversals are simply ignored by the engine."""
    return HEADINGS[int(rng.integers(len(HEADINGS)))]


def would_hit(engine: SimulationEngine, heading: Heading) -> bool:
    """
    True if one move along `heading` would be fatal.
    The tail cell counts as free unless the move eats, since it moves away.
    """
    nxt = engine.head.step(heading)
    if hits_wall(nxt, engine.bounds):
        return True
    body = list(engine.get_body())
    if nxt != engine.get_food_position():
        body = body[:-1]
    return nxt in body


def best_moves_toward_food(engine: SimulationEngine) -> List[Heading]:
    """
    Forward, left and right relative to the current direction, ordered by
    Manhattan distance to food after the move (forward wins ties). The
    reversal is never a candidate.
    """
    forward = engine.direction
    candidates = [forward, forward.rotate_left(), forward.rotate_right()]
    food = engine.get_food_position()
    if food is None:
        return candidates
    head = engine.head
    return sorted(candidates, key=lambda h: manhattan(head.step(h), food))


def policy_greedy(engine: SimulationEngine, rng: np.random.Generator) -> Heading:
    """
    Greedy on food distance with simple safety:
    - prefer the relative move that reduces Manhattan distance most
    - skip moves that would be fatal
    - if every move is fatal, fall back to random
    """
    for heading in best_moves_toward_food(engine):
        if not would_hit(engine, heading):
            return heading
    return policy_random(engine, rng)


POLICIES: Dict[str, Policy] = {
    "random": policy_random,
    "greedy": policy_greedy,
}


# --------------------------
# Episode loop
# --------------------------
@dataclass
class EpisodeResult:
    ticks: int
    score: int
    outcome: str  # "wall", "self", "full" or "timeout"


def run_episode(
    engine: SimulationEngine,
    policy: str,
    rng: np.random.Generator,
    max_ticks: int = 10_000,
) -> EpisodeResult:
    """
    Play one game headlessly from a fresh board until the snake dies, fills
    the board, or `max_ticks` runs out. The score of a lost game is read from
    the game-over event, since the engine zeroes it on death.
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    choose = POLICIES[policy]

    ended: List[GameOverEvent] = []
    listener = engine.on_game_over(ended.append)
    engine.reset()
    try:
        ticks = 0
        while ticks < max_ticks:
            engine.set_heading(choose(engine, rng))
            try:
                engine.tick()
            except GridFull:
                return EpisodeResult(ticks + 1, engine.get_score(), "full")
            ticks += 1
            if ended:
                return EpisodeResult(ticks, ended[0].final_score, ended[0].reason)
        return EpisodeResult(ticks, engine.get_score(), "timeout")
    finally:
        engine.remove_listener(listener)


# --------------------------
# Main
# --------------------------
def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run snake games headlessly and log per-episode results.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument("--policy", type=str, default="greedy", choices=sorted(POLICIES))
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--max-ticks", type=int, default=10_000)
    parser.add_argument("--width", type=int, default=Config.width)
    parser.add_argument("--height", type=int, default=Config.height)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV will be saved here",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    cfg = Config(width=args.width, height=args.height, seed=args.seed)
    engine = SimulationEngine(cfg, rng=random.Random(args.seed))
    rng = np.random.default_rng(args.seed)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"autoplay_{args.policy}.csv")

    print(f"Running {args.episodes} episode(s) with policy={args.policy}")
    print("ep,ticks,score,outcome")

    rows = [("ep", "ticks", "score", "outcome")]
    for ep in range(1, args.episodes + 1):
        result = run_episode(engine, args.policy, rng, args.max_ticks)
        print(f"{ep},{result.ticks},{result.score},{result.outcome}")
        rows.append((ep, result.ticks, result.score, result.outcome))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    scores = np.array([row[2] for row in rows[1:]], dtype=float)
    if scores.size:
        print(f"\nmean score {scores.mean():.2f}, best {int(scores.max())}")
    print(f"Saved results → {out_csv}")


if __name__ == "__main__":
    main()
