# main.py
import argparse
import logging

import pygame  # type: ignore

from .assets import load_assets
from .config import Config
from .engine import GameOverEvent, SimulationEngine
from .food import GridFull
from .game import QUIT, RESTART, draw_frame, handle_input
from .pacing import Pacer


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play snake in a pygame window.")
    parser.add_argument("--width", type=int, default=Config.width)
    parser.add_argument("--height", type=int, default=Config.height)
    parser.add_argument("--cell-size", type=int, default=Config.cell_size)
    parser.add_argument("--tick", type=float, default=Config.tick_interval_s, help="seconds per move")
    parser.add_argument("--seed", type=int, default=Config.seed)
    parser.add_argument("--food-image", type=str, default=None, help="optional food sprite (png)")
    parser.add_argument("--eat-sound", type=str, default=None)
    parser.add_argument("--game-over-sound", type=str, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    cfg = Config(
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        tick_interval_s=args.tick,
        seed=args.seed,
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    engine = SimulationEngine(cfg)
    pacer = Pacer(cfg.tick_interval_s, start_s=pygame.time.get_ticks() / 1000.0)
    last_score = 0

    @engine.on_game_over
    def _remember_score(event: GameOverEvent) -> None:
        nonlocal last_score
        last_score = event.final_score

    with load_assets(cfg.cell_size, args.food_image, args.eat_sound, args.game_over_sound) as assets:
        engine.on_eat(assets.play_eat)
        engine.on_game_over(assets.play_game_over)

        while True:
            # 1) input
            action = handle_input(engine)
            if action == QUIT:
                break
            if action == RESTART:
                engine.reset()
                pacer.reset(pygame.time.get_ticks() / 1000.0)

            # 2) update (movement gated by the pacer, not by frame rate)
            if pacer.due(pygame.time.get_ticks() / 1000.0):
                try:
                    engine.tick()
                except GridFull:
                    pass  # engine is frozen on the full board until R

            # 3) render
            draw_frame(screen, font, engine, assets, last_score)
            pygame.display.flip()
            clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
