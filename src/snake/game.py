# game.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .assets import Assets
from .config import BG, FOOD, SNAKE, SNAKE_HEAD, TEXT, UP, DOWN, LEFT, RIGHT
from .engine import Phase, SimulationEngine
from .geometry import Heading

KEY_TO_HEADING = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

QUIT, RESTART = "quit", "restart"


# ---------- Input ----------
def heading_for_key(key: int) -> Optional[Heading]:
    return KEY_TO_HEADING.get(key)


def handle_input(engine: SimulationEngine) -> Optional[str]:
    """
    Drain pygame events and forward arrow keys to the engine.
    Returns QUIT on window close, RESTART on R, else None.
    """
    action = None
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return QUIT
        if event.type == pygame.KEYDOWN:
            heading = heading_for_key(event.key)
            if heading is not None:
                engine.set_heading(heading)
            elif event.key == pygame.K_r:
                action = RESTART
            elif event.key == pygame.K_ESCAPE:
                return QUIT
    return action


# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int], cell_size: int) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect, border_radius=cell_size // 4)


def draw_game(screen: pygame.Surface, font: pygame.font.Font, engine: SimulationEngine, assets: Assets) -> None:
    cell = engine.cfg.cell_size
    screen.fill(BG)
    # food (none once the board is full)
    food = engine.get_food_position()
    if food is not None:
        fx, fy = food
        if assets.food_image is not None:
            screen.blit(assets.food_image, (fx * cell, fy * cell))
        else:
            draw_cell(screen, fx, fy, FOOD, cell)
    # snake
    body = engine.get_body()
    for x, y in body[1:]:
        draw_cell(screen, x, y, SNAKE, cell)
    draw_cell(screen, body[0].x, body[0].y, SNAKE_HEAD, cell)
    # score
    txt = font.render(f"Score: {engine.get_score()}", True, TEXT)
    screen.blit(txt, (8, 6))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, title: str, sub: str, score: int) -> None:
    width, height = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    lines = [
        (font.render(title, True, (240, 240, 250)), -16),
        (font.render(sub, True, (220, 220, 230)), 16),
        (font.render(f"Score: {score}", True, (220, 220, 230)), 44),
    ]
    for surface, offset in lines:
        screen.blit(surface, surface.get_rect(center=(width // 2, height // 2 + offset)))


def draw_frame(
    screen: pygame.Surface,
    font: pygame.font.Font,
    engine: SimulationEngine,
    assets: Assets,
    last_score: int,
) -> None:
    draw_game(screen, font, engine, assets)
    if engine.board_full:
        draw_overlay(screen, font, "BOARD FULL", "Press R to restart", engine.get_score())
    elif engine.get_phase() is Phase.GAME_OVER:
        draw_overlay(screen, font, "GAME OVER", "Press an arrow key to play again", last_score)
