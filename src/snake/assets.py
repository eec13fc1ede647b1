# src/snake/assets.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import pygame  # type: ignore

logger = logging.getLogger(__name__)


@dataclass
class Assets:
    """Image and sound handles of the pygame adapter. Any of them may be missing."""
    food_image: Optional[pygame.Surface] = None
    eat_sound: Optional[pygame.mixer.Sound] = None
    game_over_sound: Optional[pygame.mixer.Sound] = None

    def play_eat(self, _event=None) -> None:
        if self.eat_sound is not None:
            self.eat_sound.play()

    def play_game_over(self, _event=None) -> None:
        if self.game_over_sound is not None:
            self.game_over_sound.play()

    def release(self) -> None:
        for sound in (self.eat_sound, self.game_over_sound):
            if sound is not None:
                sound.stop()
        self.food_image = None
        self.eat_sound = None
        self.game_over_sound = None


def _load_image(path: str, cell_size: int) -> pygame.Surface:
    try:
        image = pygame.image.load(path).convert_alpha()
    except (pygame.error, FileNotFoundError) as e:
        raise SystemExit(f"Couldn't load image: {path}") from e
    return pygame.transform.smoothscale(image, (cell_size, cell_size))


def _load_sound(path: str) -> Optional[pygame.mixer.Sound]:
    if pygame.mixer.get_init() is None:
        logger.warning("Audio unavailable, skipping %s", path)
        return None
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, FileNotFoundError) as e:
        raise SystemExit(f"Couldn't load sound: {path}") from e


@contextmanager
def load_assets(
    cell_size: int,
    food_image: Optional[str] = None,
    eat_sound: Optional[str] = None,
    game_over_sound: Optional[str] = None,
) -> Iterator[Assets]:
    """
    Load the optional food image and sound cues for the lifetime of the
    with-block; they are released on exit. Requires a display mode to be
    set already (convert_alpha needs one).
    """
    assets = Assets(
        food_image=_load_image(food_image, cell_size) if food_image else None,
        eat_sound=_load_sound(eat_sound) if eat_sound else None,
        game_over_sound=_load_sound(game_over_sound) if game_over_sound else None,
    )
    try:
        yield assets
    finally:
        assets.release()
