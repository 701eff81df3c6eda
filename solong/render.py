"""Sprite loading and drawing of the map onto a pygame surface."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from os import PathLike
from pathlib import Path

import pygame

from solong.game import Game
from solong.gamemap import COLLECTIBLE, EXIT, WALL
from solong.xpm import XpmImage, load_xpm

TILE_SIZE = 42

_TILE_SPRITES = {WALL: "wall", EXIT: "exit", COLLECTIBLE: "collect"}


@dataclass(frozen=True)
class Images:
    """The sprites used to draw a game, each *size* pixels square on screen."""

    wall: XpmImage
    floor: XpmImage
    player: XpmImage
    collect: XpmImage
    exit: XpmImage
    size: int = TILE_SIZE


def load_images(sprite_dir: str | PathLike[str] = "sprites") -> Images:
    """Load every sprite from *sprite_dir*; raises XpmError if one is unreadable."""
    directory = Path(sprite_dir)
    return Images(
        wall=load_xpm(directory / "wall.xpm"),
        floor=load_xpm(directory / "floor.xpm"),
        player=load_xpm(directory / "player.xpm"),
        collect=load_xpm(directory / "collect.xpm"),
        exit=load_xpm(directory / "exit.xpm"),
    )


def draw_commands(game: Game) -> list[tuple[str, int, int]]:
    """Return the sprites to draw, in order, as (sprite name, tile x, tile y)."""
    commands: list[tuple[str, int, int]] = []
    for y, row in enumerate(game.game_map.grid):
        for x, tile in enumerate(row):
            commands.append(("floor", x, y))
            sprite = _TILE_SPRITES.get(tile)
            if sprite is not None:
                commands.append((sprite, x, y))
            if (x, y) == (game.player_x, game.player_y):
                commands.append(("player", x, y))
    return commands


@lru_cache(maxsize=64)
def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, pixel in enumerate(row):
            transparency = (pixel >> 24) & 0xFF
            red, green, blue = (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF
            surface.set_at((x, y), (red, green, blue, 255 - transparency))
    return surface


def render_map(game: Game, images: Images, surface: pygame.Surface) -> None:
    """Draw the whole map and the player onto *surface*."""
    for name, x, y in draw_commands(game):
        sprite: XpmImage = getattr(images, name)
        surface.blit(_to_surface(sprite), (x * images.size, y * images.size))