"""Loading and validating ``.ber`` game maps."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

from solong.linereader import read_lines

WALL = "1"
EMPTY = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

MAP_EXTENSION = ".ber"


class MapError(ValueError):
    """Raised when a map file cannot be read or is malformed."""


@dataclass
class GameMap:
    """A rectangular grid of tiles; positions are (x, y), (-1, -1) when absent."""

    width: int
    height: int
    grid: list[list[str]]
    start_pos: tuple[int, int] = (-1, -1)
    exit_pos: tuple[int, int] = (-1, -1)
    collectible_count: int = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GameMap:
        """Build a map from its text lines, trailing newlines allowed.

        The last player and exit tiles found give the start and exit positions.
        """
        rows = [line[:-1] if line.endswith("\n") else line for line in lines]
        if not rows:
            raise MapError("map is empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise MapError("map rows differ in length")
        start = exit_pos = (-1, -1)
        collectibles = 0
        for y, row in enumerate(rows):
            for x, tile in enumerate(row):
                if tile == COLLECTIBLE:
                    collectibles += 1
                elif tile == PLAYER:
                    start = (x, y)
                elif tile == EXIT:
                    exit_pos = (x, y)
        return cls(width, len(rows), [list(row) for row in rows], start, exit_pos, collectibles)


def _read(path: str | PathLike[str]) -> list[str]:
    try:
        return read_lines(path)
    except OSError as exc:
        raise MapError(f"cannot read {path}: {exc}") from exc


def check_file_extension(filename: str | PathLike[str]) -> bool:
    """Return True when *filename* has at least one character before ``.ber``."""
    name = os.fspath(filename)
    return len(name) > len(MAP_EXTENSION) and name.endswith(MAP_EXTENSION)


def count_map_lines(path: str | PathLike[str]) -> int:
    """Return the number of lines in the map file."""
    return len(_read(path))


def check_line_lengths(path: str | PathLike[str]) -> int:
    """Return the common row width of the map file, raising MapError if rows differ."""
    return GameMap.from_lines(_read(path)).width


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read the map file at *path*."""
    return GameMap.from_lines(_read(path))


def check_walls(game_map: GameMap) -> bool:
    """Return True when the map's border is made entirely of walls."""
    grid = game_map.grid
    if not grid or game_map.width == 0:
        return False
    edges_closed = all(tile == WALL for tile in grid[0]) and all(tile == WALL for tile in grid[-1])
    return edges_closed and all(row[0] == WALL and row[-1] == WALL for row in grid)


def check_elements(game_map: GameMap) -> bool:
    """Return True for exactly one player, one exit and at least one collectible."""
    tiles = [tile for row in game_map.grid for tile in row]
    return (
        tiles.count(PLAYER) == 1
        and tiles.count(EXIT) == 1
        and tiles.count(COLLECTIBLE) >= 1
    )