"""Game state and the rules for moving, collecting and winning."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from solong.gamemap import COLLECTIBLE, EMPTY, EXIT, WALL, GameMap

KEY_ESCAPE = 53


class Direction(Enum):
    """A direction the player can move in."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# W / arrow up, S / arrow down, A / arrow left, D / arrow right.
_KEY_DIRECTIONS: dict[int, Direction] = {
    13: Direction.UP,
    126: Direction.UP,
    1: Direction.DOWN,
    125: Direction.DOWN,
    0: Direction.LEFT,
    123: Direction.LEFT,
    2: Direction.RIGHT,
    124: Direction.RIGHT,
}


class GameWon(Exception):
    """Raised when the player reaches the exit with every item collected."""

    def __init__(self, moves: int) -> None:
        super().__init__(f"won in {moves} movements")
        self.moves = moves


class GameQuit(Exception):
    """Raised when the player asks to leave the game."""


@dataclass
class Game:
    """The map being played, the player's position and the running counters."""

    game_map: GameMap
    player_x: int
    player_y: int
    moves: int = 0
    collected: int = 0

    def _tile(self, x: int, y: int) -> str | None:
        if 0 <= y < self.game_map.height and 0 <= x < self.game_map.width:
            return self.game_map.grid[y][x]
        return None

    def move_player(self, direction: Direction) -> bool:
        """Step one tile in *direction*; return False if a wall is in the way."""
        dx, dy = _OFFSETS[Direction(direction)]
        next_x, next_y = self.player_x + dx, self.player_y + dy
        tile = self._tile(next_x, next_y)
        if tile is None or tile == WALL:
            return False
        self.player_x, self.player_y = next_x, next_y
        self.moves += 1
        return True

    def collect_item(self) -> bool:
        """Pick up a collectible under the player; return whether one was there."""
        if self._tile(self.player_x, self.player_y) != COLLECTIBLE:
            return False
        self.game_map.grid[self.player_y][self.player_x] = EMPTY
        self.collected += 1
        return True

    def check_win(self) -> bool:
        """Return True when the player stands on the exit with everything collected."""
        return (
            self._tile(self.player_x, self.player_y) == EXIT
            and self.collected == self.game_map.collectible_count
        )

    def handle_keypress(self, keycode: int) -> bool:
        """Apply a key press; return True when the player moved.

        Raises GameQuit for the escape key and GameWon when the move wins.
        """
        if keycode == KEY_ESCAPE:
            raise GameQuit()
        direction = _KEY_DIRECTIONS.get(keycode)
        if direction is None or not self.move_player(direction):
            return False
        self.collect_item()
        if self.check_win():
            raise GameWon(self.moves)
        return True


def init_game(game_map: GameMap) -> Game:
    """Start a game with the player on the map's start tile."""
    start_x, start_y = game_map.start_pos
    return Game(game_map, start_x, start_y)