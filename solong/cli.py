"""Command-line entry point: validate a map, open a window and play."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from os import PathLike

import pygame

from solong.formatting import print_formatted
from solong.game import Game, GameQuit, GameWon, init_game
from solong.gamemap import MapError, check_elements, check_file_extension, check_walls, load_map
from solong.render import Images, load_images, render_map
from solong.xpm import XpmError

WINDOW_TITLE = "so_long"

_KEYCODES = {
    pygame.K_w: 13,
    pygame.K_UP: 126,
    pygame.K_s: 1,
    pygame.K_DOWN: 125,
    pygame.K_a: 0,
    pygame.K_LEFT: 123,
    pygame.K_d: 2,
    pygame.K_RIGHT: 124,
    pygame.K_ESCAPE: 53,
}


def setup_game(
    game: Game, sprite_dir: str | PathLike[str] = "sprites"
) -> tuple[pygame.Surface, Images]:
    """Load the sprites, open the window and draw the starting map."""
    images = load_images(sprite_dir)
    pygame.init()
    screen = pygame.display.set_mode(
        (game.game_map.width * images.size, game.game_map.height * images.size)
    )
    pygame.display.set_caption(WINDOW_TITLE)
    render_map(game, images, screen)
    pygame.display.flip()
    return screen, images


def _play(game: Game, screen: pygame.Surface, images: Images) -> int:
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return 0
        if event.type != pygame.KEYDOWN:
            continue
        keycode = _KEYCODES.get(event.key)
        if keycode is None:
            continue
        try:
            moved = game.handle_keypress(keycode)
        except GameWon as won:
            print_formatted("Well play, you win in %d movements", won.moves)
            return 0
        except GameQuit:
            return 0
        if moved:
            render_map(game, images, screen)
            pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named in *argv*; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print_formatted("Error\nUsage: solong map.ber\n")
        return 1
    path = args[0]
    if not check_file_extension(path):
        print_formatted("Error\nInvalid file extension\n")
        return 1
    try:
        game_map = load_map(path)
    except MapError:
        game_map = None
    if game_map is None or not check_walls(game_map) or not check_elements(game_map):
        print_formatted("Error\nInvalid map\n")
        return 1

    game = init_game(game_map)
    try:
        screen, images = setup_game(game)
    except (XpmError, pygame.error):
        pygame.quit()
        return 1
    try:
        return _play(game, screen, images)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())