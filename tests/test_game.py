import pytest

from solong.game import Direction, Game, GameQuit, GameWon, init_game
from solong.gamemap import GameMap


def make_game(*rows):
    return init_game(GameMap.from_lines(rows))


def test_init_game_starts_on_start_tile():
    game = make_game("111111", "1PC0E1", "111111")
    assert (game.player_x, game.player_y) == game.game_map.start_pos
    assert game.moves == 0
    assert game.collected == 0


def test_move_into_wall_is_refused():
    game = make_game("111111", "1PC0E1", "111111")
    assert game.move_player(Direction.UP) is False
    assert game.move_player(Direction.LEFT) is False
    assert (game.player_x, game.player_y, game.moves) == (1, 1, 0)


def test_move_right_and_collect():
    game = make_game("111111", "1PC0E1", "111111")
    assert game.move_player(Direction.RIGHT) is True
    assert (game.player_x, game.moves) == (2, 1)
    assert game.collect_item() is True
    assert game.collected == 1
    assert game.game_map.grid[1][2] == "0"
    assert game.collect_item() is False
    assert game.collected == 1


def test_down_key_moves_down_and_collects():
    game = make_game("1111", "1P01", "1CE1", "1111")
    assert game.handle_keypress(1) is True
    assert (game.player_x, game.player_y) == (1, 2)
    assert game.collected == 1


def test_reaching_exit_with_everything_wins():
    game = make_game("111111", "1PC0E1", "111111")
    assert game.handle_keypress(2) is True
    assert game.handle_keypress(124) is True
    with pytest.raises(GameWon) as info:
        game.handle_keypress(2)
    assert info.value.moves == 3


def test_exit_without_collectibles_does_not_win():
    game = make_game("11111", "1PEC1", "11111")
    assert game.handle_keypress(124) is True
    assert game.check_win() is False
    assert game.handle_keypress(124) is True
    with pytest.raises(GameWon) as info:
        game.handle_keypress(123)
    assert info.value.moves == 3


def test_escape_raises_quit():
    game = make_game("111111", "1PC0E1", "111111")
    with pytest.raises(GameQuit):
        game.handle_keypress(53)


def test_unknown_key_does_nothing():
    game = make_game("111111", "1PC0E1", "111111")
    assert game.handle_keypress(99) is False
    assert (game.player_x, game.player_y, game.moves) == (1, 1, 0)


def test_moves_off_the_grid_are_refused():
    game = Game(GameMap.from_lines(["P0"]), 0, 0)
    assert game.move_player(Direction.LEFT) is False
    assert game.move_player(Direction.UP) is False
    assert game.move_player(Direction.RIGHT) is True
    assert game.moves == 1