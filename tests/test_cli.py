import pygame

from solong.cli import main, setup_game
from solong.game import init_game
from solong.gamemap import GameMap

XPM_TEXT = '/* XPM */\nstatic char *img[] = {\n"2 2 1 1",\n"a c #00FF00",\n"aa",\n"aa"};\n'


def test_no_arguments_is_an_error(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("Error\nUsage:")


def test_too_many_arguments_is_an_error(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().out.startswith("Error\nUsage:")


def test_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out == "Error\nInvalid file extension\n"


def test_bare_extension_is_rejected(capsys):
    assert main([".ber"]) == 1
    assert capsys.readouterr().out == "Error\nInvalid file extension\n"


def test_missing_map_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map\n"


def test_open_walls_are_invalid(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("11111\n0PCE1\n11111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map\n"


def test_missing_elements_are_invalid(tmp_path, capsys):
    path = tmp_path / "empty.ber"
    path.write_text("11111\n1P0E1\n11111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\nInvalid map\n"


def test_missing_sprites_fail_setup(tmp_path, monkeypatch, capsys):
    path = tmp_path / "good.ber"
    path.write_text("111111\n1PC0E1\n111111\n")
    monkeypatch.chdir(tmp_path)
    assert main([str(path)]) == 1
    assert "Invalid map" not in capsys.readouterr().out


def test_setup_game_opens_window_of_map_size(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    for name in ("wall", "floor", "player", "collect", "exit"):
        (tmp_path / f"{name}.xpm").write_text(XPM_TEXT)
    game = init_game(GameMap.from_lines(["111111", "1PC0E1", "111111"]))
    try:
        screen, images = setup_game(game, tmp_path)
        assert screen.get_size() == (6 * 42, 3 * 42)
        assert images.size == 42
        assert screen.get_at((1, 1)) == (0, 255, 0, 255)
    finally:
        pygame.quit()