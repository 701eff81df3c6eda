# solong

A small top-down puzzle game. You walk a player around a walled map, pick
up every collectible and then step onto the exit. When you win, the number
of moves you needed is printed.

## Installing

    pip install .

For running the test suite:

    pip install ".[test]"
    pytest

## Playing

    solong path/to/level.ber

Controls:

- `W` or the up arrow: move up
- `S` or the down arrow: move down
- `A` or the left arrow: move left
- `D` or the right arrow: move right
- `Esc` or closing the window: quit

Each successful step counts as one move. Walking onto a collectible picks it
up. Stepping onto the exit wins only once every collectible has been picked
up; until then the exit is just another floor tile. On a win the game prints
`Well play, you win in N movements` and exits with status 0.

Sprites are read as XPM images from a `sprites` directory in the current
working directory: `wall.xpm`, `floor.xpm`, `player.xpm`, `collect.xpm` and
`exit.xpm`. Every tile is drawn 42 pixels square. If a sprite cannot be read
or the window cannot be opened, the program exits with status 1.

## Map files

A map is a plain text file whose name ends in `.ber` (with at least one
character before the extension). Each line is one row of the map and every
row must have the same length.

| Character | Meaning      |
|-----------|--------------|
| `1`       | wall         |
| `0`       | empty floor  |
| `P`       | player start |
| `E`       | exit         |
| `C`       | collectible  |

A map is rejected when:

- the file name does not end in `.ber`,
- the file is empty or cannot be read,
- rows differ in length,
- its border is not made entirely of walls,
- it does not hold exactly one `P`, exactly one `E` and at least one `C`.

Example:

    1111111
    1P0C0E1
    1111111

On bad arguments or a rejected map the program prints `Error` followed by a
short reason (`Usage: solong map.ber`, `Invalid file extension` or
`Invalid map`) and exits with status 1.

## Using it as a library

The pieces of the game can be used on their own:

- `solong.gamemap`: `load_map`, `count_map_lines`, `check_line_lengths`,
  `check_walls`, `check_elements`, `check_file_extension` and the `GameMap`
  dataclass (with `GameMap.from_lines`); unreadable or malformed maps raise
  `MapError`.
- `solong.game`: `init_game` and the `Game` dataclass with `move_player`,
  `collect_item`, `check_win` and `handle_keypress`; the `Direction` enum;
  `GameWon` (carrying `moves`) and `GameQuit` are raised by
  `handle_keypress` to end a game.
- `solong.render`: `load_images` returns an `Images` set of sprites,
  `draw_commands` lists what to draw as `(sprite name, tile x, tile y)`, and
  `render_map` draws a game onto a pygame surface.
- `solong.xpm`: `load_xpm`, `parse_xpm` and `parse_xpm_lines` read XPM
  images into an `XpmImage` (width, height and rows of `0xAARRGGBB` pixels,
  where the alpha byte means transparency); `strip_comments` and
  `quoted_lines` are the text helpers they use. Bad input raises `XpmError`.
- `solong.colors`: `lookup_color` resolves X11 colour names
  (case-insensitive, `None` when unknown) and `parse_color_text` handles
  XPM colour words, including `#rrggbb` values and `None`.
- `solong.linereader`: `LineReader` and `read_lines` split a stream or file
  into lines that keep their trailing newline.
- `solong.formatting`: `format_string` and `print_formatted` handle the
  `%c %s %p %d %i %u %x %X %%` conversions.
- `solong.cli`: `main` runs the `solong` command; `setup_game` opens the
  window and draws the starting map.

## What it does not do

- It does not check that the exit and every collectible can actually be
  reached from the start; a map that passes the checks may be unwinnable.
- It ships no sprites; the `sprites` directory has to be provided.
- It shows no move counter on screen; the count is only printed on a win.