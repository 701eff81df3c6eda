import pytest

from solong.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_lines,
    quoted_lines,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *img[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
"b c None",
// the pixels follow
"ab",
"ba"
};
"""


def test_strip_comments_keeps_length_and_quoted_text():
    text = '"a/*b" /* x */ "c//d" // tail\n"e"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "x" not in stripped
    assert "tail" not in stripped
    assert '"a/*b"' in stripped
    assert '"c//d"' in stripped


def test_strip_comments_unterminated_block_blanks_rest():
    stripped = strip_comments('"a" /* never closed "b"')
    assert stripped.strip() == '"a"'


def test_quoted_lines_yields_contents_in_order():
    assert list(quoted_lines('x "one" y "two words" "3"')) == ["one", "two words", "3"]


def test_parse_sample_image():
    image = parse_xpm(SAMPLE)
    assert image.width == 2
    assert image.height == 2
    assert image.pixels == ((0xFF0000, 0xFF000000), (0xFF000000, 0xFF0000))


def test_named_colours():
    image = parse_xpm_lines(["2 1 2 1", ". c red", "# c dark slate", ".#"])
    assert image.pixels == ((0xFF0000, 0x2F4F4F),)


def test_direct_table_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == ((0x000002,),)


def test_searched_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == ((0x000001,),)


def test_multi_char_keys_split_row():
    lines = ["2 1 2 2", "aa c #000010", "bb c #000020", "bbaa"]
    assert parse_xpm_lines(lines) == XpmImage(2, 1, ((0x000020, 0x000010),))


def test_unknown_key_is_zero():
    image = parse_xpm_lines(["2 1 1 1", "a c #00FF00", "az"])
    assert image.pixels[0][1] == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["3 1 1 1", "a c #000000", "aa"],
        [],
    ],
)
def test_malformed_input_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm(SAMPLE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")