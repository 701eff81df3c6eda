import io

import pytest

from solong.formatting import format_string, print_formatted


def test_plain_text_is_unchanged():
    assert format_string("Usage: ./so_long map.ber\n") == "Usage: ./so_long map.ber\n"


def test_decimal_conversion():
    assert format_string("you win in %d movements", 12) == "you win in 12 movements"


def test_d_and_i_agree():
    assert format_string("%d", -37) == format_string("%i", -37)
    assert format_string("%d", -37) == "-37"


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert format_string("%d", 2**32 + 5) == "5"


def test_unsigned_takes_low_32_bits():
    assert format_string("%u", 9223372036854775807) == "4294967295"
    assert format_string("%u", -(2**63)) == "0"


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 123456789, 0xFFFFFFFF])
def test_hex_round_trip(value):
    assert int(format_string("%x", value), 16) == value
    assert format_string("%X", value) == format_string("%x", value).upper()


def test_hex_is_lowercase_for_x():
    text = format_string("%x", 0xABCDEF)
    assert text == text.lower()
    assert int(text, 16) == 0xABCDEF


def test_char_and_string():
    assert format_string("%c%s", "P", "lay") == "Play"
    assert format_string("%c", ord("E")) == "E"


def test_string_none():
    assert format_string("%s", None) == "(null)"


def test_pointer_null():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_address():
    text = format_string("%p", 0x7FFE1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x7FFE1234


def test_percent_literal_consumes_no_argument():
    assert format_string("%%%d", 7) == "%7"


def test_unknown_conversion_is_dropped():
    assert format_string("a%qb%d", 3) == "ab3"


def test_trailing_percent_is_ignored():
    assert format_string("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_wrong_types_raise():
    with pytest.raises(TypeError):
        format_string("%d", "x")
    with pytest.raises(TypeError):
        format_string("%c", "too long")


def test_print_formatted_writes_and_counts():
    stream = io.StringIO()
    count = print_formatted("Error\n%s %u\n", "Invalid map", 3, stream=stream)
    assert stream.getvalue() == "Error\nInvalid map 3\n"
    assert count == len(stream.getvalue())


def test_print_formatted_to_stdout(capsys):
    count = print_formatted("%d-%x", 10, 10)
    out = capsys.readouterr().out
    assert out == format_string("%d-%x", 10, 10)
    assert count == len(out)