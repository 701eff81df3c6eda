import io

import pytest

from solong.linereader import LineReader, read_lines

SAMPLE = "1111\n1PCE\n1111"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 100])
def test_lines_split_at_newlines(size):
    reader = LineReader(io.StringIO(SAMPLE), size)
    assert list(reader) == ["1111\n", "1PCE\n", "1111"]


@pytest.mark.parametrize("size", [1, 4, 7, 64])
def test_join_round_trip(size):
    text = "a\n\nbc\nlast line\n"
    assert "".join(LineReader(io.StringIO(text), size)) == text


def test_read_line_returns_none_at_end():
    reader = LineReader(io.StringIO("x\n"), 8)
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_yields_nothing():
    assert list(LineReader(io.StringIO(""), 4)) == []


def test_blank_lines_are_kept():
    assert list(LineReader(io.StringIO("\n\n"), 1)) == ["\n", "\n"]


def test_bytes_stream():
    reader = LineReader(io.BytesIO(b"10\n01\n"), 2)
    assert list(reader) == [b"10\n", b"01\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(SAMPLE, encoding="utf-8")
    lines = read_lines(path)
    assert lines == SAMPLE.splitlines(keepends=True)
    assert len(lines) == SAMPLE.count("\n") + 1


def test_read_lines_keeps_carriage_returns(tmp_path):
    path = tmp_path / "crlf.ber"
    path.write_bytes(b"11\r\n11\r\n")
    assert read_lines(path) == ["11\r\n", "11\r\n"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.ber")