"""Reading XPM images into plain pixel grids.

Pixels are 32-bit values in 0xAARRGGBB layout where, as in the drawing layer
this feeds, the alpha byte means transparency: a colour of "None" becomes
0xFF000000 and every opaque colour has an alpha byte of zero.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from solong.colors import parse_color_text

TRANSPARENT = 0xFF000000

_BLOCK_COMMENT = re.compile(r'"[^"]*"?|/\*.*?(?:\*/|\Z)', re.DOTALL)
_LINE_COMMENT = re.compile(r'"[^"]*"?|//[^\n]*\n?')
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: *pixels* holds *height* rows of *width* values each."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def _blank(match: re.Match[str]) -> str:
    token = match.group(0)
    return token if token.startswith('"') else " " * len(token)


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as *text*; block comments are removed
    first, then line comments (whose newline is blanked as well).
    """
    text = _BLOCK_COMMENT.sub(_blank, text)
    return _LINE_COMMENT.sub(_blank, text)


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in *text*, in order."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _words(line: str) -> list[str]:
    return [word for word in _WORD_SEPARATORS.split(line) if word]


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what} line") from None


def _pixel(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def _read_palette(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour")
        key = line[:cpp]
        words = _words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line {line!r} has no 'c' entry") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line {line!r} has no colour after 'c'")
        end = words[index + 2] if index + 2 < len(words) else None
        value = parse_color_text(words[index + 1], end)
        # Short keys are looked up in a direct table (later entries replace
        # earlier ones); longer keys are searched and the first entry wins.
        if cpp <= 2 or key not in palette:
            palette[key] = value
    return palette


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows."""
    source = iter(lines)
    words = _words(_next_line(source, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive integers")

    palette = _read_palette(source, ncolors, cpp)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {line!r} is shorter than {width} pixels")
        keys = (line[offset:offset + cpp] for offset in range(0, width * cpp, cpp))
        rows.append(tuple(_pixel(palette.get(key, 0)) for key in keys))
    return XpmImage(width, height, tuple(rows))


def parse_xpm(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(quoted_lines(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at *path*."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(text)