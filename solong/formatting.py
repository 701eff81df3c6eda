"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}") from None


def _signed32(value: Any, spec: str) -> int:
    number = _as_int(value, spec) & _UINT_MASK
    return number - (1 << 32) if number & _SIGN_BIT else number


def _unsigned32(value: Any, spec: str) -> int:
    return _as_int(value, spec) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & _POINTER_MASK:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: str(_signed32(v, "d")),
    "i": lambda v: str(_signed32(v, "i")),
    "u": lambda v: str(_unsigned32(v, "u")),
    "x": lambda v: f"{_unsigned32(v, 'x'):x}",
    "X": lambda v: f"{_unsigned32(v, 'X'):X}",
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # Unknown conversions print nothing and consume no argument.
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield convert(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by *args*."""
    return "".join(_render(fmt, args))


def print_formatted(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)