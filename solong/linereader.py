"""Chunked line reading that returns each line with its newline kept."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Read lines from a stream, pulling *buffer_size* units at a time."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _fill(self) -> None:
        while True:
            if (
                self._pending is not None
                and self._newline is not None
                and self._newline in self._pending
            ):
                return
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, bytes) else "\n"  # type: ignore[assignment]
            self._pending = chunk if self._pending is None else self._pending + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, newline included, or None at end of input."""
        self._fill()
        pending = self._pending
        if not pending or self._newline is None:
            self._pending = None
            return None
        cut = pending.find(self._newline)
        if cut == -1:
            self._pending = None
            return pending
        self._pending = pending[cut + 1:]
        return pending[: cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return every line of the text file at *path*, newlines kept."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(LineReader(handle))