# titlescan/common/iter.py
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from titlescan.domain.errors import EndOfStream, StreamAccessFailure

_SENTINEL = object()


class LineCursor:
    """
    Forward-only cursor over text lines with one line of lookahead.

    Wraps any iterable of strings (a list, ``str.splitlines()``, an open text
    file, a subprocess pipe) and pulls from it lazily, so a streaming source
    only blocks inside its own ``__next__``. Trailing newlines are stripped.
    Failures of the underlying source surface as StreamAccessFailure.
    """

    def __init__(self, lines: Iterable[str]):
        self._it: Iterator[str] = iter(lines)
        self._buf = _SENTINEL
        self._exhausted = False
        self.line_number = 0  # number of lines consumed so far

    def _fill(self) -> None:
        if self._buf is not _SENTINEL or self._exhausted:
            return
        try:
            raw = next(self._it)
        except StopIteration:
            self._exhausted = True
            return
        except (OSError, UnicodeDecodeError) as e:
            raise StreamAccessFailure(f"line source failed after line {self.line_number}") from e
        self._buf = raw.rstrip("\r\n")

    def peek(self) -> Optional[str]:
        """Next line without consuming it, or None at end of stream."""
        self._fill()
        if self._buf is _SENTINEL:
            return None
        return self._buf  # type: ignore[return-value]

    def read(self) -> str:
        """Consume and return the next line. Raises EndOfStream when exhausted."""
        line = self.peek()
        if line is None:
            raise EndOfStream(f"no line after line {self.line_number}")
        self._buf = _SENTINEL
        self.line_number += 1
        return line

    @property
    def at_end(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> Iterator[str]:
        while not self.at_end:
            yield self.read()


def as_cursor(source: LineCursor | str | Iterable[str]) -> LineCursor:
    """Accept a cursor, a block of text, or any iterable of lines."""
    if isinstance(source, LineCursor):
        return source
    if isinstance(source, str):
        return LineCursor(source.splitlines())
    return LineCursor(source)
