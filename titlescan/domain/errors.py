# titlescan/domain/errors.py
from __future__ import annotations


class ScanParseError(Exception):
    """Base error for scan output parsing."""


class NotATitleBlock(ScanParseError):
    """The current line is not a title marker. Nothing was consumed."""


class MalformedField(ScanParseError):
    """A field line was recognized but its value could not be parsed."""

    def __init__(self, field: str, line: str, reason: str = ""):
        super().__init__(field, line, reason)
        self.field = field
        self.line = line
        self.reason = reason

    def __str__(self) -> str:
        msg = f"malformed {self.field}: {self.line.strip()!r}"
        if self.reason:
            msg += f" ({self.reason})"
        return msg


class MalformedTitleNumber(MalformedField):
    """The title marker matched but its number is not a non-negative integer."""

    def __init__(self, line: str, reason: str = ""):
        super().__init__("title number", line, reason)


class EndOfStream(ScanParseError):
    """The line source is exhausted."""


class StreamAccessFailure(ScanParseError):
    """The underlying line source failed while being read."""
