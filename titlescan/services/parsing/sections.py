# titlescan/services/parsing/sections.py
from __future__ import annotations

import re
from typing import Callable, List, Optional, Tuple, TypeVar

from titlescan.common.logging import get_logger
from titlescan.domain.dataclasses.reports import ScanParseReport
from titlescan.domain.ports.line_source import LineSource
from titlescan.services.parsing.patterns import entry_body, is_title_marker

logger = get_logger(__name__)

T = TypeVar("T")

_LEADING_INDEX_RE = re.compile(r"^(\d+)\s*[:,]?\s*(.*)$")


def split_index(body: str, position: int) -> Tuple[int, str]:
    """
    Split "N, rest" / "N: rest" into (N, rest). When the leading token is not
    a number the entry's 1-based position in its list stands in for it.
    """
    m = _LEADING_INDEX_RE.match(body)
    if m:
        return int(m.group(1)), m.group(2).strip()
    logger.debug("entry without index, using position %d: %r", position, body)
    # drop an unparseable "x," / "x:" token so the rest still decomposes
    head, sep, rest = body.partition(",") if "," in body else body.partition(":")
    if sep and " " not in head.strip():
        return position, rest.strip()
    return position, body


def parse_section(
    cursor: LineSource,
    header: re.Pattern,
    build_entry: Callable[[str, int], T],
    report: Optional[ScanParseReport] = None,
) -> Tuple[T, ...]:
    """
    Consume an optional section header and then every consecutive entry line.
    Stops, without consuming, at the first line that is not an entry. No
    header means the section is absent: nothing is consumed.
    """
    line = cursor.peek()
    if line is None or not header.match(line):
        return ()
    cursor.read()
    if report is not None:
        report.lines_read += 1

    entries: List[T] = []
    while True:
        line = cursor.peek()
        if is_title_marker(line):
            break
        body = entry_body(line)
        if body is None:
            break
        cursor.read()
        if report is not None:
            report.lines_read += 1
        entries.append(build_entry(body, len(entries) + 1))
    return tuple(entries)
