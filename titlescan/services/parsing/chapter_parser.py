# titlescan/services/parsing/chapter_parser.py
from __future__ import annotations

import re
from datetime import timedelta
from typing import Optional, Tuple

from titlescan.common.logging import get_logger
from titlescan.common.strings.durations import parse_hms
from titlescan.domain.dataclasses.reports import ScanParseReport
from titlescan.domain.entities.chapter import Chapter
from titlescan.domain.ports.line_source import LineSource
from titlescan.services.parsing.patterns import CHAPTERS_HEADER_RE
from titlescan.services.parsing.sections import parse_section, split_index

logger = get_logger(__name__)

_CELLS_RE = re.compile(r"cells (\d+)->(\d+)")
_BLOCKS_RE = re.compile(r"(\d+) blocks")
_DURATION_RE = re.compile(r"duration (\S+)")


def parse_chapter_entry(body: str, position: int) -> Chapter:
    """Build a Chapter from "1: cells 0->0, 62136 blocks, duration 00:02:34"."""
    number, rest = split_index(body, position)

    cell_start = cell_end = blocks = None
    m = _CELLS_RE.search(rest)
    if m:
        cell_start, cell_end = int(m.group(1)), int(m.group(2))
    m = _BLOCKS_RE.search(rest)
    if m:
        blocks = int(m.group(1))

    duration: Optional[timedelta] = None
    m = _DURATION_RE.search(rest)
    if m:
        try:
            duration = parse_hms(m.group(1).rstrip(","))
        except ValueError:
            logger.warning("chapter %d: unreadable duration %r", number, m.group(1))

    return Chapter(
        number=number,
        duration=duration,
        cell_start=cell_start,
        cell_end=cell_end,
        blocks=blocks,
    )


def parse_chapters(cursor: LineSource, report: Optional[ScanParseReport] = None) -> Tuple[Chapter, ...]:
    return parse_section(cursor, CHAPTERS_HEADER_RE, parse_chapter_entry, report)
