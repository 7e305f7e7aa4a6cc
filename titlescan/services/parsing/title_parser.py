# titlescan/services/parsing/title_parser.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from titlescan.common.logging import get_logger
from titlescan.common.strings.durations import parse_hms
from titlescan.domain.dataclasses.reports import ScanParseReport
from titlescan.domain.entities.geometry import Cropping, PixelAspect, Size
from titlescan.domain.entities.title import Title
from titlescan.domain.errors import MalformedField, MalformedTitleNumber, NotATitleBlock
from titlescan.domain.ports.line_source import LineSource
from titlescan.services.parsing import patterns as p
from titlescan.services.parsing.audio_parser import parse_audio_tracks
from titlescan.services.parsing.chapter_parser import parse_chapters
from titlescan.services.parsing.subtitle_parser import parse_subtitles

logger = get_logger(__name__)

Fields = Dict[str, Any]

_NUMBER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class FieldRule:
    """
    One scalar field of a title block. `prefix` decides whether a line is
    about this field; `apply` reads the value out of the match into the
    field dict and raises MalformedField when it cannot.
    """
    name: str
    prefix: re.Pattern
    apply: Callable[[re.Match, str, Fields], None]


# ---- field setters -------------------------------------------------------------
def _set_main_feature(m: re.Match, line: str, fields: Fields) -> None:
    fields["main_title"] = True


def _set_stream(m: re.Match, line: str, fields: Fields) -> None:
    name = m.group(1).strip()
    fields["source_name"] = name or None


def _set_angles(m: re.Match, line: str, fields: Fields) -> None:
    raw = m.group(1).strip()
    if not _NUMBER_RE.fullmatch(raw):
        raise MalformedField("angle count", line, "expected an integer")
    fields["angle_count"] = int(raw)


def _set_duration(m: re.Match, line: str, fields: Fields) -> None:
    try:
        fields["duration"] = parse_hms(m.group(1))
    except ValueError as e:
        raise MalformedField("duration", line, str(e)) from e


def _set_geometry(m: re.Match, line: str, fields: Fields) -> None:
    g = p.GEOMETRY_VALUE_RE.match(m.group(1))
    if not g:
        raise MalformedField("geometry", line, "unexpected layout")
    width, height, par_num, par_den = (int(x) for x in g.group(1, 2, 3, 4))
    if width <= 0 or height <= 0:
        raise MalformedField("geometry", line, "frame size must be positive")
    # all-or-nothing: a half-read geometry line is worse than none
    fields["resolution"] = Size(width, height)
    fields["par"] = PixelAspect(par_num, par_den)
    fields["aspect_ratio"] = float(g.group(5))
    fields["fps"] = float(g.group(6))


def _set_autocrop(m: re.Match, line: str, fields: Fields) -> None:
    c = p.AUTOCROP_VALUE_RE.match(m.group(1))
    if not c:
        raise MalformedField("autocrop", line, "expected top/bottom/left/right")
    top, bottom, left, right = (int(x) for x in c.groups())
    fields["autocrop"] = Cropping(top=top, bottom=bottom, left=left, right=right)


MAIN_FEATURE = FieldRule("main_feature", p.MAIN_FEATURE_RE, _set_main_feature)
STREAM = FieldRule("stream", p.STREAM_RE, _set_stream)
ANGLES = FieldRule("angles", p.ANGLES_RE, _set_angles)
DURATION = FieldRule("duration", p.DURATION_RE, _set_duration)
GEOMETRY = FieldRule("size", p.SIZE_RE, _set_geometry)
AUTOCROP = FieldRule("autocrop", p.AUTOCROP_RE, _set_autocrop)


def field_rules(angle_detection: bool = True) -> Tuple[FieldRule, ...]:
    """Scalar fields in the order the scanner prints them."""
    rules: List[FieldRule] = [MAIN_FEATURE, STREAM]
    if angle_detection:
        rules.append(ANGLES)
    rules += [DURATION, GEOMETRY, AUTOCROP]
    return tuple(rules)


# ---- block parsing -------------------------------------------------------------
def read_title_number(line: str) -> int:
    """Title number from a marker line. Raises NotATitleBlock / MalformedTitleNumber."""
    m = p.TITLE_MARKER_RE.match(line)
    if not m:
        raise NotATitleBlock(line)
    token = m.group(1).strip()
    if not _NUMBER_RE.fullmatch(token):
        raise MalformedTitleNumber(line, f"{token!r} is not a number")
    return int(token)


def _ends_scalar_section(line: Optional[str]) -> bool:
    return (
        line is None
        or not p.is_indented(line)
        or p.is_title_marker(line)
        or p.is_section_header(line)
        or p.entry_body(line) is not None
    )


def _skip_block_noise(cursor: LineSource, number: int, report: Optional[ScanParseReport]) -> None:
    # block-level notices may sit between the list sections
    while True:
        line = cursor.peek()
        if _ends_scalar_section(line):
            return
        cursor.read()
        logger.debug("title %d: skipping line %d: %r", number, cursor.line_number, line)
        if report is not None:
            report.lines_read += 1
            report.noise_lines += 1


def _match_rule(rules: Tuple[FieldRule, ...], start: int, line: str) -> Tuple[int, Optional[re.Match]]:
    for i in range(start, len(rules)):
        m = rules[i].prefix.match(line)
        if m:
            return i, m
    return -1, None


def _read_scalar_fields(
    cursor: LineSource,
    rules: Tuple[FieldRule, ...],
    fields: Fields,
    report: Optional[ScanParseReport],
) -> None:
    pos = 0
    while not _ends_scalar_section(cursor.peek()):
        line = cursor.read()
        if report is not None:
            report.lines_read += 1

        idx, m = _match_rule(rules, pos, line)
        if m is None:
            logger.debug("title %s: skipping line %d: %r", fields["number"], cursor.line_number, line)
            if report is not None:
                report.noise_lines += 1
            continue

        pos = idx + 1
        try:
            rules[idx].apply(m, line, fields)
        except MalformedField as e:
            logger.warning("title %s, line %d: %s", fields["number"], cursor.line_number, e)
            if report is not None:
                report.add_malformed(f"line {cursor.line_number}", str(e))


def parse_title(
    cursor: LineSource,
    *,
    angle_detection: bool = True,
    report: Optional[ScanParseReport] = None,
) -> Title:
    """
    Parse one title block starting at the cursor's current line.

    Raises NotATitleBlock (nothing consumed) when the line is not a title
    marker, and MalformedTitleNumber (marker consumed) when its number is
    unreadable. Every other problem degrades to a default field value. If
    the stream ends inside the block the partial title is returned.
    """
    line = cursor.peek()
    if line is None or not p.is_title_marker(line):
        raise NotATitleBlock(line or "")
    cursor.read()
    if report is not None:
        report.lines_read += 1
    number = read_title_number(line)

    fields: Fields = {"number": number}
    _read_scalar_fields(cursor, field_rules(angle_detection), fields, report)

    chapters = parse_chapters(cursor, report)
    _skip_block_noise(cursor, number, report)
    audio_tracks = parse_audio_tracks(cursor, report)
    _skip_block_noise(cursor, number, report)
    subtitles = parse_subtitles(cursor, report)

    if cursor.peek() is None:
        logger.debug("title %d: stream ended at line %d", number, cursor.line_number)

    return Title(
        chapters=chapters,
        audio_tracks=audio_tracks,
        subtitles=subtitles,
        **fields,
    )
