# titlescan/services/parsing/subtitle_parser.py
from __future__ import annotations

import re
from typing import Optional, Tuple

from titlescan.domain.dataclasses.reports import ScanParseReport
from titlescan.domain.entities.subtitle import Subtitle
from titlescan.domain.enums.subtitle_format import SubtitleFormat
from titlescan.domain.enums.subtitle_kind import SubtitleKind
from titlescan.domain.ports.line_source import LineSource
from titlescan.services.parsing.patterns import SUBTITLES_HEADER_RE
from titlescan.services.parsing.sections import parse_section, split_index

_GROUP_RE = re.compile(r"\(([^()]*)\)")
_ISO_RE = re.compile(r"^iso639-2:\s*([A-Za-z]*)$")


def parse_subtitle_entry(body: str, position: int) -> Subtitle:
    """Decompose "1, English (iso639-2: eng) (Bitmap)(VOBSUB)"."""
    number, rest = split_index(body, position)
    language = rest.split("(", 1)[0].strip().rstrip(",").strip()

    iso = None
    kind = SubtitleKind.unknown
    fmt = SubtitleFormat.UNKNOWN
    for group in (g.strip() for g in _GROUP_RE.findall(rest)):
        m = _ISO_RE.match(group)
        if m:
            iso = m.group(1) or None
            continue
        k = SubtitleKind.from_token(group)
        if k is not SubtitleKind.unknown and kind is SubtitleKind.unknown:
            kind = k
            continue
        f = SubtitleFormat.from_token(group)
        if f is not SubtitleFormat.UNKNOWN and fmt is SubtitleFormat.UNKNOWN:
            fmt = f

    return Subtitle(number=number, language=language, iso639_2=iso, kind=kind, format=fmt)


def parse_subtitles(cursor: LineSource, report: Optional[ScanParseReport] = None) -> Tuple[Subtitle, ...]:
    return parse_section(cursor, SUBTITLES_HEADER_RE, parse_subtitle_entry, report)
