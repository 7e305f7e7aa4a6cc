# titlescan/services/parsing/audio_parser.py
from __future__ import annotations

import re
from typing import Optional, Tuple

from titlescan.domain.dataclasses.reports import ScanParseReport
from titlescan.domain.entities.audio_track import NAMED_LAYOUTS, AudioTrack
from titlescan.domain.ports.line_source import LineSource
from titlescan.services.parsing.patterns import AUDIO_HEADER_RE
from titlescan.services.parsing.sections import parse_section, split_index

_GROUP_RE = re.compile(r"\(([^()]*)\)")
_ISO_RE = re.compile(r"^iso639-2:\s*([A-Za-z]*)$")
_LAYOUT_RE = re.compile(r"^\d+\.\d+\s*ch$", re.IGNORECASE)
_SAMPLE_RATE_RE = re.compile(r"(\d+)\s*Hz\b")
_BITRATE_RE = re.compile(r"(\d+)\s*bps\b")


def _is_layout(group: str) -> bool:
    return bool(_LAYOUT_RE.match(group)) or group.lower() in NAMED_LAYOUTS


def parse_audio_entry(body: str, position: int) -> AudioTrack:
    """
    Decompose "1, English (AC3) (5.1 ch) (iso639-2: eng), 48000Hz, 448000bps".
    Every piece after the index is optional.
    """
    number, description = split_index(body, position)

    language = description.split("(", 1)[0].strip().rstrip(",").strip()

    codec = layout = iso = None
    for group in (g.strip() for g in _GROUP_RE.findall(description)):
        m = _ISO_RE.match(group)
        if m:
            iso = m.group(1) or None
        elif layout is None and _is_layout(group):
            layout = group
        elif codec is None:
            codec = group

    sr = _SAMPLE_RATE_RE.search(description)
    br = _BITRATE_RE.search(description)

    return AudioTrack(
        number=number,
        description=description,
        language=language,
        codec=codec,
        channel_layout=layout,
        iso639_2=iso,
        sample_rate=int(sr.group(1)) if sr else None,
        bitrate=int(br.group(1)) if br else None,
    )


def parse_audio_tracks(cursor: LineSource, report: Optional[ScanParseReport] = None) -> Tuple[AudioTrack, ...]:
    return parse_section(cursor, AUDIO_HEADER_RE, parse_audio_entry, report)
