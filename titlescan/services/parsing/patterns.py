# titlescan/services/parsing/patterns.py
"""
Line classes of the scanner's title listing. A typical block:

    + title 1:
      + Main Feature
      + stream: movie.mkv
      + angle(s) 1
      + duration: 01:30:00
      + size: 1920x1080, pixel aspect: 1/1, display aspect: 1.78, 23.976 fps
      + autocrop: 0/0/10/10
      + chapters:
        + 1: cells 0->0, 62136 blocks, duration 00:02:34
      + audio tracks:
        + 1, English (AC3) (5.1 ch) (iso639-2: eng), 48000Hz, 448000bps
      + subtitle tracks:
        + 1, English (iso639-2: eng) (Bitmap)(VOBSUB)

Field prefixes only decide which field a line is about; the value is
matched separately so a recognized-but-garbled line can be reported.
"""
from __future__ import annotations

import re
from typing import Optional

# Entries sit one level deeper than the title's own field lines.
ENTRY_INDENT = 4

TITLE_MARKER_RE = re.compile(r"^\s*\+ title\s*([^:]*):")

# ---- scalar field prefixes / values -----------------------------------------
MAIN_FEATURE_RE = re.compile(r"^\s+\+ Main Feature")
STREAM_RE = re.compile(r"^\s+\+ stream:(.*)$")
ANGLES_RE = re.compile(r"^\s+\+ angle\(s\)(.*)$")
DURATION_RE = re.compile(r"^\s+\+ duration:(.*)$")
SIZE_RE = re.compile(r"^\s+\+ size:(.*)$")
AUTOCROP_RE = re.compile(r"^\s+\+ autocrop:(.*)$")

GEOMETRY_VALUE_RE = re.compile(
    r"^\s*(\d+)x(\d+), pixel aspect: (\d+)/(\d+), "
    r"display aspect: (\d+(?:\.\d+)?), (\d+(?:\.\d+)?) fps"
)
AUTOCROP_VALUE_RE = re.compile(r"^\s*(\d+)/(\d+)/(\d+)/(\d+)\s*$")

# ---- sections ----------------------------------------------------------------
CHAPTERS_HEADER_RE = re.compile(r"^\s+\+ chapters:")
AUDIO_HEADER_RE = re.compile(r"^\s+\+ audio tracks:")
SUBTITLES_HEADER_RE = re.compile(r"^\s+\+ subtitle tracks:")
SECTION_HEADERS = (CHAPTERS_HEADER_RE, AUDIO_HEADER_RE, SUBTITLES_HEADER_RE)

ENTRY_RE = re.compile(r"^(?P<indent>\s*)\+\s?(?P<body>.*)$")


def is_title_marker(line: Optional[str]) -> bool:
    return line is not None and TITLE_MARKER_RE.match(line) is not None


def is_indented(line: Optional[str]) -> bool:
    """Noise and block-interior lines all start with whitespace."""
    return bool(line) and line[0].isspace()


def is_section_header(line: Optional[str]) -> bool:
    return line is not None and any(r.match(line) for r in SECTION_HEADERS)


def entry_body(line: Optional[str]) -> Optional[str]:
    """Body of a list entry line ("    + ..."), or None if it is not one."""
    if line is None:
        return None
    m = ENTRY_RE.match(line)
    if not m or len(m.group("indent").expandtabs(4)) < ENTRY_INDENT:
        return None
    return m.group("body").strip()
