# titlescan/domain/entities/audio_track.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_LAYOUT_CH_RE = re.compile(r"^(\d+)\.(\d+)\s*ch$", re.IGNORECASE)

# Layouts older scanners print by name instead of "N.M ch".
NAMED_LAYOUTS = {
    "mono": 1,
    "stereo": 2,
    "dolby surround": 2,
    "dolby pro logic ii": 2,
}


@dataclass(frozen=True)
class AudioTrack:
    """
    One audio track as listed by the scanner, e.g.
    ``1, English (AC3) (5.1 ch) (iso639-2: eng), 48000Hz, 448000bps``.
    `description` keeps everything after the track number verbatim.
    """
    number: int
    description: str = ""
    language: str = ""
    codec: Optional[str] = None
    channel_layout: Optional[str] = None
    iso639_2: Optional[str] = None
    sample_rate: Optional[int] = None
    bitrate: Optional[int] = None

    @property
    def channel_count(self) -> Optional[int]:
        """Total channels for layouts like "5.1 ch" (6) or "Stereo" (2)."""
        if not self.channel_layout:
            return None
        layout = self.channel_layout.strip()
        m = _LAYOUT_CH_RE.match(layout)
        if m:
            return int(m.group(1)) + int(m.group(2))
        return NAMED_LAYOUTS.get(layout.lower())

    def __str__(self) -> str:
        parts = [str(self.number), self.language]
        if self.codec:
            parts.append(f"({self.codec})")
        if self.channel_layout:
            parts.append(f"({self.channel_layout})")
        return " ".join(p for p in parts if p)
