from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from titlescan.domain.enums.subtitle_format import SubtitleFormat
from titlescan.domain.enums.subtitle_kind import SubtitleKind


@dataclass(frozen=True)
class Subtitle:
    number: int
    language: str = ""
    iso639_2: Optional[str] = None
    kind: SubtitleKind = SubtitleKind.unknown
    format: SubtitleFormat = SubtitleFormat.UNKNOWN

    def __str__(self) -> str:
        return f"{self.number} {self.language}".rstrip()
