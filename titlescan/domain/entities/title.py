# titlescan/domain/entities/title.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Tuple

from titlescan.common.strings.durations import format_hms
from titlescan.domain.entities.audio_track import AudioTrack
from titlescan.domain.entities.chapter import Chapter
from titlescan.domain.entities.geometry import Cropping, PixelAspect, Size
from titlescan.domain.entities.subtitle import Subtitle


@dataclass(frozen=True)
class Title:
    """
    One playable unit of a scanned source (a DVD/Blu-ray title or a file's
    main stream). Immutable snapshot: the parser builds it once, with every
    field it could recover; anything it could not read stays at the default.
    """
    number: int
    source_name: Optional[str] = None
    main_title: bool = False
    angle_count: int = 0
    duration: timedelta = field(default_factory=timedelta)
    resolution: Size = field(default_factory=Size)
    par: PixelAspect = field(default_factory=PixelAspect)
    aspect_ratio: float = 0.0  # display aspect, e.g. 1.78
    fps: float = 0.0
    autocrop: Cropping = field(default_factory=Cropping)

    chapters: Tuple[Chapter, ...] = ()
    audio_tracks: Tuple[AudioTrack, ...] = ()
    subtitles: Tuple[Subtitle, ...] = ()

    def __str__(self) -> str:
        return f"{self.number} ({format_hms(self.duration)})"
