# titlescan/domain/entities/__init__.py

from titlescan.domain.entities.audio_track import AudioTrack
from titlescan.domain.entities.chapter import Chapter
from titlescan.domain.entities.geometry import (
    Cropping,
    PixelAspect,
    Size,
)
from titlescan.domain.entities.subtitle import Subtitle
from titlescan.domain.entities.title import Title

__all__ = [
    "AudioTrack",
    "Chapter",
    "Cropping",
    "PixelAspect",
    "Size",
    "Subtitle",
    "Title",
]
