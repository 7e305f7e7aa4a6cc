from titlescan.domain.enums.subtitle_format import SubtitleFormat
from titlescan.domain.enums.subtitle_kind import SubtitleKind
__all__ = [
    "SubtitleFormat",
    "SubtitleKind",
]
