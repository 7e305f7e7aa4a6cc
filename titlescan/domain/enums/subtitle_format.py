# titlescan/domain/enums/subtitle_format.py
from __future__ import annotations

from enum import StrEnum


class SubtitleFormat(StrEnum):
    VOBSUB = "vobsub"
    PGS = "pgs"
    CC608 = "cc608"
    CC708 = "cc708"
    SSA = "ssa"
    SRT = "srt"
    UTF8 = "utf8"
    TX3G = "tx3g"
    UNKNOWN = "unknown"

    @classmethod
    def from_token(cls, token: str | None) -> "SubtitleFormat":
        # scanners print e.g. "VOBSUB", "PGS", "CC608", "UTF-8"
        t = (token or "").strip().lower().replace("-", "").replace("_", "")
        if t == "cc":
            return cls.CC608
        try:
            return cls(t)
        except ValueError:
            return cls.UNKNOWN
