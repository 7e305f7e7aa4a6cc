from __future__ import annotations
from enum import StrEnum

class SubtitleKind(StrEnum):
    picture = "picture"
    text = "text"
    unknown = "unknown"

    @classmethod
    def from_token(cls, token: str | None) -> "SubtitleKind":
        t = (token or "").strip().lower()
        if t == "bitmap":
            return cls.picture
        if t == "text":
            return cls.text
        return cls.unknown
