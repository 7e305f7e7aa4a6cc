# titlescan/domain/entities/chapter.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional


@dataclass(frozen=True)
class Chapter:
    """
    One chapter of a title. `number` is 1-based within the title. The scan
    listing carries no chapter names, so `name` stays None unless a caller
    builds chapters itself.
    """
    number: int
    duration: Optional[timedelta] = None
    name: Optional[str] = None
    cell_start: Optional[int] = None
    cell_end: Optional[int] = None
    blocks: Optional[int] = None

    def __str__(self) -> str:
        return str(self.number)
