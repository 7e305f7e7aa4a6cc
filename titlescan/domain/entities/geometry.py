# titlescan/domain/entities/geometry.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Size:
    """Frame size in pixels. 0x0 means the scanner did not report one."""
    width: int = 0
    height: int = 0

    @property
    def is_known(self) -> bool:
        return self.width > 0 and self.height > 0

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class PixelAspect:
    """Pixel aspect ratio (PAR) as reported, e.g. 64/45 for anamorphic PAL."""
    num: int = 0
    den: int = 0

    @property
    def ratio(self) -> Optional[float]:
        if not self.num or not self.den:
            return None
        return self.num / self.den

    def __str__(self) -> str:
        return f"{self.num}/{self.den}"


@dataclass(frozen=True)
class Cropping:
    """
    Black-border margins in pixels, in the scanner's order: top, bottom,
    left, right. Values are kept as reported; checking them against the
    title's resolution is left to domain.policies.title_checks.
    """
    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    def __post_init__(self):
        for name in ("top", "bottom", "left", "right"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} crop must be >= 0")

    @property
    def is_zero(self) -> bool:
        return not (self.top or self.bottom or self.left or self.right)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.top, self.bottom, self.left, self.right)

    def __str__(self) -> str:
        return f"{self.top}/{self.bottom}/{self.left}/{self.right}"
