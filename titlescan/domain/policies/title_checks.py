# titlescan/domain/policies/title_checks.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from titlescan.domain.entities.title import Title


@dataclass(frozen=True)
class TitleIssue:
    title_number: int
    code: str      # "crop_overflow" | "duplicate_number" | "missing_geometry"
    message: str


def check_title(title: Title) -> List[TitleIssue]:
    """
    Flag values the parser accepted but that cannot be right. Purely
    advisory: titles are never changed or dropped here.
    """
    issues: List[TitleIssue] = []
    res = title.resolution
    crop = title.autocrop

    if not res.is_known:
        issues.append(TitleIssue(title.number, "missing_geometry", "no frame size reported"))
        return issues

    if crop.top + crop.bottom > res.height:
        issues.append(TitleIssue(
            title.number,
            "crop_overflow",
            f"vertical crop {crop.top}+{crop.bottom} exceeds height {res.height}",
        ))
    if crop.left + crop.right > res.width:
        issues.append(TitleIssue(
            title.number,
            "crop_overflow",
            f"horizontal crop {crop.left}+{crop.right} exceeds width {res.width}",
        ))
    return issues


def check_titles(titles: Iterable[Title]) -> List[TitleIssue]:
    issues: List[TitleIssue] = []
    seen: set[int] = set()
    for t in titles:
        if t.number in seen:
            issues.append(TitleIssue(t.number, "duplicate_number", f"title {t.number} listed more than once"))
        seen.add(t.number)
        issues.extend(check_title(t))
    return issues
