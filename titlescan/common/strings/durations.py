from __future__ import annotations

import re
from datetime import timedelta

_HMS_RE = re.compile(r"^(\d{2,}):([0-5]\d):([0-5]\d)$")


def parse_hms(text: str | None) -> timedelta:
    """Parse an ``HH:MM:SS`` value into a timedelta. Raises ValueError otherwise."""
    if text is None:
        raise ValueError("no time value")
    m = _HMS_RE.match(text.strip())
    if not m:
        raise ValueError(f"not an HH:MM:SS value: {text!r}")
    h, mi, s = (int(g) for g in m.groups())
    return timedelta(hours=h, minutes=mi, seconds=s)


def format_hms(value: timedelta | None) -> str:
    if not value:
        return "00:00:00"
    total = int(value.total_seconds())
    h = total // 3600
    m = (total % 3600) // 60
    s = total % 60
    return f"{h:02d}:{m:02d}:{s:02d}"
