# titlescan/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Base report (shared fields + utilities)
# ---------------------------------------------------------------------------
@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - error capture: error_details
    - helpers: start(), stop(), add_error(), as_dict()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    # Each tuple is (subject, message); subject is usually "line N"
    error_details: List[Tuple[str, str]] = field(default_factory=list)

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def add_error(self, subject: str, message: str) -> None:
        self.error_details.append((subject, message))

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Scan output parse report
# ---------------------------------------------------------------------------
@dataclass
class ScanParseReport(BaseReport):
    lines_read: int = 0
    noise_lines: int = 0
    titles_found: int = 0
    malformed_fields: int = 0
    dropped_blocks: int = 0     # title markers whose number could not be read
    aborted: bool = False       # the line source failed mid-parse
    # (title number, message) pairs from domain.policies.title_checks
    issues: List[Tuple[int, str]] = field(default_factory=list)

    def add_malformed(self, subject: str, message: str) -> None:
        self.malformed_fields += 1
        self.add_error(subject, message)

    @property
    def ok(self) -> bool:
        return not self.aborted and not self.error_details
