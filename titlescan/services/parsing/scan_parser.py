# titlescan/services/parsing/scan_parser.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from titlescan.common.iter import LineCursor, as_cursor
from titlescan.common.logging import get_logger
from titlescan.common.settings import get_settings
from titlescan.domain.dataclasses.reports import ScanParseReport
from titlescan.domain.entities.title import Title
from titlescan.domain.errors import StreamAccessFailure
from titlescan.domain.policies.title_checks import check_titles
from titlescan.services.parsing.driver import parse_title_list
from titlescan.services.parsing.patterns import is_title_marker

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScanResult:
    titles: Tuple[Title, ...] = ()
    report: ScanParseReport = field(default_factory=ScanParseReport)

    @property
    def main_title(self) -> Optional[Title]:
        return next((t for t in self.titles if t.main_title), None)

    def title(self, number: int) -> Optional[Title]:
        return next((t for t in self.titles if t.number == number), None)

    def __len__(self) -> int:
        return len(self.titles)


class ScanOutputParser:
    """
    Turns a scanner's text output into a ScanResult. Options default to the
    `parser` section of the settings; explicit arguments win.
    """

    def __init__(
        self,
        angle_detection: Optional[bool] = None,
        skip_preamble: Optional[bool] = None,
        check_titles: Optional[bool] = None,
    ):
        cfg = get_settings().parser
        self.angle_detection = cfg.angle_detection if angle_detection is None else angle_detection
        self.skip_preamble = cfg.skip_preamble if skip_preamble is None else skip_preamble
        self.check_titles = cfg.check_titles if check_titles is None else check_titles

    def parse(self, source: LineCursor | str | Iterable[str], *, strict: bool = False) -> ScanResult:
        """
        Parse `source` (text, iterable of lines, or a cursor). With `strict`
        a failing line source raises StreamAccessFailure instead of being
        reported on `result.report`.
        """
        cursor = as_cursor(source)
        report = ScanParseReport()
        report.start()

        titles: list[Title] = []
        try:
            if self.skip_preamble:
                self._skip_preamble(cursor, report)
        except StreamAccessFailure as e:
            logger.exception("scan output unreadable before the title listing")
            report.aborted = True
            report.add_error(f"line {cursor.line_number}", str(e))
        else:
            titles = parse_title_list(cursor, angle_detection=self.angle_detection, report=report)

        if self.check_titles:
            for issue in check_titles(titles):
                logger.warning("title %d: %s", issue.title_number, issue.message)
                report.issues.append((issue.title_number, issue.message))

        report.stop()
        if strict and report.aborted:
            raise StreamAccessFailure(report.error_details[-1][1])
        return ScanResult(titles=tuple(titles), report=report)

    @staticmethod
    def _skip_preamble(cursor: LineCursor, report: ScanParseReport) -> None:
        # the scanner logs its progress before listing titles; the listing
        # starts at the first title marker or line beginning with "+"
        while True:
            line = cursor.peek()
            if line is None or line.startswith("+") or is_title_marker(line):
                return
            cursor.read()
            report.lines_read += 1
            report.noise_lines += 1


def parse_scan_output(source: LineCursor | str | Iterable[str], **kwargs) -> ScanResult:
    """Shortcut for ScanOutputParser(**kwargs).parse(source)."""
    return ScanOutputParser(**kwargs).parse(source)
