# titlescan/services/parsing/driver.py
from __future__ import annotations

from typing import Iterable, List, Optional

from titlescan.common.iter import LineCursor, as_cursor
from titlescan.common.logging import get_logger
from titlescan.domain.dataclasses.reports import ScanParseReport
from titlescan.domain.entities.title import Title
from titlescan.domain.errors import MalformedTitleNumber, StreamAccessFailure
from titlescan.services.parsing.patterns import is_indented, is_title_marker
from titlescan.services.parsing.title_parser import parse_title

logger = get_logger(__name__)


def parse_title_list(
    source: LineCursor | str | Iterable[str],
    *,
    angle_detection: bool = True,
    report: Optional[ScanParseReport] = None,
) -> List[Title]:
    """
    Parse every title block from the cursor's position onward, in stream
    order. Indented lines between blocks (combing notices and the like) are
    skipped; the first line that is neither a title marker nor indented ends
    the listing. A stream without titles gives an empty list.

    If the line source fails and a report was passed, the titles completed
    so far are returned and `report.aborted` is set; without a report the
    StreamAccessFailure propagates.
    """
    cursor = as_cursor(source)
    titles: List[Title] = []
    try:
        while True:
            line = cursor.peek()
            if line is None:
                break
            if is_title_marker(line):
                try:
                    title = parse_title(cursor, angle_detection=angle_detection, report=report)
                except MalformedTitleNumber as e:
                    logger.warning("line %d: dropping title block: %s", cursor.line_number, e)
                    if report is not None:
                        report.dropped_blocks += 1
                        report.add_error(f"line {cursor.line_number}", str(e))
                    continue
                titles.append(title)
            elif is_indented(line):
                cursor.read()
                if report is not None:
                    report.lines_read += 1
                    report.noise_lines += 1
            else:
                break
    except StreamAccessFailure as e:
        if report is None:
            raise
        logger.exception("scan output unreadable after line %d; keeping %d title(s)", cursor.line_number, len(titles))
        report.aborted = True
        report.add_error(f"line {cursor.line_number}", str(e))

    if report is not None:
        report.titles_found += len(titles)
    return titles
