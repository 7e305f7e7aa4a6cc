import pytest

from titlescan.domain.errors import StreamAccessFailure
from titlescan.services.parsing import ScanOutputParser, ScanResult, parse_scan_output


def test_skips_preamble_and_reports(dvd_scan):
    result = ScanOutputParser().parse(dvd_scan)

    assert isinstance(result, ScanResult)
    assert len(result) == 2
    assert result.main_title is not None and result.main_title.number == 1
    assert result.title(2).duration.total_seconds() == 70
    assert result.title(99) is None

    report = result.report
    assert report.titles_found == 2
    assert report.aborted is False
    assert report.malformed_fields == 0
    # two log lines, the vts line and the combing notice
    assert report.noise_lines == 4
    assert report.started_at is not None and report.finished_at is not None


def test_without_preamble_skip_log_lines_end_the_listing(dvd_scan):
    result = ScanOutputParser(skip_preamble=False).parse(dvd_scan)
    assert result.titles == ()


def test_options_fall_back_to_settings(monkeypatch):
    monkeypatch.setenv("PARSER__ANGLE_DETECTION", "false")
    monkeypatch.setenv("PARSER__CHECK_TITLES", "0")
    p = ScanOutputParser()
    assert p.angle_detection is False
    assert p.check_titles is False
    assert p.skip_preamble is True

    assert ScanOutputParser(angle_detection=True).angle_detection is True


def test_title_checks_flag_crop_overflow(caplog):
    text = "\n".join([
        "+ title 1:",
        "  + size: 720x576, pixel aspect: 1/1, display aspect: 1.33, 25.000 fps",
        "  + autocrop: 400/400/0/0",
    ])
    with caplog.at_level("WARNING"):
        result = parse_scan_output(text)

    assert result.titles[0].autocrop.top == 400
    assert result.report.issues and result.report.issues[0][0] == 1
    assert "exceeds height" in caplog.text

    quiet = parse_scan_output(text, check_titles=False)
    assert quiet.report.issues == []


def test_accepts_line_iterables(file_scan):
    result = parse_scan_output(iter(file_scan.splitlines(keepends=True)))
    assert [t.source_name for t in result.titles] == ["movie.mkv"]


def _broken():
    yield "[00:00:01] scan: starting"
    raise OSError("read error")


def test_stream_failure_reported_or_raised_when_strict():
    result = ScanOutputParser().parse(_broken())
    assert result.titles == ()
    assert result.report.aborted is True
    assert result.report.ok is False

    with pytest.raises(StreamAccessFailure):
        ScanOutputParser().parse(_broken(), strict=True)


def test_report_as_dict(file_scan):
    d = parse_scan_output(file_scan).report.as_dict()
    assert d["titles_found"] == 1
    assert d["aborted"] is False


def test_indented_title_marker_ends_preamble():
    text = "[00:00:01] scan: 1 title\n  + title 1:\n  + duration: 00:10:00\n"
    result = parse_scan_output(text)
    assert [t.number for t in result.titles] == [1]
    assert result.titles[0].duration.total_seconds() == 600
    assert result.report.noise_lines == 1
