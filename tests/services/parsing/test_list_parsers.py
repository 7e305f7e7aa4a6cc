from datetime import timedelta

from titlescan.common.iter import LineCursor
from titlescan.domain.dataclasses.reports import ScanParseReport
from titlescan.domain.enums import SubtitleFormat, SubtitleKind
from titlescan.services.parsing.audio_parser import parse_audio_entry, parse_audio_tracks
from titlescan.services.parsing.chapter_parser import parse_chapter_entry, parse_chapters
from titlescan.services.parsing.subtitle_parser import parse_subtitle_entry, parse_subtitles


# -------------------------
# chapters
# -------------------------

def test_chapters_in_order_and_stop_at_next_section():
    cursor = LineCursor([
        "  + chapters:",
        "    + 1: cells 0->0, 62136 blocks, duration 00:02:34",
        "    + 2: cells 1->3, 100 blocks, duration 00:10:00",
        "  + audio tracks:",
    ])
    report = ScanParseReport()
    chapters = parse_chapters(cursor, report)

    assert [c.number for c in chapters] == [1, 2]
    assert chapters[0].duration == timedelta(minutes=2, seconds=34)
    assert (chapters[1].cell_start, chapters[1].cell_end, chapters[1].blocks) == (1, 3, 100)
    assert chapters[0].name is None
    # the next header is left for the audio parser
    assert cursor.peek() == "  + audio tracks:"
    assert report.lines_read == 3


def test_chapters_without_header_consume_nothing():
    cursor = LineCursor(["  + audio tracks:"])
    assert parse_chapters(cursor) == ()
    assert cursor.line_number == 0


def test_chapter_entry_best_effort():
    c = parse_chapter_entry("duration 00:01:00", position=4)
    assert c.number == 4
    assert c.duration == timedelta(minutes=1)

    c = parse_chapter_entry("x: garbage", position=2)
    assert c.number == 2
    assert c.duration is None and c.blocks is None


def test_chapter_entry_bad_duration_keeps_entry():
    c = parse_chapter_entry("5: cells 0->0, 1 blocks, duration 0:1", position=1)
    assert c.number == 5
    assert c.duration is None
    assert c.blocks == 1


# -------------------------
# audio
# -------------------------

def test_audio_entry_full_line():
    t = parse_audio_entry("1, English (AC3) (5.1 ch) (iso639-2: eng), 48000Hz, 448000bps", position=1)
    assert t.number == 1
    assert t.language == "English"
    assert t.codec == "AC3"
    assert t.channel_layout == "5.1 ch"
    assert t.channel_count == 6
    assert t.iso639_2 == "eng"
    assert t.sample_rate == 48000
    assert t.bitrate == 448000
    assert t.description.startswith("English (AC3)")


def test_audio_entry_without_rates_or_index():
    t = parse_audio_entry("English (AAC) (2.0 ch) (iso639-2: eng)", position=3)
    assert t.number == 3
    assert t.codec == "AAC"
    assert t.sample_rate is None and t.bitrate is None


def test_audio_entry_named_layout():
    t = parse_audio_entry("2, Deutsch (AC3) (Dolby Surround) (iso639-2: deu)", position=2)
    assert t.channel_layout == "Dolby Surround"
    assert t.codec == "AC3"


def test_audio_entry_undecomposable_still_kept():
    t = parse_audio_entry("?", position=5)
    assert t.number == 5
    assert t.codec is None and t.language == "?"


def test_audio_tracks_list():
    cursor = LineCursor([
        "  + audio tracks:",
        "    + 1, English (AC3) (5.1 ch) (iso639-2: eng), 48000Hz, 448000bps",
        "    + 2, Francais (DTS) (5.1 ch) (iso639-2: fra), 48000Hz, 768000bps",
        "  + subtitle tracks:",
    ])
    tracks = parse_audio_tracks(cursor)
    assert [(t.number, t.iso639_2, t.codec) for t in tracks] == [(1, "eng", "AC3"), (2, "fra", "DTS")]
    assert cursor.peek() == "  + subtitle tracks:"


# -------------------------
# subtitles
# -------------------------

def test_subtitle_entry_bitmap():
    s = parse_subtitle_entry("1, English (iso639-2: eng) (Bitmap)(VOBSUB)", position=1)
    assert s.number == 1
    assert s.language == "English"
    assert s.iso639_2 == "eng"
    assert s.kind is SubtitleKind.picture
    assert s.format is SubtitleFormat.VOBSUB


def test_subtitle_entry_legacy_without_format():
    s = parse_subtitle_entry("3, Espanol (iso639-2: spa) (Text)", position=3)
    assert s.kind is SubtitleKind.text
    assert s.format is SubtitleFormat.UNKNOWN


def test_subtitles_empty_section_and_next_title():
    cursor = LineCursor(["  + subtitle tracks:", "+ title 2:"])
    assert parse_subtitles(cursor) == ()
    assert cursor.peek() == "+ title 2:"


def test_subtitles_preserve_order_and_malformed_index():
    cursor = LineCursor([
        "  + subtitle tracks:",
        "    + 1, English (iso639-2: eng) (Bitmap)(PGS)",
        "    + ?, Unknown (iso639-2: und) (Bitmap)(PGS)",
        "    + 3, Francais (iso639-2: fra) (Text)(UTF-8)",
    ])
    subs = parse_subtitles(cursor)
    assert [s.number for s in subs] == [1, 2, 3]
    assert [s.iso639_2 for s in subs] == ["eng", "und", "fra"]
    assert subs[2].format is SubtitleFormat.UTF8
    assert cursor.at_end
