from titlescan.services.parsing.audio_parser import parse_audio_tracks
from titlescan.services.parsing.chapter_parser import parse_chapters
from titlescan.services.parsing.driver import parse_title_list
from titlescan.services.parsing.scan_parser import ScanOutputParser, ScanResult, parse_scan_output
from titlescan.services.parsing.subtitle_parser import parse_subtitles
from titlescan.services.parsing.title_parser import parse_title
__all__ = [
    "ScanOutputParser",
    "ScanResult",
    "parse_audio_tracks",
    "parse_chapters",
    "parse_scan_output",
    "parse_subtitles",
    "parse_title",
    "parse_title_list",
]
