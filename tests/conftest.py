# tests/conftest.py
from __future__ import annotations

import pytest

from titlescan.common import settings as settings_mod

DVD_SCAN = """\
[12:00:01] hb_init: starting libhb thread
[12:00:01] scan: DVD has 2 title(s)
+ title 1:
  + Main Feature
  + vts 1, ttn 1, cells 0->9 (2345 blocks)
  + angle(s) 1
  + duration: 01:30:00
  + size: 720x576, pixel aspect: 64/45, display aspect: 1.78, 25.000 fps
  + autocrop: 72/74/0/0
  + chapters:
    + 1: cells 0->0, 62136 blocks, duration 00:02:34
    + 2: cells 1->1, 80000 blocks, duration 00:10:02
    + 3: cells 2->9, 90000 blocks, duration 01:17:24
  + audio tracks:
    + 1, English (AC3) (5.1 ch) (iso639-2: eng), 48000Hz, 448000bps
    + 2, Francais (AC3) (2.0 ch) (iso639-2: fra), 48000Hz, 192000bps
  + subtitle tracks:
    + 1, English (iso639-2: eng) (Bitmap)(VOBSUB)
    + 2, Closed Captions (iso639-2: eng) (Text)(CC)
  + combing detected, may be interlaced or telecined
+ title 2:
  + angle(s) 1
  + duration: 00:01:10
  + size: 720x576, pixel aspect: 16/15, display aspect: 1.33, 25.000 fps
  + autocrop: 0/0/0/0
  + chapters:
    + 1: cells 0->0, 1200 blocks, duration 00:01:10
  + audio tracks:
    + 1, English (AC3) (2.0 ch) (iso639-2: eng), 48000Hz, 192000bps
  + subtitle tracks:
HandBrake has exited.
"""

FILE_SCAN = """\
+ title 1:
  + stream: movie.mkv
  + duration: 01:30:00
  + size: 1920x1080, pixel aspect: 1/1, display aspect: 1.78, 23.976 fps
  + autocrop: 0/0/10/10
  + chapters:
  + audio tracks:
  + subtitle tracks:
"""


@pytest.fixture(autouse=True)
def _fresh_settings():
    # settings are lru_cached; every test sees its own environment
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def dvd_scan() -> str:
    return DVD_SCAN


@pytest.fixture()
def file_scan() -> str:
    return FILE_SCAN
