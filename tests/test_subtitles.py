from datetime import timedelta

import pytest

from youvideo.subtitles import CC, get_close_caption, parse_srt

SRT = """1
00:00:01,500 --> 00:00:03,000
Hello there
second line

2
00:01:00,000 --> 00:01:02,250
<i>General</i> Kenobi
"""

VTT = """WEBVTT

intro
00:00:01.500 --> 00:00:03.000 align:start
Hello there

00:01:00.000 --> 00:01:02.250
<i>General</i> Kenobi
"""

ASS = """[Script Info]
Title: sample

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.50,0:00:03.00,Default,,0,0,0,,{\\i1}Hello there\\Nsecond line
Dialogue: 0,0:01:00.00,0:01:02.25,Default,,0,0,0,,General, Kenobi
"""


def test_parse_srt_first_caption():
    first = parse_srt(SRT)[0]
    assert first == CC(
        index=1,
        start_time=timedelta(seconds=1, milliseconds=500),
        end_time=timedelta(seconds=3),
        text="Hello there",
    )


def test_parse_srt_order_and_markup():
    captions = parse_srt(SRT)
    assert [c.index for c in captions] == [1, 2]
    assert captions[1].text == "General"
    assert all(c.start_time < c.end_time for c in captions)
    assert captions[0].end_time < captions[1].start_time


def test_parse_srt_handles_crlf_and_bom():
    assert parse_srt("\ufeff" + SRT.replace("\n", "\r\n")) == parse_srt(SRT)


def test_parse_srt_empty():
    assert parse_srt("") == []


def test_parse_srt_bad_timestamp():
    with pytest.raises(ValueError):
        parse_srt("1\nxx:00:01,000 --> 00:00:02,000\nHi\n")


def test_parse_srt_caption_without_text():
    with pytest.raises(ValueError):
        parse_srt("1\n00:00:01,000 --> 00:00:02,000\n")


def test_get_close_caption_srt_file(tmp_path):
    path = tmp_path / "movie.srt"
    path.write_text(SRT, encoding="utf-8")
    assert get_close_caption(path) == parse_srt(SRT)


def test_vtt_matches_srt(tmp_path):
    path = tmp_path / "movie.vtt"
    path.write_text(VTT, encoding="utf-8")
    captions = get_close_caption(path)
    expected = parse_srt(SRT)
    assert [(c.start_time, c.end_time, c.text) for c in captions] == [
        (c.start_time, c.end_time, c.text) for c in expected
    ]
    assert [c.index for c in captions] == [1, 2]


def test_ass_matches_srt_times(tmp_path):
    path = tmp_path / "movie.ASS"
    path.write_text(ASS, encoding="utf-8")
    captions = get_close_caption(path)
    expected = parse_srt(SRT)
    assert [(c.start_time, c.end_time) for c in captions] == [
        (c.start_time, c.end_time) for c in expected
    ]
    assert [c.text for c in captions] == ["Hello there", "General, Kenobi"]


def test_unsupported_extension(tmp_path):
    path = tmp_path / "movie.txt"
    path.write_text(SRT, encoding="utf-8")
    with pytest.raises(ValueError):
        get_close_caption(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_close_caption(tmp_path / "absent.srt")