from datetime import timedelta

import pytest

from zimu.subtitles.errors import MalformedTimeError
from zimu.subtitles.timecode import format_ass_time, parse_ass_time, parse_srt_time, strip_bom


@pytest.mark.parametrize("text, expected", [
    ("0:00:01.23", timedelta(seconds=1, milliseconds=230)),
    ("0:00:01.5", timedelta(seconds=1, milliseconds=500)),
    ("1:02:03", timedelta(hours=1, minutes=2, seconds=3)),
    ("01:02:03.00", timedelta(hours=1, minutes=2, seconds=3)),
    ("0:00:01.123456789", timedelta(seconds=1, microseconds=123456)),
    ("25:00:00.00", timedelta(hours=25)),
])
def test_parse_ass_time(text, expected):
    assert parse_ass_time(text) == expected


@pytest.mark.parametrize("text", [
    "",
    "abc",
    "0:0:01.00",
    "0:00:01,00",
    "100:00:01.00",
    "0:60:00.00",
    "0:00:60.00",
    " 0:00:01.00",
])
def test_parse_ass_time_rejects_malformed(text):
    with pytest.raises(MalformedTimeError):
        parse_ass_time(text)


def test_parse_srt_time():
    assert parse_srt_time("00:00:02,500") == timedelta(seconds=2, milliseconds=500)
    assert parse_srt_time("1:30:00,001") == timedelta(hours=1, minutes=30, milliseconds=1)


@pytest.mark.parametrize("text", [
    "00:00:02.500",
    "00:00:02,50",
    "00:00:02,5000",
    "00:00:02",
    "-->",
])
def test_parse_srt_time_rejects_malformed(text):
    with pytest.raises(MalformedTimeError):
        parse_srt_time(text)


def test_format_ass_time_truncates_hundredths():
    assert format_ass_time(timedelta(seconds=1, milliseconds=237)) == "0:00:01.23"
    assert format_ass_time(timedelta(hours=1, minutes=2, seconds=3, milliseconds=999)) == "1:02:03.99"


def test_format_ass_time_has_no_hour_padding():
    assert format_ass_time(timedelta(0)) == "0:00:00.00"
    assert format_ass_time(timedelta(hours=9, minutes=5, seconds=7)) == "9:05:07.00"


def test_format_ass_time_carries_hours_past_midnight():
    assert format_ass_time(timedelta(hours=25, minutes=1)) == "25:01:00.00"


def test_format_ass_time_rejects_negative():
    with pytest.raises(MalformedTimeError):
        format_ass_time(timedelta(seconds=-1))


def test_strip_bom_removes_single_leading_mark():
    assert strip_bom("\ufeff1") == "1"
    assert strip_bom("\ufeff\ufeff1") == "\ufeff1"
    assert strip_bom("1\ufeff") == "1\ufeff"
