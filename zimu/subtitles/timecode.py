"""
Timestamp parsing and formatting

Times are timedelta offsets from 0:00:00. Hours of 24 or more are carried
through as-is; nothing here wraps at midnight.
"""
import re
from datetime import timedelta

from .errors import MalformedTimeError

BOM = "\ufeff"

# ASS timestamp: H:MM:SS with an optional fraction of any precision
ASS_TIME_PATTERN = re.compile(r'^(\d{1,2}):(\d{2}):(\d{2})(?:\.(\d*))?$', re.ASCII)

# SRT timestamp: H:MM:SS,mmm (exactly three fractional digits)
SRT_TIME_PATTERN = re.compile(r'^(\d{1,2}):(\d{2}):(\d{2}),(\d{3})$', re.ASCII)


def strip_bom(line: str) -> str:
    """Remove a single leading byte-order mark"""
    if line.startswith(BOM):
        return line[1:]
    return line


def _to_timedelta(time_str: str, hours: str, minutes: str, seconds: str, fraction: str) -> timedelta:
    minutes_value = int(minutes)
    seconds_value = int(seconds)
    if minutes_value >= 60 or seconds_value >= 60:
        raise MalformedTimeError(f"Time component out of range: {time_str!r}")

    # Digits past microseconds are truncated
    microseconds = int(fraction[:6].ljust(6, '0')) if fraction else 0

    return timedelta(
        hours=int(hours),
        minutes=minutes_value,
        seconds=seconds_value,
        microseconds=microseconds,
    )


def parse_ass_time(time_str: str) -> timedelta:
    """Parse ASS timestamp (0:01:23.45) to timedelta"""
    match = ASS_TIME_PATTERN.fullmatch(time_str)
    if not match:
        raise MalformedTimeError(f"Invalid ASS timestamp: {time_str!r}")
    return _to_timedelta(time_str, *match.groups(default=""))


def parse_srt_time(time_str: str) -> timedelta:
    """Parse SRT timestamp (00:01:23,456) to timedelta"""
    match = SRT_TIME_PATTERN.fullmatch(time_str)
    if not match:
        raise MalformedTimeError(f"Invalid SRT timestamp: {time_str!r}")
    return _to_timedelta(time_str, *match.groups())


def format_ass_time(value: timedelta) -> str:
    """
    Format timedelta to ASS timestamp (H:MM:SS.CC).

    Hours have no leading zero. Hundredths are truncated, not rounded:
    1.237s renders as 0:00:01.23.
    """
    if value < timedelta(0):
        raise MalformedTimeError(f"Cannot format negative time: {value}")

    total_microseconds = value // timedelta(microseconds=1)
    total_seconds, microseconds = divmod(total_microseconds, 1_000_000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    centiseconds = microseconds // 10_000
    return f"{hours}:{minutes:02d}:{seconds:02d}.{centiseconds:02d}"
