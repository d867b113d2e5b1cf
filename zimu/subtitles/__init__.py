"""
Subtitle Processing Module

Provides:
- ASS/SSA and SRT parsing into a uniform Block model
- Timeline normalization of a supplementary track
- Bilingual ASS output with per-language styles
"""
from .models import Block, AssEvent, AssFile, SrtCue, EventFormatKey, UnknownFieldKey, parse_field_key
from .errors import (
    SubtitleError,
    UnrecognizedExtensionError,
    SubtitleIOError,
    SubtitleDecodeError,
    MalformedStructureError,
    MalformedTimeError,
    MalformedIntegerError,
)
from .ass_parser import AssParser, parse_ass
from .srt_parser import SrtParser, parse_srt
from .normalizer import normalize
from .formatter import AssFormatter, TrackStyle, write_ass
from .merger import (
    SubtitleFormat,
    SubtitleTrack,
    detect_format,
    decode_lines,
    parse_subtitle,
    load_subtitle,
    align_tracks,
    merge_tracks,
    merge_files,
)

__all__ = [
    "Block",
    "AssEvent",
    "AssFile",
    "SrtCue",
    "EventFormatKey",
    "UnknownFieldKey",
    "parse_field_key",
    "SubtitleError",
    "UnrecognizedExtensionError",
    "SubtitleIOError",
    "SubtitleDecodeError",
    "MalformedStructureError",
    "MalformedTimeError",
    "MalformedIntegerError",
    "AssParser",
    "parse_ass",
    "SrtParser",
    "parse_srt",
    "normalize",
    "AssFormatter",
    "TrackStyle",
    "write_ass",
    "SubtitleFormat",
    "SubtitleTrack",
    "detect_format",
    "decode_lines",
    "parse_subtitle",
    "load_subtitle",
    "align_tracks",
    "merge_tracks",
    "merge_files",
]
