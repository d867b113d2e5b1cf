"""
Bilingual subtitle merging

Detects the input format from the file extension, parses both inputs into
Blocks, aligns the supplementary track to the main track and formats the
pair as one ASS document.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from ..config import settings
from .ass_parser import AssParser
from .errors import (
    MalformedStructureError,
    SubtitleDecodeError,
    SubtitleError,
    SubtitleIOError,
    UnrecognizedExtensionError,
)
from .formatter import AssFormatter
from .models import Block
from .normalizer import normalize
from .srt_parser import SrtParser


class SubtitleFormat(str, Enum):
    """Supported input formats, keyed by lowercase file extension"""
    ASS = "ass"
    SSA = "ssa"
    SRT = "srt"


@dataclass
class SubtitleTrack:
    """One language's Blocks"""
    language: str
    blocks: List[Block] = field(default_factory=list)


def detect_format(path: Path) -> SubtitleFormat:
    """
    Select the parser format from the file extension.

    The comparison is case-sensitive: "movie.SRT" is rejected.
    """
    suffix = Path(path).suffix
    if not suffix:
        raise UnrecognizedExtensionError(f"No file extension: {path}")
    try:
        return SubtitleFormat(suffix[1:])
    except ValueError:
        raise UnrecognizedExtensionError(
            f"Unrecognized extension {suffix!r} (expected .ass, .ssa or .srt): {path}"
        ) from None


def decode_lines(data: bytes, encoding: Optional[str] = None) -> List[str]:
    """
    Decode input bytes into lines without terminators.

    Uniform LF or uniform CRLF input is accepted; a mix of both is rejected.
    """
    encoding = encoding or settings.INPUT_ENCODING
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise SubtitleDecodeError(f"Cannot decode input as {encoding}: {e}") from e
    except LookupError as e:
        raise SubtitleDecodeError(f"Unknown encoding {encoding!r}") from e

    crlf_count = text.count("\r\n")
    if crlf_count:
        if crlf_count != text.count("\n"):
            raise MalformedStructureError("Input mixes CRLF and LF line terminators")
        text = text.replace("\r\n", "\n")

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_subtitle(data: bytes, fmt: SubtitleFormat, encoding: Optional[str] = None) -> List[Block]:
    """
    Parse subtitle bytes of the given format into Blocks.

    ASS/SSA events keep their input order; SRT records are sorted by time.
    """
    lines = decode_lines(data, encoding)
    if fmt in (SubtitleFormat.ASS, SubtitleFormat.SSA):
        return AssParser().parse(lines).blocks()
    return SrtParser().parse(lines)


def load_subtitle(path: Path, encoding: Optional[str] = None) -> List[Block]:
    """
    Read and parse a subtitle file.

    Raises:
        UnrecognizedExtensionError: Extension is not ass, ssa or srt
        SubtitleIOError: The file could not be read or decoded
        MalformedStructureError, MalformedTimeError, MalformedIntegerError:
            The content is malformed; the message names the file
    """
    path = Path(path)
    fmt = detect_format(path)
    logger.info(f"Loading {fmt.value.upper()} subtitles: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise SubtitleIOError(f"Failed to read {path}: {e}") from e

    try:
        return parse_subtitle(data, fmt, encoding)
    except SubtitleError as e:
        raise type(e)(f"{path}: {e.message}", e.line_number) from e


def align_tracks(
    main: SubtitleTrack,
    supplementary: SubtitleTrack,
    supplementary_first: bool = False
) -> Dict[str, List[Block]]:
    """
    Align the supplementary track to the main track.

    Args:
        main: Reference track; its first Block's start anchors the timeline
        supplementary: Track shifted in place to line up with main
        supplementary_first: Put the supplementary track at position 0
            (bottom, white, layer 0) instead of the main track

    Returns:
        Ordered mapping of language tag to Blocks, ready for AssFormatter

    Raises:
        MalformedStructureError: Either track is empty or both tracks share
            a language tag
        MalformedTimeError: Shifting would move a time before 0:00:00
    """
    if main.language == supplementary.language:
        raise MalformedStructureError(
            f"Main and supplementary language tags must differ, both are {main.language!r}"
        )
    if not main.blocks:
        raise MalformedStructureError("Main subtitles have no events; no reference start time")
    if not supplementary.blocks:
        raise MalformedStructureError("Supplementary subtitles have no events")

    normalize(main.blocks[0].start, supplementary.blocks)

    ordered = [supplementary, main] if supplementary_first else [main, supplementary]
    return {track.language: track.blocks for track in ordered}


def merge_tracks(
    main: SubtitleTrack,
    supplementary: SubtitleTrack,
    supplementary_first: bool = False
) -> str:
    """Align two tracks and format them as one ASS document"""
    tracks = align_tracks(main, supplementary, supplementary_first=supplementary_first)
    return AssFormatter().format_ass(tracks)


def merge_files(
    main_path: Path,
    supplementary_path: Path,
    main_language: str,
    supplementary_language: str,
    encoding: Optional[str] = None,
    supplementary_first: bool = False
) -> str:
    """Load two subtitle files and merge them into one ASS document"""
    main = SubtitleTrack(main_language, load_subtitle(main_path, encoding))
    supplementary = SubtitleTrack(supplementary_language, load_subtitle(supplementary_path, encoding))
    return merge_tracks(main, supplementary, supplementary_first=supplementary_first)
