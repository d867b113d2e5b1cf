"""
SRT Parser Module

Parses numbered, blank-line separated SRT records into time-ordered Blocks.
"""
import re
from enum import Enum
from typing import Iterable, List, Optional

from loguru import logger

from .errors import MalformedIntegerError, MalformedStructureError, SubtitleError
from .models import Block, SrtCue
from .timecode import parse_srt_time, strip_bom

ARROW = "-->"

SEQUENCE_ID_PATTERN = re.compile(r'\d+', re.ASCII)


class _State(Enum):
    EXPECT_SEQUENCE_ID = "expect_sequence_id"
    EXPECT_DURATION = "expect_duration"
    EXPECT_CONTENT_OR_END = "expect_content_or_end"


class SrtParser:
    """
    Line-driven SRT parser.

    Usage:
        parser = SrtParser()
        blocks = parser.parse(lines)
        # or, keeping sequence ids and timing-line extras
        cues = parser.parse_cues(lines)
    """

    def parse(self, lines: Iterable[str]) -> List[Block]:
        """Parse SRT lines into Blocks sorted by (start, end)"""
        return [cue.to_block() for cue in self.parse_cues(lines)]

    def parse_cues(self, lines: Iterable[str]) -> List[SrtCue]:
        """
        Parse SRT lines into cues.

        Args:
            lines: Text lines without terminators

        Returns:
            SrtCue list sorted ascending by (start, end)

        Raises:
            MalformedIntegerError: Sequence id is not a non-negative integer
            MalformedStructureError: Timing line lacks start, arrow or end,
                or input ends right after a sequence id
            MalformedTimeError: Timestamp is not HH:MM:SS,mmm
        """
        cues: List[SrtCue] = []
        state = _State.EXPECT_SEQUENCE_ID
        current: Optional[SrtCue] = None
        line_number = 0

        for line_number, line in enumerate(lines, 1):
            line = strip_bom(line)

            if state is _State.EXPECT_SEQUENCE_ID:
                # Tolerate repeated separators and trailing blank lines
                if not line.strip():
                    continue
                sequence_id = self._parse_sequence_id(line, line_number)
                current = SrtCue(sequence_id=sequence_id, start=None, end=None)
                state = _State.EXPECT_DURATION

            elif state is _State.EXPECT_DURATION:
                try:
                    self._parse_timing(line, current)
                except SubtitleError as e:
                    raise type(e)(e.message, line_number) from e
                state = _State.EXPECT_CONTENT_OR_END

            else:
                if not line.strip():
                    cues.append(current)
                    current = None
                    state = _State.EXPECT_SEQUENCE_ID
                    continue
                current.content.append(line)

        if state is _State.EXPECT_DURATION:
            raise MalformedStructureError(
                f"Input ends before timing line of record {current.sequence_id}",
                line_number,
            )
        if state is _State.EXPECT_CONTENT_OR_END:
            # Last record without a closing blank line
            logger.debug(f"Flushing unterminated record {current.sequence_id}")
            cues.append(current)

        cues.sort(key=lambda cue: cue.sort_key)
        logger.info(f"Parsed {len(cues)} segments from SRT")
        return cues

    @staticmethod
    def _parse_sequence_id(line: str, line_number: int) -> int:
        text = line.strip()
        if not SEQUENCE_ID_PATTERN.fullmatch(text):
            raise MalformedIntegerError(f"Invalid sequence id: {line!r}", line_number)
        return int(text)

    @staticmethod
    def _parse_timing(line: str, cue: SrtCue) -> None:
        """Parse '<start> --> <end> [extra...]' into cue"""
        chunks = line.split()
        if not chunks:
            raise MalformedStructureError("Missing start time")
        cue.start = parse_srt_time(chunks[0])

        if len(chunks) < 2:
            raise MalformedStructureError("Missing arrow")
        if chunks[1] != ARROW:
            raise MalformedStructureError(f"Expected {ARROW!r}, got {chunks[1]!r}")

        if len(chunks) < 3:
            raise MalformedStructureError("Missing end time")
        cue.end = parse_srt_time(chunks[2])
        cue.extra = chunks[3:]


def parse_srt(lines: Iterable[str]) -> List[Block]:
    """Parse SRT lines with a default SrtParser"""
    return SrtParser().parse(lines)
