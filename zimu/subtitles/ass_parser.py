"""
ASS/SSA Parser Module

Reads a section-structured subtitle document and extracts its Dialogue
events. Style and script-info content is collected but never reaches the
output; the emitter synthesizes its own styles.
"""
from typing import Iterable, List, Optional

from loguru import logger

from .errors import MalformedStructureError, SubtitleError
from .models import AssEvent, AssFile, EventFormatKey, FieldKey, parse_field_key
from .timecode import parse_ass_time, strip_bom

FORMAT_PREFIX = "Format: "
STYLE_PREFIX = "Style: "
DIALOGUE_PREFIX = "Dialogue: "
EVENTS_SECTION = "Events"
SCRIPT_INFO_SECTION = "Script Info"


class AssParser:
    """
    Tolerant parser for ASS and SSA documents.

    Usage:
        parser = AssParser()
        ass_file = parser.parse(lines)
        blocks = ass_file.blocks()

    A blank line always ends the current section; the next non-blank line
    must then be a [Section] header or it is ignored.
    """

    def parse(self, lines: Iterable[str]) -> AssFile:
        """
        Parse ASS/SSA lines.

        Args:
            lines: Text lines without terminators

        Returns:
            AssFile with events in input order

        Raises:
            MalformedStructureError: Dialogue before Format, missing
                Start/End/Text field, or no [Events] section
            MalformedTimeError: Start or End is not H:MM:SS[.f]
        """
        ass_file = AssFile()
        section: Optional[str] = None
        event_format: List[FieldKey] = []
        saw_events = False

        for line_number, raw_line in enumerate(lines, 1):
            if line_number == 1:
                raw_line = strip_bom(raw_line)
            line = raw_line.strip()

            if not line:
                section = None
                continue

            if section is None:
                if line.startswith("[") and line.endswith("]"):
                    section = line.strip("[]")
                    logger.debug(f"Entering section [{section}] at line {line_number}")
                    if section == EVENTS_SECTION:
                        saw_events = True
                continue

            if section.endswith("Styles"):
                if line.startswith(FORMAT_PREFIX):
                    ass_file.styles.append(line[len(FORMAT_PREFIX):])
                elif line.startswith(STYLE_PREFIX):
                    ass_file.styles.append(line[len(STYLE_PREFIX):])
            elif section == EVENTS_SECTION:
                if line.startswith(FORMAT_PREFIX):
                    event_format = [
                        parse_field_key(token.strip())
                        for token in line[len(FORMAT_PREFIX):].split(",")
                    ]
                elif line.startswith(DIALOGUE_PREFIX):
                    if not event_format:
                        raise MalformedStructureError(
                            "Dialogue line found before any Format line", line_number
                        )
                    try:
                        event = self._parse_dialogue(line[len(DIALOGUE_PREFIX):], event_format)
                    except SubtitleError as e:
                        raise type(e)(e.message, line_number) from e
                    ass_file.events.append(event)
            elif section == SCRIPT_INFO_SECTION:
                key, sep, value = line.partition(":")
                if sep and not line.startswith(";"):
                    ass_file.script_info[key.strip()] = value.strip()

        if not saw_events:
            raise MalformedStructureError("No [Events] section found")

        logger.info(f"Parsed {len(ass_file.events)} events from ASS")
        return ass_file

    def _parse_dialogue(self, payload: str, event_format: List[FieldKey]) -> AssEvent:
        """Split a Dialogue payload by the declared field order"""
        # The last field (normally Text) absorbs any remaining commas
        pieces = payload.split(",", len(event_format) - 1)
        fields = dict(zip(event_format, pieces))

        text = self._take(fields, EventFormatKey.TEXT)
        start = parse_ass_time(self._take(fields, EventFormatKey.START))
        end = parse_ass_time(self._take(fields, EventFormatKey.END))

        return AssEvent(
            start=start,
            end=end,
            text=text.split("\\N"),
            meta=fields,
        )

    @staticmethod
    def _take(fields: dict, key: EventFormatKey) -> str:
        if key not in fields:
            raise MalformedStructureError(f"Dialogue line has no {key.value} field")
        return fields.pop(key)


def parse_ass(lines: Iterable[str]) -> AssFile:
    """Parse ASS/SSA lines with a default AssParser"""
    return AssParser().parse(lines)
