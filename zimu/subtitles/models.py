"""
Subtitle data models

Block is the uniform record handed from the parsers to the emitter.
AssFile/AssEvent and SrtCue are the richer per-format parse products.
"""
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Dict, List, Tuple, Union


@dataclass
class Block:
    """A single subtitle entry with timing and displayed lines"""
    start: timedelta  # Offset from 0:00:00
    end: timedelta
    content: List[str] = field(default_factory=list)  # One string per displayed line

    @property
    def duration(self) -> timedelta:
        """Get display duration (may be negative for malformed input)"""
        return self.end - self.start


class EventFormatKey(Enum):
    """Known field names of an [Events] Format line"""
    LAYER = "Layer"
    START = "Start"
    END = "End"
    STYLE = "Style"
    NAME = "Name"
    MARGIN_L = "MarginL"
    MARGIN_R = "MarginR"
    MARGIN_V = "MarginV"
    EFFECT = "Effect"
    TEXT = "Text"


@dataclass(frozen=True)
class UnknownFieldKey:
    """A Format field name outside EventFormatKey, spelled as in the input"""
    name: str


FieldKey = Union[EventFormatKey, UnknownFieldKey]

_KNOWN_KEYS = {key.value: key for key in EventFormatKey}


def parse_field_key(token: str) -> FieldKey:
    """Map a Format token to its key; unrecognized tokens never fail"""
    return _KNOWN_KEYS.get(token) or UnknownFieldKey(token)


@dataclass
class AssEvent:
    """A Dialogue line of an [Events] section"""
    start: timedelta
    end: timedelta
    text: List[str]
    # Fields other than Start/End/Text, in declaration order
    meta: Dict[FieldKey, str] = field(default_factory=dict)

    def to_block(self) -> Block:
        return Block(start=self.start, end=self.end, content=list(self.text))


@dataclass
class AssFile:
    """Parse product of an ASS/SSA document"""
    script_info: Dict[str, str] = field(default_factory=dict)
    styles: List[str] = field(default_factory=list)  # Raw Format/Style payloads
    events: List[AssEvent] = field(default_factory=list)

    def blocks(self) -> List[Block]:
        """Events as Blocks, in input order"""
        return [event.to_block() for event in self.events]


@dataclass
class SrtCue:
    """A numbered record of an SRT document"""
    sequence_id: int
    start: timedelta
    end: timedelta
    content: List[str] = field(default_factory=list)
    extra: List[str] = field(default_factory=list)  # Tokens after the end time

    @property
    def sort_key(self) -> Tuple[timedelta, timedelta]:
        return (self.start, self.end)

    def to_block(self) -> Block:
        return Block(start=self.start, end=self.end, content=list(self.content))
