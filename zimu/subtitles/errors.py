"""
Subtitle error types

Every failure in the parse/normalize/emit pipeline is raised as a
SubtitleError subclass and surfaced to the caller unrecovered.
"""
from typing import Optional


class SubtitleError(Exception):
    """Base class for subtitle processing failures"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class UnrecognizedExtensionError(SubtitleError):
    """File extension is missing or not one of ass, ssa, srt"""


class SubtitleIOError(SubtitleError):
    """Reading or writing a subtitle file failed"""


class SubtitleDecodeError(SubtitleIOError):
    """Input bytes could not be decoded with the configured encoding"""


class MalformedStructureError(SubtitleError):
    """An expected line, section or field is missing or out of place"""


class MalformedTimeError(SubtitleError):
    """A timestamp does not match the expected pattern"""


class MalformedIntegerError(SubtitleError):
    """A sequence identifier is not a non-negative integer"""
