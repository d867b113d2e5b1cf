"""
Subtitle Formatter Module

Formats per-language Block tracks into a single ASS document.
Each language gets its own synthesized style and layer so the tracks
stack for bilingual display.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Sequence

from loguru import logger

from .errors import SubtitleIOError
from .models import Block
from .timecode import format_ass_time

SCRIPT_INFO_HEADER = [
    "[Script Info]",
    "ScriptType: v4.00+",
]

STYLE_FORMAT = (
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, "
    "BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, "
    "BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding"
)

EVENT_FORMAT = "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"

CJK_LANGUAGE = "zh"
CJK_FONT = "Microsoft YaHei"
DEFAULT_FONT = "Arial"

FONT_SIZE = 18
BASE_MARGIN_V = 12  # Bottom margin of the first track
TRACK_GAP = 4       # Extra spacing between stacked tracks

FIRST_TRACK_COLOR = "#FFFFFF"  # White
OTHER_TRACK_COLOR = "#FFFF00"  # Yellow


@dataclass
class TrackStyle:
    """ASS style for one language track"""
    name: str
    font_name: str = DEFAULT_FONT
    font_size: int = FONT_SIZE
    primary_color: str = "&H00FFFFFF"  # ASS format: &HAABBGGRR
    secondary_color: str = "&H000000FF"
    outline_color: str = "&H00000000"
    back_color: str = "&H00000000"
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_out: bool = False
    scale_x: int = 100
    scale_y: int = 100
    spacing: int = 0
    angle: int = 0
    border_style: int = 1  # Outline + drop shadow
    outline: int = 1
    shadow: float = 0.5
    alignment: int = 2  # Bottom center
    margin_l: int = 10
    margin_r: int = 10
    margin_v: int = BASE_MARGIN_V
    encoding: int = 1

    @staticmethod
    def hex_to_ass_color(hex_color: str) -> str:
        """Convert hex color (#RRGGBB) to ASS format (&H00BBGGRR)

        ASS uses &HAABBGGRR format where AA is alpha (00=opaque, FF=transparent).
        """
        if hex_color.startswith("#"):
            hex_color = hex_color[1:]
        if len(hex_color) != 6:
            raise ValueError(f"Expected #RRGGBB color, got {hex_color!r}")
        r, g, b = hex_color[0:2], hex_color[2:4], hex_color[4:6]
        return f"&H00{b}{g}{r}".upper()

    @classmethod
    def for_track(cls, language: str, index: int) -> "TrackStyle":
        """
        Synthesize the style for the track at position index.

        Later tracks sit higher on screen: each one is lifted by two font
        heights plus a small gap. The first track is white, the rest yellow.
        """
        font_name = CJK_FONT if language == CJK_LANGUAGE else DEFAULT_FONT
        color = FIRST_TRACK_COLOR if index == 0 else OTHER_TRACK_COLOR
        margin_v = BASE_MARGIN_V + index * (FONT_SIZE * 2) + index * TRACK_GAP

        return cls(
            name=language,
            font_name=font_name,
            font_size=FONT_SIZE,
            primary_color=cls.hex_to_ass_color(color),
            margin_v=margin_v,
        )

    def to_style_line(self) -> str:
        return (
            f"Style: {self.name},{self.font_name},{self.font_size},"
            f"{self.primary_color},{self.secondary_color},{self.outline_color},{self.back_color},"
            f"{-1 if self.bold else 0},{-1 if self.italic else 0},"
            f"{-1 if self.underline else 0},{-1 if self.strike_out else 0},"
            f"{self.scale_x},{self.scale_y},{self.spacing},{self.angle},"
            f"{self.border_style},{self.outline},{self.shadow},{self.alignment},"
            f"{self.margin_l},{self.margin_r},{self.margin_v},{self.encoding}"
        )


class AssFormatter:
    """
    Formats language tracks into one ASS document.

    Track order matters: position n gets layer n, the n-th style color
    and the n-th vertical margin.
    """

    def format_ass(self, tracks: Mapping[str, Sequence[Block]]) -> str:
        """
        Format tracks as ASS content.

        Args:
            tracks: Ordered mapping of language tag to its Blocks

        Returns:
            ASS formatted string ending with a newline
        """
        lines: List[str] = list(SCRIPT_INFO_HEADER)

        lines.append("")
        lines.append("[V4+ Styles]")
        lines.append(STYLE_FORMAT)
        for index, language in enumerate(tracks):
            lines.append(TrackStyle.for_track(language, index).to_style_line())

        lines.append("")
        lines.append("[Events]")
        lines.append(EVENT_FORMAT)
        event_count = 0
        for layer, (language, blocks) in enumerate(tracks.items()):
            for block in blocks:
                lines.append(self._format_dialogue(layer, language, block))
                event_count += 1

        logger.info(f"Formatted {len(tracks)} styles and {event_count} events as ASS")
        return "\n".join(lines) + "\n"

    def save_ass(
        self,
        tracks: Mapping[str, Sequence[Block]],
        output_path: Path,
        encoding: str = "utf-8"
    ) -> None:
        """
        Save tracks to an ASS file.

        Args:
            tracks: Ordered mapping of language tag to its Blocks
            output_path: Output file path
            encoding: Text encoding of the written file

        Raises:
            SubtitleIOError: The file could not be written
        """
        write_ass(self.format_ass(tracks), output_path, encoding=encoding)

    @staticmethod
    def _format_dialogue(layer: int, language: str, block: Block) -> str:
        start = format_ass_time(block.start)
        end = format_ass_time(block.end)
        text = "\\N".join(block.content)
        return f"Dialogue: {layer},{start},{end},{language},,0,0,0,,{text}"


def write_ass(content: str, output_path: Path, encoding: str = "utf-8") -> None:
    """
    Write formatted ASS content to a file.

    The content is encoded before the file is touched, so an encoding
    failure leaves any existing file unchanged.

    Raises:
        SubtitleIOError: The content could not be encoded or written
    """
    output_path = Path(output_path)
    try:
        data = content.encode(encoding)
    except (LookupError, UnicodeEncodeError) as e:
        raise SubtitleIOError(f"Cannot encode {output_path} as {encoding}: {e}") from e

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise SubtitleIOError(f"Failed to write {output_path}: {e}") from e
    logger.info(f"Saved ASS: {output_path}")
