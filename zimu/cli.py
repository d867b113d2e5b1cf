"""
CLI entry point for zimu

Merge two subtitle files into one bilingual ASS file:
  zimu movie.en.srt movie.zh.ass -m en -s zh -o movie.ass
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from zimu import __version__
from zimu.config import settings
from zimu.subtitles import SubtitleError, SubtitleIOError, merge_files, write_ass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zimu",
        description=(
            "Merge multiple subtitles files together. "
            "Accepts .ssa, .ass and .srt; and outputs .ass."
        ),
    )
    parser.add_argument("main_subs_path", type=Path, help="Path to main subtitles file")
    parser.add_argument("supplementary_subs_path", type=Path, help="Path to supplementary subtitles file")
    parser.add_argument(
        "-m", "--main-language", required=True,
        help="Main language code (e.g. zh, fr, sv)",
    )
    parser.add_argument(
        "-s", "--supplementary-language", required=True,
        help="Supplementary language code (e.g. zh, fr, sv)",
    )
    parser.add_argument(
        "-o", "--output-path", type=Path, default=None,
        help="Output path for .ass file (default: stdout)",
    )
    parser.add_argument(
        "--encoding", default=None,
        help=f"Encoding of the input files (default: {settings.INPUT_ENCODING})",
    )
    parser.add_argument(
        "--supplementary-first", action="store_true",
        help="Place the supplementary track at the bottom instead of the main track",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log progress to stderr (-vv for debug output)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: int) -> None:
    """Send loguru output to stderr so stdout only carries the subtitles"""
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        level = settings.LOG_LEVEL
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {message}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        content = merge_files(
            args.main_subs_path,
            args.supplementary_subs_path,
            args.main_language,
            args.supplementary_language,
            encoding=args.encoding,
            supplementary_first=args.supplementary_first,
        )

        if args.output_path:
            write_ass(content, args.output_path, encoding=settings.OUTPUT_ENCODING)
        else:
            try:
                sys.stdout.write(content)
                sys.stdout.flush()
            except (OSError, UnicodeEncodeError) as e:
                raise SubtitleIOError(f"Failed to write to stdout: {e}") from e
    except SubtitleError as e:
        logger.error(f"{settings.APP_NAME}: {e}")
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
