"""
Timeline normalization

Shifts a supplementary track so that its first Block starts at a reference
time taken from the main track. One fixed offset is applied to every Block.
"""
from datetime import timedelta
from typing import List

from loguru import logger

from .errors import MalformedTimeError
from .models import Block


def normalize(reference: timedelta, blocks: List[Block]) -> timedelta:
    """
    Align blocks[0].start to reference, shifting all blocks in place.

    Args:
        reference: Start time of the first main-track Block
        blocks: Track to shift (mutated)

    Returns:
        The applied offset (negative when the track started late)

    Raises:
        MalformedTimeError: A shifted time would fall before 0:00:00.
            No block is modified in that case.
    """
    if not blocks:
        return timedelta(0)

    offset = reference - blocks[0].start

    earliest = min(min(block.start, block.end) for block in blocks)
    if earliest + offset < timedelta(0):
        raise MalformedTimeError(
            f"Shifting by {offset} would move {earliest} before 0:00:00"
        )

    for block in blocks:
        block.start += offset
        block.end += offset

    logger.info(f"Shifted {len(blocks)} blocks by {offset.total_seconds():+.3f}s")
    return offset
