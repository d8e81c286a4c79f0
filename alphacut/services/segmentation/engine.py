from __future__ import annotations

import logging

from alphacut.core.logging import get_logger
from alphacut.domain.pixels import PixelBuffer
from alphacut.services.segmentation.combiner import SegmentationResult, apply_mask
from alphacut.services.segmentation.density import background_map, density_votes
from alphacut.services.segmentation.flood import flood_votes

logger = get_logger()


def segment(buffer: PixelBuffer) -> SegmentationResult:
    """Run both passes without touching the buffer."""
    buffer.validate()
    background = background_map(buffer)
    density = density_votes(buffer, background)
    flood = flood_votes(buffer, background)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "segmented %dx%d: background=%d density=%d flood=%d",
            buffer.width,
            buffer.height,
            sum(background),
            sum(density),
            sum(flood),
        )
    return SegmentationResult(
        width=buffer.width,
        height=buffer.height,
        background=background,
        density=density,
        flood=flood,
    )


def segment_and_make_transparent(buffer: PixelBuffer) -> PixelBuffer:
    """Clear the alpha of every background pixel found by either pass, in place.

    Raises InvalidBufferError before any byte is written if the buffer is not
    a well-formed RGBA buffer. RGB bytes are never modified.
    """
    result = segment(buffer)
    apply_mask(buffer, result.mask)
    return buffer
