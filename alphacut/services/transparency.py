from __future__ import annotations

import time
from dataclasses import dataclass

from alphacut.core.logging import get_logger
from alphacut.domain.enums import SegmentationMode
from alphacut.services.analysis import WHITE_REGION_RATIO, white_pixel_ratio
from alphacut.services.codec import decode_image, encode_png
from alphacut.services.flatten import flatten_white_to_transparent
from alphacut.services.segmentation.engine import segment_and_make_transparent

logger = get_logger()


@dataclass(slots=True)
class TransparencyOutcome:
    png: bytes
    width: int
    height: int
    cleared: int
    mode: SegmentationMode
    white_ratio: float

    @property
    def has_white_regions(self) -> bool:
        return self.white_ratio > WHITE_REGION_RATIO


def make_transparent(payload: bytes, mode: SegmentationMode, max_pixels: int) -> TransparencyOutcome:
    mode = SegmentationMode(mode)
    started = time.perf_counter()
    buffer = decode_image(payload, max_pixels)
    white_ratio = white_pixel_ratio(buffer)
    before = buffer.data[3 :: buffer.channels].count(0)

    if mode == SegmentationMode.FLATTEN:
        flatten_white_to_transparent(buffer)
    else:
        segment_and_make_transparent(buffer)

    cleared = buffer.data[3 :: buffer.channels].count(0) - before
    png = encode_png(buffer)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "made %dx%d image transparent mode=%s cleared=%d white_ratio=%.3f elapsed_ms=%.1f",
        buffer.width,
        buffer.height,
        mode.value,
        cleared,
        white_ratio,
        elapsed_ms,
    )
    return TransparencyOutcome(
        png=png,
        width=buffer.width,
        height=buffer.height,
        cleared=cleared,
        mode=mode,
        white_ratio=white_ratio,
    )
