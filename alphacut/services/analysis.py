from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from alphacut.domain.pixels import PixelBuffer
from alphacut.services.codec import decode_image

# Greyscale luminance cut, looser than the segmentation classifier.
WHITE_LUMA_THRESHOLD = 200
WHITE_REGION_RATIO = 0.6


@dataclass(slots=True)
class WhiteAnalysis:
    width: int
    height: int
    white_ratio: float

    @property
    def has_white_regions(self) -> bool:
        return self.white_ratio > WHITE_REGION_RATIO


def white_pixel_ratio(buffer: PixelBuffer) -> float:
    """Fraction of pixels whose greyscale value is above 200. Alpha is ignored."""
    buffer.validate()
    if buffer.pixel_count == 0:
        return 0.0
    grey = Image.frombytes("RGBA", (buffer.width, buffer.height), bytes(buffer.data)).convert("L")
    white = sum(grey.histogram()[WHITE_LUMA_THRESHOLD + 1 :])
    return white / buffer.pixel_count


def detect_white_regions(buffer: PixelBuffer) -> bool:
    return white_pixel_ratio(buffer) > WHITE_REGION_RATIO


def analyze_image(payload: bytes, max_pixels: int) -> WhiteAnalysis:
    buffer = decode_image(payload, max_pixels)
    return WhiteAnalysis(width=buffer.width, height=buffer.height, white_ratio=white_pixel_ratio(buffer))
