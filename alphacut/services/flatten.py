from __future__ import annotations

from alphacut.domain.pixels import PixelBuffer
from alphacut.services.segmentation.combiner import apply_mask
from alphacut.services.segmentation.density import background_map


def flatten_white_to_transparent(buffer: PixelBuffer) -> PixelBuffer:
    # No connectivity analysis: white ink inside the subject goes too.
    buffer.validate()
    apply_mask(buffer, background_map(buffer))
    return buffer
