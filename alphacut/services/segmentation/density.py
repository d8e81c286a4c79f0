from __future__ import annotations

from alphacut.domain.pixels import PixelBuffer
from alphacut.services.segmentation.classifier import is_background

DENSITY_THRESHOLD = 0.6

_NEIGHBORS_8 = [(-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1)]


def background_map(buffer: PixelBuffer) -> bytearray:
    """Classify every pixel once; 1 where the pixel is background-colored."""
    data = buffer.data
    step = buffer.channels
    out = bytearray(buffer.pixel_count)
    for index in range(buffer.pixel_count):
        i = index * step
        if is_background(data[i], data[i + 1], data[i + 2]):
            out[index] = 1
    return out


def density_votes(buffer: PixelBuffer, background: bytearray | None = None) -> bytearray:
    """First transparency vote from the 8-neighborhood of each pixel.

    Border pixels that are background-colored always vote transparent.
    Interior background pixels vote transparent when more than 60% of their
    in-bounds neighbors are background-colored. There is no connectivity
    check here, so enclosed light blobs can be voted out too.
    """
    w, h = buffer.width, buffer.height
    bg = background if background is not None else background_map(buffer)
    votes = bytearray(w * h)

    for y in range(h):
        row = y * w
        for x in range(w):
            index = row + x
            if not bg[index]:
                continue
            if x == 0 or y == 0 or x == w - 1 or y == h - 1:
                votes[index] = 1
                continue

            total = 0
            white = 0
            for dx, dy in _NEIGHBORS_8:
                nx, ny = x + dx, y + dy
                if 0 <= nx < w and 0 <= ny < h:
                    total += 1
                    white += bg[ny * w + nx]
            if total and white / total > DENSITY_THRESHOLD:
                votes[index] = 1
    return votes
