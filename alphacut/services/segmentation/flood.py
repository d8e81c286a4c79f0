from __future__ import annotations

from alphacut.domain.pixels import PixelBuffer
from alphacut.services.segmentation.density import background_map


def border_seeds(buffer: PixelBuffer, background: bytearray | None = None) -> list[tuple[int, int]]:
    """Background-colored pixels on the outer frame, each listed once."""
    w, h = buffer.width, buffer.height
    if w == 0 or h == 0:
        return []
    bg = background if background is not None else background_map(buffer)

    frame: list[tuple[int, int]] = []
    for x in range(w):
        frame.append((x, 0))
        if h > 1:
            frame.append((x, h - 1))
    for y in range(1, h - 1):
        frame.append((0, y))
        if w > 1:
            frame.append((w - 1, y))
    return [(x, y) for x, y in frame if bg[y * w + x]]


def flood_votes(buffer: PixelBuffer, background: bytearray | None = None) -> bytearray:
    """Second transparency vote: 4-connected reachability from the border.

    Every background-colored pixel joined to a background-colored border pixel
    through other background-colored pixels (up/down/left/right only) votes
    transparent. Each pixel is visited at most once across all seeds.
    """
    w, h = buffer.width, buffer.height
    bg = background if background is not None else background_map(buffer)
    visited = bytearray(w * h)
    votes = bytearray(w * h)

    for seed in border_seeds(buffer, bg):
        if visited[seed[1] * w + seed[0]]:
            continue
        # explicit stack, large backgrounds would blow the recursion limit
        stack = [seed]
        while stack:
            x, y = stack.pop()
            if not (0 <= x < w and 0 <= y < h):
                continue
            index = y * w + x
            if visited[index]:
                continue
            visited[index] = 1
            if not bg[index]:
                continue
            votes[index] = 1
            stack.append((x, y - 1))
            stack.append((x, y + 1))
            stack.append((x - 1, y))
            stack.append((x + 1, y))
    return votes
