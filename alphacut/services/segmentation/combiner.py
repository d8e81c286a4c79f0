from __future__ import annotations

from dataclasses import dataclass

from alphacut.domain.enums import PixelVote
from alphacut.domain.pixels import PixelBuffer


def combine_votes(density: bytearray, flood: bytearray) -> bytearray:
    if len(density) != len(flood):
        raise ValueError(f"Vote arrays differ in length: {len(density)} != {len(flood)}")
    return bytearray(a | b for a, b in zip(density, flood))


def apply_mask(buffer: PixelBuffer, mask: bytearray) -> int:
    """Zero the alpha byte of every masked pixel. Returns how many were masked."""
    cleared = 0
    for index, hit in enumerate(mask):
        if hit:
            buffer.set_alpha(index, 0)
            cleared += 1
    return cleared


@dataclass(slots=True)
class SegmentationResult:
    width: int
    height: int
    background: bytearray
    density: bytearray
    flood: bytearray

    @property
    def mask(self) -> bytearray:
        return combine_votes(self.density, self.flood)

    @property
    def transparent_count(self) -> int:
        return sum(self.mask)

    def vote_at(self, x: int, y: int) -> PixelVote:
        index = y * self.width + x
        if self.flood[index]:
            return PixelVote.CONNECTIVITY
        if self.density[index]:
            return PixelVote.DENSITY
        if self.background[index]:
            return PixelVote.UNVOTED
        return PixelVote.FOREGROUND

    def tally(self) -> dict[PixelVote, int]:
        counts = {vote: 0 for vote in PixelVote}
        for y in range(self.height):
            for x in range(self.width):
                counts[self.vote_at(x, y)] += 1
        return counts
