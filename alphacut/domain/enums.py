from __future__ import annotations

from enum import StrEnum


class PixelVote(StrEnum):
    FOREGROUND = "foreground"
    UNVOTED = "unvoted"
    DENSITY = "density"
    CONNECTIVITY = "connectivity"


class SegmentationMode(StrEnum):
    SEGMENT = "segment"
    FLATTEN = "flatten"
