from __future__ import annotations

import pytest

from alphacut.domain.pixels import InvalidBufferError, PixelBuffer
from alphacut.services.flatten import flatten_white_to_transparent


def test_flatten_clears_every_near_white_pixel(make_buffer, read_alpha) -> None:
    buf = make_buffer([
        "#####",
        "#...#",
        "#.g.#",
        "#...#",
        "#####",
    ])
    before = bytes(buf.data)
    flatten_white_to_transparent(buf)
    assert read_alpha(buf) == [
        "11111",
        "10001",
        "10101",
        "10001",
        "11111",
    ]
    for i in range(0, len(before), 4):
        assert buf.data[i : i + 3] == before[i : i + 3]


def test_flatten_validates_first() -> None:
    buf = PixelBuffer(width=2, height=1, channels=3, data=bytearray([255] * 6))
    with pytest.raises(InvalidBufferError):
        flatten_white_to_transparent(buf)
