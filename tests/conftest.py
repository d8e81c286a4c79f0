from __future__ import annotations

import os
import struct
import zlib
from typing import Callable

import pytest
from fastapi.testclient import TestClient

os.environ["AC_LOCALHOST_ONLY"] = "1"
os.environ["AC_HOST"] = "127.0.0.1"
os.environ["AC_MAX_UPLOAD_BYTES"] = str(2 * 1024 * 1024)
os.environ["AC_MAX_PIXELS"] = "1000000"
os.environ["AC_DEFAULT_MODE"] = "segment"

from alphacut.domain.pixels import PixelBuffer  # noqa: E402

GRID_COLORS = {
    ".": (255, 255, 255),
    "w": (245, 248, 250),
    "g": (240, 240, 240),
    "#": (0, 0, 0),
    "m": (100, 100, 100),
}


def buffer_from_grid(rows: list[str], alpha: int = 255) -> PixelBuffer:
    """'.'/'w' are background-colored; 'g' sits exactly on the threshold and is not."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    data = bytearray()
    for row in rows:
        assert len(row) == width
        for cell in row:
            data.extend(GRID_COLORS[cell])
            data.append(alpha)
    return PixelBuffer(width=width, height=height, channels=4, data=data)


def alpha_grid(buffer: PixelBuffer) -> list[str]:
    """'0' for transparent, '1' for anything else."""
    return [
        "".join("0" if buffer.alpha_at(x, y) == 0 else "1" for x in range(buffer.width))
        for y in range(buffer.height)
    ]


@pytest.fixture()
def make_buffer() -> Callable[..., PixelBuffer]:
    return buffer_from_grid


@pytest.fixture()
def read_alpha() -> Callable[[PixelBuffer], list[str]]:
    return alpha_grid


def png_header_only(width: int, height: int) -> bytes:
    """PNG signature plus an IHDR chunk declaring an RGB image, no pixel data."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    chunk = b"IHDR" + ihdr
    return b"\x89PNG\r\n\x1a\n" + struct.pack(">I", len(ihdr)) + chunk + struct.pack(">I", zlib.crc32(chunk))


@pytest.fixture()
def oversized_png() -> bytes:
    # 400M pixels, past Pillow's decompression-bomb error limit
    return png_header_only(20000, 20000)


@pytest.fixture()
def client() -> TestClient:
    from alphacut.main import app

    with TestClient(app) as c:
        yield c
