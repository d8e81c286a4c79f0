from __future__ import annotations

import io

import pytest
from PIL import Image

from alphacut.domain.pixels import PixelBuffer
from alphacut.services.codec import ImageDecodeError, decode_image, encode_png


def _encode(img: Image.Image, fmt: str = "PNG") -> bytes:
    out = io.BytesIO()
    img.save(out, fmt)
    return out.getvalue()


def test_rgb_input_gets_opaque_alpha() -> None:
    img = Image.new("RGB", (3, 2), (10, 20, 30))
    buf = decode_image(_encode(img), max_pixels=100)
    assert (buf.width, buf.height, buf.channels) == (3, 2, 4)
    assert buf.rgb_at(2, 1) == (10, 20, 30)
    assert buf.alpha_at(2, 1) == 255


def test_rgba_alpha_is_kept() -> None:
    img = Image.new("RGBA", (2, 2), (255, 255, 255, 64))
    buf = decode_image(_encode(img), max_pixels=100)
    assert buf.alpha_at(0, 0) == 64


def test_greyscale_and_jpeg_inputs_normalize_to_rgba() -> None:
    grey = decode_image(_encode(Image.new("L", (4, 4), 250)), max_pixels=100)
    assert grey.rgb_at(1, 1) == (250, 250, 250)
    jpeg = decode_image(_encode(Image.new("RGB", (8, 8), (255, 255, 255)), "JPEG"), max_pixels=100)
    assert jpeg.channels == 4
    assert len(jpeg.data) == 8 * 8 * 4


def test_garbage_payload_rejected() -> None:
    with pytest.raises(ImageDecodeError):
        decode_image(b"definitely not an image", max_pixels=100)


def test_empty_payload_rejected() -> None:
    with pytest.raises(ImageDecodeError, match="Empty"):
        decode_image(b"", max_pixels=100)


def test_pixel_limit_enforced() -> None:
    payload = _encode(Image.new("RGB", (20, 20), "white"))
    with pytest.raises(ImageDecodeError, match="pixel limit"):
        decode_image(payload, max_pixels=399)


def test_encode_png_keeps_alpha() -> None:
    buf = PixelBuffer.blank(3, 3)
    buf.set_alpha(4, 0)
    img = Image.open(io.BytesIO(encode_png(buf)))
    assert img.format == "PNG"
    assert img.mode == "RGBA"
    assert img.size == (3, 3)
    assert img.getpixel((1, 1)) == (255, 255, 255, 0)
    assert img.getpixel((0, 0)) == (255, 255, 255, 255)


def test_decompression_bomb_reported_as_pixel_limit(oversized_png) -> None:
    with pytest.raises(ImageDecodeError, match="pixel limit"):
        decode_image(oversized_png, max_pixels=1000)
