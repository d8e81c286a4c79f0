from __future__ import annotations

import io

from PIL import Image, ImageOps, UnidentifiedImageError

from alphacut.domain.pixels import RGBA_CHANNELS, PixelBuffer


class ImageDecodeError(ValueError):
    pass


def decode_image(payload: bytes, max_pixels: int) -> PixelBuffer:
    """Decode any Pillow-readable payload into an RGBA PixelBuffer.

    Images without alpha get an opaque one. Only the first frame of animated
    inputs is used.
    """
    if not payload:
        raise ImageDecodeError("Empty image payload")
    try:
        img = Image.open(io.BytesIO(payload))
    except Image.DecompressionBombError as exc:
        raise ImageDecodeError(f"Image is over the {max_pixels} pixel limit: {exc}") from exc
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError(f"Unreadable image: {exc}") from exc

    width, height = img.size
    if width == 0 or height == 0:
        raise ImageDecodeError("Image has no pixels")
    if width * height > max_pixels:
        raise ImageDecodeError(f"Image is {width}x{height}, over the {max_pixels} pixel limit")

    try:
        img = ImageOps.exif_transpose(img)
        rgba = img.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise ImageDecodeError(f"Could not convert image to RGBA: {exc}") from exc

    return PixelBuffer(
        width=rgba.width,
        height=rgba.height,
        channels=RGBA_CHANNELS,
        data=bytearray(rgba.tobytes()),
    )


def encode_png(buffer: PixelBuffer) -> bytes:
    buffer.validate()
    img = Image.frombytes("RGBA", (buffer.width, buffer.height), bytes(buffer.data))
    out = io.BytesIO()
    img.save(out, "PNG")
    return out.getvalue()
