from __future__ import annotations

from dataclasses import dataclass

RGBA_CHANNELS = 4


class InvalidBufferError(ValueError):
    pass


@dataclass(slots=True)
class PixelBuffer:
    """Interleaved 8-bit pixels, row-major, no row padding.

    Pixel ``(x, y)`` lives at ``data[(y * width + x) * channels:][:channels]``.
    """

    width: int
    height: int
    channels: int
    data: bytearray

    @classmethod
    def blank(cls, width: int, height: int, rgba: tuple[int, int, int, int] = (255, 255, 255, 255)) -> PixelBuffer:
        return cls(width=width, height=height, channels=RGBA_CHANNELS, data=bytearray(bytes(rgba) * (width * height)))

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def validate(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidBufferError(f"Negative dimensions: {self.width}x{self.height}")
        if self.channels != RGBA_CHANNELS:
            raise InvalidBufferError(f"Expected RGBA input, got {self.channels} channel(s)")
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise InvalidBufferError(
                f"Buffer length {len(self.data)} does not match {self.width}x{self.height}x{self.channels}={expected}"
            )

    def pixel_index(self, x: int, y: int) -> int:
        return y * self.width + x

    def offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * self.channels

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def rgb_at(self, x: int, y: int) -> tuple[int, int, int]:
        i = self.offset(x, y)
        return self.data[i], self.data[i + 1], self.data[i + 2]

    def alpha_at(self, x: int, y: int) -> int:
        return self.data[self.offset(x, y) + 3]

    def set_alpha(self, index: int, value: int) -> None:
        # index is a flattened pixel index, not a byte offset
        self.data[index * self.channels + 3] = value

    def copy(self) -> PixelBuffer:
        return PixelBuffer(width=self.width, height=self.height, channels=self.channels, data=bytearray(self.data))
