from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .header import ChannelKind

SAMPLE_TYPECODE = "H"
MAX_SAMPLE = 65535

Pixel = Tuple[int, int, int]


def samples(values: Iterable[int] = ()) -> array:
    """Build a sample buffer wide enough for 8- and 16-bit data."""
    if isinstance(values, array) and values.typecode == SAMPLE_TYPECODE:
        return array(SAMPLE_TYPECODE, values)
    # a bytes initializer would be reinterpreted as native 16-bit words
    return array(SAMPLE_TYPECODE, list(values))


def pack_samples(values: Iterable[int], sample_width: int) -> bytes:
    if sample_width == 1:
        return bytes(list(values))
    buf = samples(values)
    if sys.byteorder == "little":
        buf.byteswap()
    return buf.tobytes()


def unpack_samples(raw: bytes, sample_width: int, byteorder: str = "big") -> array:
    if sample_width == 1:
        return samples(raw)
    buf = samples()
    buf.frombytes(raw)
    if sys.byteorder != byteorder:
        buf.byteswap()
    return buf


class _ImageBase:
    width: int
    height: int
    maxval: int

    @property
    def channels(self) -> tuple[array, ...]:
        raise NotImplementedError

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def sample_width(self) -> int:
        return 1 if self.maxval < 256 else 2

    def clamp(self, value: int) -> int:
        return max(0, min(self.maxval, value))

    def with_channels(self, *channels: Iterable[int]):
        raise NotImplementedError

    def copy(self):
        return self.with_channels(*self.channels)

    def _validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Image dimensions must be positive")
        if not 1 <= self.maxval <= MAX_SAMPLE:
            raise ValueError(f"maxval must be in [1, {MAX_SAMPLE}], got {self.maxval}")
        expected = self.pixel_count
        for channel in self.channels:
            if len(channel) != expected:
                raise ValueError(f"Channel holds {len(channel)} samples, expected {expected}")

    def _validate_coordinates(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("Pixel coordinates out of bounds")


@dataclass
class GrayImage(_ImageBase):
    """Single-channel image, samples stored row-major."""

    width: int
    height: int
    maxval: int
    pixels: array

    channel_kind = ChannelKind.GRAY

    def __post_init__(self) -> None:
        if not isinstance(self.pixels, array):
            self.pixels = samples(self.pixels)
        self._validate()

    @property
    def channels(self) -> tuple[array, ...]:
        return (self.pixels,)

    def with_channels(self, *channels: Iterable[int]) -> "GrayImage":
        (pixels,) = channels
        return GrayImage(self.width, self.height, self.maxval, samples(pixels))

    def get_pixel(self, x: int, y: int) -> int:
        self._validate_coordinates(x, y)
        return self.pixels[y * self.width + x]

    def to_pillow_image(self):
        from PIL import Image

        size = (self.width, self.height)
        if self.maxval > 255:
            clamped = (self.clamp(value) for value in self.pixels)
            return Image.frombytes("I;16", size, pack_samples(clamped, 2), "raw", "I;16B")
        from .operations import rescale

        return Image.frombytes("L", size, pack_samples(rescale(self, 255).pixels, 1))


@dataclass
class ColorImage(_ImageBase):
    """Three-channel image with separate, equally sized r, g and b planes."""

    width: int
    height: int
    maxval: int
    r: array
    g: array
    b: array

    channel_kind = ChannelKind.COLOR

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, array):
                setattr(self, name, samples(value))
        self._validate()

    @classmethod
    def from_pixels(
        cls,
        width: int,
        height: int,
        pixels: Iterable[Pixel],
        maxval: int = 255,
    ) -> "ColorImage":
        r, g, b = samples(), samples(), samples()
        for red, green, blue in pixels:
            r.append(red)
            g.append(green)
            b.append(blue)
        return cls(width, height, maxval, r, g, b)

    @property
    def channels(self) -> tuple[array, ...]:
        return (self.r, self.g, self.b)

    def with_channels(self, *channels: Iterable[int]) -> "ColorImage":
        r, g, b = channels
        return ColorImage(self.width, self.height, self.maxval, samples(r), samples(g), samples(b))

    def get_pixel(self, x: int, y: int) -> Pixel:
        self._validate_coordinates(x, y)
        idx = y * self.width + x
        return self.r[idx], self.g[idx], self.b[idx]

    def to_pillow_image(self):
        """Convert to an 8-bit RGB Pillow image, rescaling other maxvals."""
        from PIL import Image

        from .operations import rescale

        scaled = rescale(self, 255)
        data = bytearray(self.pixel_count * 3)
        data[0::3] = pack_samples(scaled.r, 1)
        data[1::3] = pack_samples(scaled.g, 1)
        data[2::3] = pack_samples(scaled.b, 1)
        return Image.frombytes("RGB", (self.width, self.height), bytes(data))


Image = Union[GrayImage, ColorImage]


def from_pillow_image(image) -> Image:
    width, height = image.size
    if image.mode == "I;16B":
        return GrayImage(width, height, MAX_SAMPLE, unpack_samples(image.tobytes(), 2))
    if image.mode in ("I", "I;16"):
        # 32-bit "I" is what older Pillow opens 16-bit gray PNGs as
        raw = image.convert("I;16").tobytes()
        return GrayImage(width, height, MAX_SAMPLE, unpack_samples(raw, 2, byteorder="little"))
    if image.mode in ("1", "L", "LA"):
        return GrayImage(width, height, 255, samples(image.convert("L").tobytes()))
    data = image.convert("RGB").tobytes()
    return ColorImage(
        width,
        height,
        255,
        samples(data[0::3]),
        samples(data[1::3]),
        samples(data[2::3]),
    )


def same_content(first: Image, second: Image) -> bool:
    """
    Compare two images sample-for-sample relative to their maxvals, so a
    maxval 15 image equals its maxval 255 rescaling when the ratios match.
    """
    if first.channel_kind is not second.channel_kind:
        return False
    if (first.width, first.height) != (second.width, second.height):
        return False
    for a, b in zip(first.channels, second.channels):
        for x, y in zip(a, b):
            if x * second.maxval != y * first.maxval:
                return False
    return True
