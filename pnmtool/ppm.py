from __future__ import annotations

import logging
from array import array
from typing import Iterator

from .errors import InvalidAsciiRaster, SizeMismatch
from .header import ChannelKind, RasterKind, classify_magic, magic_for, scan_header
from .image_buffer import MAX_SAMPLE, ColorImage, GrayImage, Image, pack_samples, samples, unpack_samples

logger = logging.getLogger(__name__)


def decode(data: bytes) -> Image:
    channel, raster = classify_magic(data)
    width, height, maxval, raster_start = scan_header(data)
    image = decode_raster(channel, raster, width, height, maxval, data[raster_start:])
    logger.debug(
        f"Decoded {channel.value} {raster.value} image {width}x{height}, maxval {maxval}"
    )
    return image


def encode(image: Image, raster_kind: RasterKind = RasterKind.RAW) -> bytes:
    magic = magic_for(image.channel_kind, raster_kind).decode("ascii")
    header = f"{magic}\n{image.width} {image.height}\n{image.maxval}\n"
    if raster_kind is RasterKind.RAW:
        body = _encode_raw(image)
    else:
        body = _encode_ascii(image)
    return header.encode("ascii") + body


def decode_raster(
    channel: ChannelKind,
    raster: RasterKind,
    width: int,
    height: int,
    maxval: int,
    data: bytes,
) -> Image:
    depth = 3 if channel is ChannelKind.COLOR else 1
    total_values = width * height * depth
    if raster is RasterKind.RAW:
        values = _read_binary_samples(data, total_values, maxval)
    else:
        values = _read_ascii_samples(data, total_values)
    if channel is ChannelKind.GRAY:
        return GrayImage(width, height, maxval, values)
    return ColorImage(width, height, maxval, values[0::3], values[1::3], values[2::3])


def _read_binary_samples(data: bytes, total_values: int, maxval: int) -> array:
    sample_width = 1 if maxval < 256 else 2
    expected = total_values * sample_width
    if len(data) != expected:
        raise SizeMismatch(expected, len(data))
    return unpack_samples(data, sample_width)


def _read_ascii_samples(data: bytes, total_values: int) -> array:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidAsciiRaster(f"not valid UTF-8 at byte {exc.start}") from exc
    values = samples(_parse_sample(token) for token in text.split())
    if len(values) != total_values:
        raise SizeMismatch(total_values, len(values), unit="samples")
    return values


def _parse_sample(token: str) -> int:
    if not token.isdigit() or not token.isascii():
        raise InvalidAsciiRaster("non-numeric sample", token)
    value = int(token)
    if value > MAX_SAMPLE:
        raise InvalidAsciiRaster("sample exceeds 16 bits", token)
    return value


def _interleaved(image: Image) -> Iterator[int]:
    if isinstance(image, GrayImage):
        yield from image.pixels
        return
    for r, g, b in zip(image.r, image.g, image.b):
        yield r
        yield g
        yield b


def _encode_raw(image: Image) -> bytes:
    # samples above maxval cannot be represented in the raw width
    clamped = (image.clamp(value) for value in _interleaved(image))
    return pack_samples(clamped, image.sample_width)


def _encode_ascii(image: Image) -> bytes:
    lines = []
    width = image.width
    for y in range(image.height):
        start, stop = y * width, (y + 1) * width
        if isinstance(image, GrayImage):
            row_values = [str(value) for value in image.pixels[start:stop]]
        else:
            row_values = [
                f"{r} {g} {b}"
                for r, g, b in zip(image.r[start:stop], image.g[start:stop], image.b[start:stop])
            ]
        lines.append(" ".join(row_values) + "\n")
    return "".join(lines).encode("ascii")
