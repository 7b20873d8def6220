from __future__ import annotations

from array import array
from typing import Sequence

from .image_buffer import Image, samples

BOX_KERNEL = (
    (1, 1, 1),
    (1, 1, 1),
    (1, 1, 1),
)

SHARPEN_KERNEL = (
    (0, -1, 0),
    (-1, 5, -1),
    (0, -1, 0),
)


def mean_filter(image: Image) -> Image:
    return _convolve(image, BOX_KERNEL, divisor=9)


def high_pass_sharpen(image: Image) -> Image:
    return _convolve(image, SHARPEN_KERNEL)


def _convolve(
    image: Image,
    kernel: Sequence[Sequence[int]],
    divisor: int | None = None,
) -> Image:
    divisor = divisor or sum(sum(row) for row in kernel)
    return image.with_channels(
        *(_convolve_channel(channel, image, kernel, divisor) for channel in image.channels)
    )


def _convolve_channel(
    src: array,
    image: Image,
    kernel: Sequence[Sequence[int]],
    divisor: int,
) -> array:
    size = len(kernel)
    radius = size // 2
    width, height = image.width, image.height
    new_data = samples([0]) * len(src)
    for y in range(height):
        for x in range(width):
            acc = 0
            for ky in range(size):
                ny = _clamp(y + ky - radius, 0, height - 1)
                row = ny * width
                for kx in range(size):
                    weight = kernel[ky][kx]
                    if weight:
                        acc += weight * src[row + _clamp(x + kx - radius, 0, width - 1)]
            # round half up, floor division keeps negative sums negative
            new_data[y * width + x] = image.clamp((2 * acc + divisor) // (2 * divisor))
    return new_data


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))
