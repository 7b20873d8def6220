from __future__ import annotations

from typing import Callable

from .image_buffer import ColorImage, GrayImage, Image, samples

# luma weights in per mille
_LUMA_R, _LUMA_G, _LUMA_B = 299, 587, 114


def _scalar_point_op(image: Image, func: Callable[[int], int]) -> Image:
    return image.with_channels(
        *(samples(image.clamp(func(value)) for value in channel) for channel in image.channels)
    )


def negate(image: Image) -> Image:
    maxval = image.maxval
    return _scalar_point_op(image, lambda value: maxval - value)


def brighten(image: Image, amount: int) -> Image:
    return _scalar_point_op(image, lambda value: value + amount)


def grayscale(image: Image) -> GrayImage:
    """Collapse a color image to its luma; gray images come back unchanged."""
    if isinstance(image, GrayImage):
        return image
    pixels = samples(
        image.clamp((_LUMA_R * r + _LUMA_G * g + _LUMA_B * b + 500) // 1000)
        for r, g, b in zip(image.r, image.g, image.b)
    )
    return GrayImage(image.width, image.height, image.maxval, pixels)


def rescale(image: Image, maxval: int) -> Image:
    """Map samples onto a new maxval, rounding to the nearest level."""
    old = image.maxval
    channels = [
        samples(
            min(maxval, (min(value, old) * maxval * 2 + old) // (2 * old)) for value in channel
        )
        for channel in image.channels
    ]
    if isinstance(image, ColorImage):
        return ColorImage(image.width, image.height, maxval, *channels)
    return GrayImage(image.width, image.height, maxval, *channels)
