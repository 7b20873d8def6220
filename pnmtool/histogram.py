from __future__ import annotations

from array import array
from typing import Sequence

from .image_buffer import Image, samples


def channel_extrema(channel: Sequence[int]) -> tuple[int, int]:
    """Return the (lowest, highest) sample of a channel."""
    return min(channel), max(channel)


def histogram_stretch(image: Image) -> Image:
    """
    Stretch every channel independently so its lowest sample maps to 0 and
    its highest to maxval. A channel holding a single level is left as is.
    """
    return image.with_channels(
        *(_stretch_single_channel(channel, image.maxval) for channel in image.channels)
    )


def _stretch_single_channel(channel: array, maxval: int) -> array:
    lo, hi = channel_extrema(channel)
    if lo == hi:
        return samples(channel)
    span = hi - lo
    # new = round((old - lo) * maxval / (hi - lo))
    return samples(((value - lo) * maxval * 2 + span) // (2 * span) for value in channel)
