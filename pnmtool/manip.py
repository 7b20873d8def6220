from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import filters, histogram, operations
from .image_buffer import Image


class ManipOption(Enum):
    DO_NOTHING = "none"
    NEGATE = "negate"
    BRIGHTEN = "brighten"
    CONTRAST = "contrast"
    GRAYSCALE = "grayscale"
    SMOOTH = "smooth"
    SHARPEN = "sharpen"


@dataclass(frozen=True)
class Manipulation:
    option: ManipOption = ManipOption.DO_NOTHING
    amount: int = 0

    @classmethod
    def brighten(cls, amount: int) -> "Manipulation":
        return cls(ManipOption.BRIGHTEN, amount)


def apply(image: Image, manipulation: Manipulation | ManipOption) -> Image:
    """Run one manipulation and return the resulting image."""
    if isinstance(manipulation, ManipOption):
        manipulation = Manipulation(manipulation)
    option = manipulation.option
    if option is ManipOption.DO_NOTHING:
        return image
    if option is ManipOption.NEGATE:
        return operations.negate(image)
    if option is ManipOption.BRIGHTEN:
        return operations.brighten(image, manipulation.amount)
    if option is ManipOption.CONTRAST:
        return histogram.histogram_stretch(image)
    if option is ManipOption.GRAYSCALE:
        return operations.grayscale(image)
    if option is ManipOption.SMOOTH:
        return filters.mean_filter(image)
    if option is ManipOption.SHARPEN:
        return filters.high_pass_sharpen(image)
    raise ValueError(f"Unsupported manipulation: {option}")
