from __future__ import annotations

import pytest

from pnmtool import ColorImage, GrayImage, ManipOption, Manipulation, apply, decode
from pnmtool.histogram import channel_extrema, histogram_stretch
from pnmtool.operations import brighten, grayscale, negate, rescale


def make_gray_image(maxval: int = 255) -> GrayImage:
    return GrayImage(3, 4, maxval, list(range(1, 13)))


def make_color_image() -> ColorImage:
    return ColorImage(
        3,
        4,
        255,
        list(range(1, 13)),
        list(range(2, 14)),
        list(range(250, 262 - 7)) + [255] * 7,
    )


def test_brighten_raw_gray():
    image = decode(b"P5\n3 4\n255\n" + bytes(range(1, 13)))
    result = apply(image, Manipulation.brighten(10))
    assert list(result.pixels) == list(range(11, 23))
    assert (result.width, result.height, result.maxval) == (3, 4, 255)


def test_operations_do_not_mutate_input():
    image = make_gray_image()
    before = image.copy()
    brighten(image, 100)
    negate(image)
    histogram_stretch(image)
    assert image == before


@pytest.mark.parametrize("amount", [-100000, -300, -1, 0, 1, 7, 254, 100000])
def test_brighten_stays_in_range(amount):
    for image in (make_gray_image(), make_gray_image(15), make_color_image()):
        result = brighten(image, amount)
        for channel in result.channels:
            assert all(0 <= value <= image.maxval for value in channel)


def test_brighten_darkens_with_negative_amount():
    assert list(brighten(make_gray_image(), -5).pixels) == [0] * 5 + list(range(1, 8))


def test_negate_single_red_pixel():
    image = decode(b"P3\n1 1\n255\n255 0 0")
    result = apply(image, ManipOption.NEGATE)
    assert (list(result.r), list(result.g), list(result.b)) == ([0], [255], [255])


@pytest.mark.parametrize("image", [make_gray_image(), make_gray_image(15), make_color_image()])
def test_negate_is_an_involution(image):
    assert negate(negate(image)) == image


def test_negate_16bit():
    image = GrayImage(2, 1, 65535, [0, 1000])
    assert list(negate(image).pixels) == [65535, 64535]


def test_grayscale_of_gray_is_identity():
    image = make_gray_image()
    assert grayscale(image) is image
    assert apply(image, ManipOption.GRAYSCALE) == image


def test_grayscale_uses_luma_weights():
    image = ColorImage.from_pixels(4, 1, [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255)])
    result = grayscale(image)
    assert isinstance(result, GrayImage)
    # 0.299 * 255 = 76.245, 0.587 * 255 = 149.685, 0.114 * 255 = 29.07
    assert list(result.pixels) == [76, 150, 29, 255]
    assert result.maxval == 255


def test_contrast_stretches_each_channel():
    image = GrayImage(3, 1, 255, [10, 20, 30])
    assert list(histogram_stretch(image).pixels) == [0, 128, 255]


def test_contrast_leaves_flat_channel_alone():
    image = ColorImage(2, 1, 15, [4, 4], [0, 5], [7, 7])
    result = apply(image, ManipOption.CONTRAST)
    assert list(result.r) == [4, 4]
    assert list(result.g) == [0, 15]
    assert list(result.b) == [7, 7]


def test_channel_extrema():
    assert channel_extrema([5, 2, 9, 3]) == (2, 9)


def test_rescale_to_8bit():
    image = GrayImage(3, 1, 15, [0, 7, 15])
    assert list(rescale(image, 255).pixels) == [0, 119, 255]


def test_do_nothing_returns_image():
    image = make_color_image()
    assert apply(image, Manipulation()) is image
