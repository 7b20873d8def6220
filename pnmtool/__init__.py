from .errors import (
    FormatError,
    InvalidAsciiRaster,
    InvalidParam,
    SizeMismatch,
    TruncatedHeader,
    UnrecognizedMagic,
)
from .header import ChannelKind, RasterKind
from .image_buffer import ColorImage, GrayImage, Image, same_content
from .manip import ManipOption, Manipulation, apply
from .ppm import decode, encode

__all__ = [
    "ChannelKind",
    "ColorImage",
    "FormatError",
    "GrayImage",
    "Image",
    "InvalidAsciiRaster",
    "InvalidParam",
    "ManipOption",
    "Manipulation",
    "RasterKind",
    "SizeMismatch",
    "TruncatedHeader",
    "UnrecognizedMagic",
    "apply",
    "decode",
    "encode",
    "same_content",
]
