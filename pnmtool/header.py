from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from .errors import InvalidParam, TruncatedHeader, UnrecognizedMagic

WHITESPACE = b" \t\n\v\f\r"
_HEADER_FIELDS = ("width", "height", "maxval")


class ChannelKind(Enum):
    GRAY = "gray"
    COLOR = "color"


class RasterKind(Enum):
    ASCII = "ascii"
    RAW = "raw"


_MAGIC = {
    b"P2": (ChannelKind.GRAY, RasterKind.ASCII),
    b"P3": (ChannelKind.COLOR, RasterKind.ASCII),
    b"P5": (ChannelKind.GRAY, RasterKind.RAW),
    b"P6": (ChannelKind.COLOR, RasterKind.RAW),
}
_MAGIC_BY_KIND = {kinds: magic for magic, kinds in _MAGIC.items()}


class Header(NamedTuple):
    width: int
    height: int
    maxval: int
    raster_start: int


class _State(Enum):
    NEWLINE = 0
    WHITESPACE = 1
    COMMENT = 2
    VALUE = 3


def classify_magic(data: bytes) -> tuple[ChannelKind, RasterKind]:
    magic = bytes(data[:2])
    try:
        return _MAGIC[magic]
    except KeyError:
        raise UnrecognizedMagic(magic) from None


def magic_for(channel: ChannelKind, raster: RasterKind) -> bytes:
    return _MAGIC_BY_KIND[(channel, raster)]


def scan_header(data: bytes, start: int = 2) -> Header:
    """
    Extract width, height and maxval from the text that follows the magic.

    Tokens are separated by any whitespace; ``#`` starts a comment running to
    the next CR or LF. The raster begins right after the single whitespace
    byte that ends the maxval token.
    """
    values: list[int] = []
    state = _State.NEWLINE
    token_start = start
    for i in range(start, len(data)):
        ch = data[i]
        if state is _State.COMMENT:
            if ch in (10, 13):
                state = _State.NEWLINE
            continue
        if state is _State.VALUE:
            if ch not in WHITESPACE:
                continue
            values.append(_parse_param(data[token_start:i], _HEADER_FIELDS[len(values)]))
            if len(values) == 3:
                return _validated(values, i + 1)
            state = _State.NEWLINE if ch in (10, 13) else _State.WHITESPACE
            continue
        # NEWLINE or WHITESPACE
        if ch == 35:
            state = _State.COMMENT
        elif ch in (10, 13):
            state = _State.NEWLINE
        elif ch in WHITESPACE:
            state = _State.WHITESPACE
        else:
            token_start = i
            state = _State.VALUE
    raise TruncatedHeader(len(values))


def _parse_param(raw: bytes, name: str) -> int:
    try:
        token = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidParam(name, raw.decode("utf-8", errors="replace")) from None
    if not token.isdigit() or not token.isascii():
        raise InvalidParam(name, token)
    return int(token)


def _validated(values: list[int], raster_start: int) -> Header:
    width, height, maxval = values
    if width < 1:
        raise InvalidParam("width", str(width))
    if height < 1:
        raise InvalidParam("height", str(height))
    if not 1 <= maxval <= 65535:
        raise InvalidParam("maxval", str(maxval))
    return Header(width, height, maxval, raster_start)
