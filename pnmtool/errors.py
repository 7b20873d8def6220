from __future__ import annotations


class FormatError(ValueError):
    """Base class for every Netpbm decoding failure."""


class UnrecognizedMagic(FormatError):
    def __init__(self, magic: bytes) -> None:
        self.magic = magic
        super().__init__(f"Unrecognized magic number {magic!r} (expected P2, P3, P5 or P6)")


class TruncatedHeader(FormatError):
    def __init__(self, found: int) -> None:
        self.found = found
        super().__init__(f"Header ended after {found} of 4 values")


class InvalidParam(FormatError):
    def __init__(self, name: str, token: str) -> None:
        self.name = name
        self.token = token
        super().__init__(f"Invalid header {name}: {token!r}")


class SizeMismatch(FormatError):
    def __init__(self, expected: int, actual: int, unit: str = "bytes") -> None:
        self.expected = expected
        self.actual = actual
        self.unit = unit
        super().__init__(f"Raster size mismatch: expected {expected} {unit}, got {actual}")


class InvalidAsciiRaster(FormatError):
    def __init__(self, reason: str, token: str | None = None) -> None:
        self.reason = reason
        self.token = token
        if token is None:
            super().__init__(f"Invalid ASCII raster: {reason}")
        else:
            super().__init__(f"Invalid ASCII raster: {reason} {token!r}")
