from __future__ import annotations

import pytest

# The sample images from the Netpbm documentation.
FEEP_PPM = b"""P3
# feep.ppm
4 4
15
 0  0  0    0  0  0    0  0  0   15  0 15
 0  0  0    0 15  7    0  0  0    0  0  0
 0  0  0    0  0  0    0 15  7    0  0  0
15  0 15    0  0  0    0  0  0    0  0  0
"""

FEEP_PGM = b"""P2
# feep.pgm
24 7
15
0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0
0  3  3  3  3  0  0  7  7  7  7  0  0 11 11 11 11  0  0 15 15 15 15  0
0  3  0  0  0  0  0  7  0  0  0  0  0 11  0  0  0  0  0 15  0  0 15  0
0  3  3  3  0  0  0  7  7  7  0  0  0 11 11 11  0  0  0 15 15 15 15  0
0  3  0  0  0  0  0  7  0  0  0  0  0 11  0  0  0  0  0 15  0  0  0  0
0  3  0  0  0  0  0  7  7  7  7  0  0 11 11 11 11  0  0 15  0  0  0  0
0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0  0
"""


def _ascii_values(data: bytes) -> list[int]:
    lines = [line for line in data.splitlines() if not line.startswith(b"#")]
    return [int(token) for token in b" ".join(lines[3:]).split()]


def raw_version(ascii_data: bytes, scale: int = 1, maxval: int = 15) -> bytes:
    """Build the raw (P5/P6) counterpart of an ascii feep image."""
    lines = [line for line in ascii_data.splitlines() if not line.startswith(b"#")]
    magic = {b"P2": b"P5", b"P3": b"P6"}[lines[0]]
    values = _ascii_values(ascii_data)
    return magic + b"\n" + lines[1] + b"\n" + str(maxval).encode() + b"\n" + bytes(v * scale for v in values)


@pytest.fixture
def feep_ppm() -> bytes:
    return FEEP_PPM


@pytest.fixture
def feep_pgm() -> bytes:
    return FEEP_PGM


@pytest.fixture
def feep_raw_ppm() -> bytes:
    return raw_version(FEEP_PPM)


@pytest.fixture
def feep_raw_pgm() -> bytes:
    return raw_version(FEEP_PGM)


@pytest.fixture
def feep_raw_ppm_255() -> bytes:
    return raw_version(FEEP_PPM, scale=17, maxval=255)


@pytest.fixture
def feep_raw_pgm_255() -> bytes:
    return raw_version(FEEP_PGM, scale=17, maxval=255)
