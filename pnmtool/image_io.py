from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image as PILImage

from .errors import FormatError, UnrecognizedMagic
from .header import RasterKind, classify_magic
from .image_buffer import Image, from_pillow_image
from .operations import rescale
from .ppm import decode, encode

logger = logging.getLogger(__name__)

NETPBM_SUFFIXES = {".ppm", ".pgm", ".pnm"}
PILLOW_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp"}


class ImageFormatError(FormatError):
    pass


def load_image(path: str | Path) -> Image:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    if suffix in PILLOW_SUFFIXES:
        with PILImage.open(path) as img:
            image = from_pillow_image(img)
        logger.debug(f"Loaded {path} through Pillow")
        return image
    data = path.read_bytes()
    if suffix not in NETPBM_SUFFIXES:
        try:
            classify_magic(data)
        except UnrecognizedMagic as exc:
            raise ImageFormatError(f"Unsupported file: {path}") from exc
    image = decode(data)
    logger.debug(f"Loaded {path} ({len(data)} bytes)")
    return image


def save_image(
    image: Image,
    path: str | Path,
    raster_kind: RasterKind = RasterKind.RAW,
) -> None:
    path = Path(path)
    if path.suffix.lower() in PILLOW_SUFFIXES:
        pil_image = rescale(image, 255).to_pillow_image()
        pil_image.save(path)
        logger.debug(f"Saved {path} through Pillow")
        return
    data = encode(image, raster_kind)
    path.write_bytes(data)
    logger.debug(f"Saved {path} ({len(data)} bytes, {raster_kind.value})")
