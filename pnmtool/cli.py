from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Sequence

from .errors import FormatError
from .header import RasterKind
from .image_io import load_image, save_image
from .manip import ManipOption, Manipulation, apply

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgOpts:
    manipulation: Manipulation
    raster_kind: RasterKind
    infile: str
    outfile: str


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pnmtool",
        description="Manipulate PPM/PGM images (P2, P3, P5, P6).",
    )
    ops = parser.add_mutually_exclusive_group()
    ops.add_argument("-n", dest="option", action="store_const", const=ManipOption.NEGATE, help="negate")
    ops.add_argument("-b", dest="amount", type=int, metavar="AMOUNT", help="brighten by AMOUNT")
    ops.add_argument("-c", dest="option", action="store_const", const=ManipOption.CONTRAST, help="contrast stretch")
    ops.add_argument("-g", dest="option", action="store_const", const=ManipOption.GRAYSCALE, help="convert to grayscale")
    ops.add_argument("-p", dest="option", action="store_const", const=ManipOption.SHARPEN, help="sharpen")
    ops.add_argument("-s", dest="option", action="store_const", const=ManipOption.SMOOTH, help="smooth")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-oa", dest="raster_kind", action="store_const", const=RasterKind.ASCII, help="ascii output")
    mode.add_argument("-ob", dest="raster_kind", action="store_const", const=RasterKind.RAW, help="binary output")
    parser.add_argument("infile")
    parser.add_argument("outfile")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> ProgOpts:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    if args.amount is not None:
        manipulation = Manipulation.brighten(args.amount)
    else:
        manipulation = Manipulation(args.option or ManipOption.DO_NOTHING)
    return ProgOpts(manipulation, args.raster_kind, args.infile, args.outfile)


def run(opts: ProgOpts) -> None:
    image = load_image(opts.infile)
    result = apply(image, opts.manipulation)
    save_image(result, opts.outfile, opts.raster_kind)
    logger.info(f"{opts.manipulation.option.value}: {opts.infile} -> {opts.outfile}")


def main(argv: Sequence[str] | None = None) -> int:
    opts = parse_args(argv)
    try:
        run(opts)
    except (FormatError, OSError) as exc:
        logger.error(str(exc))
        return 1
    return 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


if __name__ == "__main__":
    sys.exit(main())
