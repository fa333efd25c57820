"""Command that loads a bitmap, prints it, inverts it and prints it again."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pixmapkit.formats import PBM
from pixmapkit.image import ImageError, import_image_into

DEFAULT_IMAGE = "images/letterj.pbm"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixmapkit",
        description="Print a plain PBM image and its inverse.",
    )
    parser.add_argument(
        "image",
        nargs="?",
        default=DEFAULT_IMAGE,
        help=f"path of the PBM file to load (default: {DEFAULT_IMAGE})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _parser().parse_args(argv)
    bitmap = PBM()
    try:
        import_image_into(bitmap, args.image)
    except OSError as exc:
        print(f"cannot read {args.image}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ImageError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(bitmap)
    bitmap.invert()
    print(bitmap)
    return 0


if __name__ == "__main__":
    sys.exit(main())