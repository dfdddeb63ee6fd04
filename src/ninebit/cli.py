"""ninebit: convert images to 9-bit RGB code tables and back.

Usage:
  ninebit encode photo.png --size 40 > table.txt
  ninebit encode photo.png --fit contain -o table.txt --preview preview.png
  ninebit decode table.txt -o art.png --scale 8
  pbpaste | ninebit decode -o art.png

Each table row is one image row; each 9-bit code is one pixel in 3-3-3 RGB
format (3 bits red + 3 bits green + 3 bits blue).
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .converter import convert_image
from .encoding import parse_grid, render_grid, render_table
from .exceptions import EmptyGridError, NinebitError
from .models.enums import DEFAULT_TARGET_SIZE, MAX_TARGET_SIZE, MIN_TARGET_SIZE, FitMode
from .models.options import ConversionOptions

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ninebit",
        description="Convert images to 9-bit (3-3-3) RGB binary code tables and back.",
        epilog=__doc__.split("\n\n", 1)[1] if __doc__ else None,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", help="Command to run")

    enc = sub.add_parser("encode", help="Convert an image to a code table")
    enc.add_argument("image", help="Path to source image")
    enc.add_argument(
        "-s",
        "--size",
        type=int,
        default=DEFAULT_TARGET_SIZE,
        metavar="N",
        help=f"Output width and height in pixels, {MIN_TARGET_SIZE}-{MAX_TARGET_SIZE} (default: {DEFAULT_TARGET_SIZE})",
    )
    enc.add_argument(
        "-f",
        "--fit",
        choices=[mode.name.lower() for mode in FitMode],
        default=FitMode.STRETCH.name.lower(),
        help="How to map non-square images onto the grid (default: stretch)",
    )
    enc.add_argument("-o", "--output", metavar="PATH", help="Write table to file instead of stdout")
    enc.add_argument("--preview", metavar="PNG", help="Also save the quantized image")
    enc.add_argument("--preview-scale", type=int, default=1, metavar="N", help="Preview enlargement factor")

    dec = sub.add_parser("decode", help="Render a code table back to an image")
    dec.add_argument("table", nargs="?", default="-", help="Path to table text, or - for stdin (default)")
    dec.add_argument("-o", "--output", required=True, metavar="PNG", help="Output image path")
    dec.add_argument("--scale", type=int, default=1, metavar="N", help="Enlargement factor (default: 1)")

    return parser


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _run_encode(args: argparse.Namespace) -> None:
    options = ConversionOptions(target_size=args.size, fit=FitMode.from_name(args.fit))
    table = convert_image(args.image, options)
    text = table.to_text()

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        print(text)

    if args.preview:
        render_table(table, args.preview_scale).save(args.preview)
        _LOGGER.debug("Saved preview to %s", args.preview)

    print(f"Rows: {table.height}  Columns: {table.width}  Total codes: {table.total_codes}", file=sys.stderr)


def _run_decode(args: argparse.Namespace) -> None:
    text = _read_text(args.table)
    grid = parse_grid(text)
    if grid.is_empty:
        raise EmptyGridError("No codes found in input")

    render_grid(grid, args.scale).save(args.output)
    print(
        f"Rendered {grid.width}x{grid.height} to {args.output}"
        f" ({grid.fallback_cells} invalid or missing cell(s) drawn white)",
        file=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "encode":
            _run_encode(args)
        else:
            _run_decode(args)
    except (NinebitError, ValueError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0

