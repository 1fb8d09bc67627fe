"""
Command line entry point: cut a Spine/libGDX style atlas into part images.

    atlas-cutter -i hero.png -a hero.atlas -o out/
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from atlas_cutter import __version__
from atlas_cutter.config import ConverterConfig
from atlas_cutter.controller import ConversionError, convert
from atlas_cutter.cutting import SUPPORTED_FORMATS, CutterConfig
from atlas_cutter.parsing import ParserConfig


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atlas-cutter",
        description="Atlas cutter for Spine atlases",
    )
    parser.add_argument("-i", "--image", type=Path, required=True, help="Packed atlas texture")
    parser.add_argument("-a", "--atlas", required=True, help="Atlas text file ('-' reads stdin)")
    parser.add_argument("-o", "--output-dir", type=Path, required=True, help="Output folder (must exist)")
    parser.add_argument("--format", choices=SUPPORTED_FORMATS, default="png", help="Output image format")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Treat malformed size/xy/orig/offset numbers as 0 instead of failing",
    )
    parser.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="Fail if two parts share a name instead of overwriting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every part")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if not args.output_dir.is_dir():
        print("Invalid output directory!")
        return EXIT_USAGE

    config = ConverterConfig(
        parser=ParserConfig(strict_numbers=not args.lenient),
        cutter=CutterConfig(image_format=args.format, reject_duplicates=args.reject_duplicates),
    )

    try:
        result = convert(args.image, args.atlas, args.output_dir, config)
    except ConversionError as e:
        print(e)
        return EXIT_FAILED

    print(f"Done! Wrote {result.count} part(s) to {args.output_dir}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
