"""
Module: controller

Purpose:
    Orchestrate a complete conversion run.
    Check output → Parse atlas text → Decode image → Cut parts

Key Functions:
    - convert(): Main entry point, files in, part images out
    - read_atlas_text(): Read atlas text from stdin ("-")

Key Classes:
    - ConversionError: Failure tagged with the pipeline stage

Dependencies:
    - atlas_cutter.parsing: Atlas parsing
    - atlas_cutter.imaging: Image decoding
    - atlas_cutter.cutting: Cutting and writing

Used By:
    - cli: main()
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import Optional, TextIO, Union

from atlas_cutter.config import ConverterConfig
from atlas_cutter.cutting import CutError, CutResult, cut_atlas
from atlas_cutter.imaging import ImageLoadError, load_image
from atlas_cutter.parsing import ParseError, parse_atlas, parse_atlas_file

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"

_STAGE_ACTIONS = {
    "setup": "preparing the output directory",
    "parsing": "parsing the atlas",
    "loading": "loading the atlas image",
    "cutting": "cutting up the atlas",
}


class ConversionError(Exception):
    """
    Error during the conversion pipeline.

    Attributes:
        stage: "setup", "parsing", "loading" or "cutting"
        cause: Underlying error message
    """

    def __init__(self, stage: str, cause: str):
        super().__init__(f"Error while {_STAGE_ACTIONS[stage]}: {cause}")
        self.stage = stage
        self.cause = cause


def read_atlas_text(stream: Optional[TextIO] = None) -> str:
    """Read a whole atlas document from stream (default stdin)."""
    return (stream or sys.stdin).read()


def convert(
    image_path: Path,
    atlas_path: Union[str, Path],
    output_dir: Path,
    config: Optional[ConverterConfig] = None,
) -> CutResult:
    """
    Convert a packed image plus its .atlas description into part images.

    Pipeline:
    1. Check the output directory exists
    2. Parse the atlas text completely
    3. Decode the packed image
    4. Cut, rotate and write each part

    Args:
        image_path: Packed image file
        atlas_path: .atlas file, or "-" to read stdin
        output_dir: Existing directory for part images
        config: Conversion settings (default ConverterConfig())

    Returns:
        CutResult listing the written files

    Raises:
        ConversionError: If any stage fails; the original error is chained

    Example:
        >>> result = convert(Path("hero.png"), Path("hero.atlas"), Path("out"))
        >>> print(f"Wrote {result.count} parts")
    """
    config = config or ConverterConfig()
    start_time = time.perf_counter()

    if not output_dir.is_dir():
        raise ConversionError("setup", f"Invalid output directory: {output_dir}")

    try:
        if str(atlas_path) == STDIN_MARKER:
            atlas = parse_atlas(read_atlas_text(), config.parser)
        else:
            atlas = parse_atlas_file(Path(atlas_path), config.parser)
    except ParseError as e:
        raise ConversionError("parsing", str(e)) from e

    logger.info(f"Parsed atlas '{atlas.image_name}' ({atlas.size[0]}x{atlas.size[1]}, {len(atlas.parts)} parts)")

    try:
        image = load_image(image_path)
    except ImageLoadError as e:
        raise ConversionError("loading", str(e)) from e

    with image:
        try:
            result = cut_atlas(image, atlas, output_dir, config=config.cutter)
        except CutError as e:
            raise ConversionError("cutting", str(e)) from e

    duration = time.perf_counter() - start_time
    logger.info(f"Wrote {result.count} parts to {output_dir} in {duration:.2f}s")
    return result
