"""
Module: cutting.cutter

Purpose:
    Turn a decoded packed image plus its Atlas description into one image
    file per part. Parts are processed strictly in declaration order and
    the first failure aborts the run; files already written stay on disk.

Key Functions:
    - cut_atlas(): Crop, rotate and write every part
    - output_path_for(): Destination file for a part

Key Classes:
    - CutResult: Paths written by a run

Dependencies:
    - PIL: Image type
    - cutting.cropper: crop_part()
    - cutting.writer: write_image() (default encoder)

Used By:
    - controller: convert()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple

from PIL import Image

from atlas_cutter.core.models import Atlas, Part

from .config import CutterConfig
from .cropper import crop_part
from .errors import CutError, SizeMismatchError
from .writer import write_image

logger = logging.getLogger(__name__)

ImageWriter = Callable[[Image.Image, Path], None]


@dataclass(frozen=True)
class CutResult:
    """
    Result of cutting an atlas (immutable).

    Attributes:
        output_dir: Directory the parts were written to
        written: Written files in part order (a duplicate name appears
            once per write)
    """
    output_dir: Path
    written: Tuple[Path, ...]

    @property
    def count(self) -> int:
        return len(self.written)


def output_path_for(output_dir: Path, part: Part, image_format: str) -> Path:
    """
    Destination file for a part: <output_dir>/<name>.<format>.

    Names containing "/" map to subdirectories.

    Raises:
        CutError: If the name is not a valid file name, or would place the
            file outside output_dir
    """
    target = output_dir / f"{part.name}.{image_format}"
    try:
        resolved = target.resolve()
    except (OSError, ValueError) as e:
        raise CutError(f"Part name '{part.name}' is not a valid file name: {e}") from e

    try:
        resolved.relative_to(output_dir.resolve())
    except ValueError:
        raise CutError(f"Part name '{part.name}' escapes the output directory") from None
    return target


def cut_atlas(
    image: Image.Image,
    atlas: Atlas,
    output_dir: Path,
    *,
    config: Optional[CutterConfig] = None,
    writer: ImageWriter = write_image,
) -> CutResult:
    """
    Cut every part out of the packed image and write it to output_dir.

    Args:
        image: Decoded packed image; must match atlas.size exactly
        atlas: Parsed atlas description
        output_dir: Existing directory to write part images into
        config: Cutter settings (default CutterConfig())
        writer: Encoder called as writer(image, path)

    Returns:
        CutResult listing the written files

    Raises:
        SizeMismatchError: If atlas.size differs from image.size (nothing
            is written)
        CropBoundsError: If a part's region leaves the image
        CutError: On duplicate names with reject_duplicates, unsafe names,
            or when the writer fails

    Example:
        >>> result = cut_atlas(image, parse_atlas(text), Path("out"))
        >>> [p.name for p in result.written]
        ['block.png', 'circle.png']
    """
    config = config or CutterConfig()

    if atlas.size != image.size:
        atlas_w, atlas_h = atlas.size
        raise SizeMismatchError(
            f"atlas text and atlas image don't match: atlas declares "
            f"{atlas_w}x{atlas_h}, image is {image.width}x{image.height}"
        )

    duplicates = atlas.duplicate_names()
    if duplicates and config.reject_duplicates:
        raise CutError(f"Duplicate part names: {', '.join(duplicates)}")
    for name in duplicates:
        logger.warning(f"Part name '{name}' is declared more than once; later parts overwrite earlier output")

    logger.info(f"Cutting {len(atlas.parts)} parts from '{atlas.image_name}'")

    written = []
    for part in atlas.parts:
        logger.debug(f"Processing part '{part.name}'")
        target = output_path_for(output_dir, part, config.image_format)
        part_image = crop_part(image, part)

        try:
            writer(part_image, target)
        except (OSError, ValueError) as e:
            raise CutError(f"Failed to save part '{part.name}' to {target}: {e}") from e

        written.append(target)
        logger.debug(f"Saved '{part.name}' to {target}")

    return CutResult(output_dir=output_dir, written=tuple(written))
