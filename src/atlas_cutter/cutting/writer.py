"""
Module: cutting.writer

Purpose:
    Saves part images to disk. This is the default image encoder handed
    to cut_atlas(); callers may inject another callable with the same
    signature.

Key Functions:
    - write_image(): Atomically save an image, format from the extension

Dependencies:
    - PIL.Image: Image saving

Used By:
    - cutting.cutter: Default writer
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Optional

from PIL import Image

logger = logging.getLogger(__name__)


def write_image(image: Image.Image, path: Path, *, image_format: Optional[str] = None) -> None:
    """
    Write image atomically using a temp file in the target directory.

    Parent directories are created. An existing file at path is replaced.

    Args:
        image: Image to save
        path: Destination, e.g. out/head.png
        image_format: Pillow format name; inferred from path's extension
            when omitted

    Raises:
        ValueError: If the format cannot be inferred from the extension
        OSError: If the file cannot be written
    """
    if image_format is None:
        image_format = Image.registered_extensions().get(path.suffix.lower())
        if image_format is None:
            raise ValueError(f"Unknown image extension: {path.suffix!r}")

    options = {}
    if image_format == "PNG":
        # compress_level 1 is much faster than optimize=True with minimal size increase
        options["compress_level"] = 1

    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            suffix=path.suffix,
            dir=path.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            image.save(f, format=image_format, **options)

        # Use replace() instead of rename() for Windows compatibility
        temp_path.replace(path)
    except (OSError, ValueError):
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise

    logger.debug(f"Wrote {image.width}x{image.height} {image_format} to {path}")
