"""
Module: imaging

Purpose:
    Decode the packed atlas image from disk.

Key Functions:
    - load_image(): Open and fully decode an image file

Key Classes:
    - ImageLoadError: Image missing or not decodable

Dependencies:
    - PIL: Image decoding

Used By:
    - controller: convert()
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class ImageLoadError(Exception):
    """Image file missing or not decodable."""
    pass


def load_image(path: Path) -> Image.Image:
    """
    Open an image and force its pixels to load.

    Pillow opens lazily; loading here makes decode errors surface before
    any part is cut.

    Args:
        path: Image file path

    Returns:
        Decoded image

    Raises:
        ImageLoadError: If the file is missing or cannot be decoded
    """
    if not path.exists():
        raise ImageLoadError(f"Image file not found: {path}")

    try:
        image = Image.open(path)
        image.load()
    except (OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(f"Could not decode {path}: {e}") from e

    logger.debug(f"Loaded {path} ({image.width}x{image.height}, {image.mode})")
    return image
