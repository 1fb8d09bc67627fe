"""
Module: cutting.geometry

Purpose:
    Crop rectangle and rotation for a part. Packers store some regions
    rotated a quarter turn, so the rectangle to crop has the part's stored
    size with width and height swapped; rotating the crop clockwise by the
    part's angle restores the original orientation.

Key Functions:
    - crop_box_for(): Rectangle to crop from the packed image
    - rotation_for(): Pillow transpose method for a clockwise angle

Key Classes:
    - CropBox: Pixel rectangle in the packed image

Dependencies:
    - PIL.Image: Transpose constants

Used By:
    - cutting.cropper: crop_part()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image

from atlas_cutter.core.models import Part

# Pillow's ROTATE_* transposes turn counter-clockwise
_CLOCKWISE = {
    0: None,
    90: Image.Transpose.ROTATE_270,
    180: Image.Transpose.ROTATE_180,
    270: Image.Transpose.ROTATE_90,
}


@dataclass(frozen=True, slots=True)
class CropBox:
    """
    Pixel rectangle inside the packed image.

    The region is [left, right) x [top, bottom).

    Attributes:
        left: X-coordinate of left edge (inclusive)
        top: Y-coordinate of top edge (inclusive)
        width: Width in pixels
        height: Height in pixels

    Invariants:
        - left >= 0, top >= 0
        - width > 0, height > 0

    Example:
        >>> CropBox(left=32, top=0, width=20, height=10).box
        (32, 0, 52, 10)
    """

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate box on construction."""
        if self.left < 0:
            raise ValueError(f"left must be >= 0: {self.left}")
        if self.top < 0:
            raise ValueError(f"top must be >= 0: {self.top}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be > 0: {self.height}")

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom) as expected by Image.crop."""
        return (self.left, self.top, self.right, self.bottom)

    def fits_within(self, size: Tuple[int, int]) -> bool:
        """True if the box lies entirely inside an image of the given size."""
        width, height = size
        return self.right <= width and self.bottom <= height


def crop_box_for(part: Part) -> CropBox:
    """
    Rectangle holding the part inside the packed image.

    Args:
        part: Parsed part

    Returns:
        CropBox at part.xy with the part's crop_size

    Raises:
        ValueError: If the part has a negative position or an empty size

    Example:
        >>> crop_box_for(Part(name="c", xy=(32, 0), size=(10, 20), rotate=90))
        CropBox(left=32, top=0, width=20, height=10)
    """
    x, y = part.xy
    width, height = part.crop_size
    return CropBox(left=x, top=y, width=width, height=height)


def rotation_for(angle: int) -> Optional[Image.Transpose]:
    """
    Transpose method that rotates an image clockwise by angle degrees.

    Returns None for 0 (nothing to do).

    Raises:
        ValueError: If angle is not a multiple of 90 in [0, 270]
    """
    try:
        return _CLOCKWISE[angle]
    except KeyError:
        raise ValueError(f"Unsupported rotation: {angle}") from None
