"""
Module: cutting.cropper

Purpose:
    Cut a single part out of the packed image with bounds validation,
    then rotate it back to its original orientation.

Key Functions:
    - crop_part(): Crop and un-rotate one part

Dependencies:
    - PIL: Image manipulation
    - cutting.geometry: CropBox, rotation lookup

Used By:
    - cutting.cutter: cut_atlas()
"""

from __future__ import annotations

from PIL import Image

from atlas_cutter.core.models import Part

from .errors import CropBoundsError
from .geometry import crop_box_for, rotation_for


def crop_part(image: Image.Image, part: Part) -> Image.Image:
    """
    Crop a part from the packed image and undo the packer's rotation.

    Args:
        image: Decoded packed image
        part: Part to extract

    Returns:
        New image of size part.output_size

    Raises:
        CropBoundsError: If the crop rectangle is empty or leaves the image

    Example:
        >>> out = crop_part(atlas_image, Part(name="c", xy=(32, 0), size=(10, 20), rotate=90))
        >>> out.size
        (10, 20)
    """
    try:
        box = crop_box_for(part)
    except ValueError as e:
        raise CropBoundsError(f"Part '{part.name}' has an invalid region: {e}") from e

    if not box.fits_within(image.size):
        raise CropBoundsError(
            f"Part '{part.name}' region {box.box} exceeds image size "
            f"{image.width}x{image.height}"
        )

    cropped = image.crop(box.box)
    transpose = rotation_for(part.angle)
    if transpose is not None:
        cropped = cropped.transpose(transpose)
    return cropped
