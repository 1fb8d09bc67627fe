"""
Module: cutting

Purpose:
    Geometry and transform engine: crops each part out of the packed
    image, rotates it back and writes it out.

Key Functions:
    - cut_atlas(): Cut all parts of an atlas
    - crop_part(): Crop and un-rotate a single part
    - write_image(): Default atomic image encoder

Key Classes:
    - CutterConfig: Output format and duplicate policy
    - CutResult: Files written by a run
    - CropBox: Crop rectangle

Dependencies:
    - PIL: Image manipulation

Used By:
    - controller: convert()
"""

from .config import CutterConfig, SUPPORTED_FORMATS
from .cropper import crop_part
from .cutter import CutResult, cut_atlas, output_path_for
from .errors import CropBoundsError, CutError, SizeMismatchError
from .geometry import CropBox, crop_box_for, rotation_for
from .writer import write_image

__all__ = [
    "CropBox",
    "CropBoundsError",
    "CutError",
    "CutResult",
    "CutterConfig",
    "SUPPORTED_FORMATS",
    "SizeMismatchError",
    "crop_box_for",
    "crop_part",
    "cut_atlas",
    "output_path_for",
    "rotation_for",
    "write_image",
]
