"""
Module: cutting.config

Purpose:
    Configuration dataclass for the cutter. Immutable configuration with
    validation on construction.

Key Classes:
    - CutterConfig: Output format and duplicate-name policy

Used By:
    - cutting.cutter: cut_atlas()
    - controller: ConverterConfig
"""

from __future__ import annotations

from dataclasses import dataclass

# Extensions Pillow can write with an alpha channel
SUPPORTED_FORMATS = ("png", "webp", "bmp", "tga", "tiff")


@dataclass(frozen=True)
class CutterConfig:
    """
    Configuration for cutting an atlas into part images (immutable).

    Attributes:
        image_format: Output file extension, lowercase without the dot
        reject_duplicates: Fail before writing anything if two parts share
            a name, instead of letting the later one overwrite the earlier

    Example:
        >>> CutterConfig(image_format="webp").image_format
        'webp'
    """
    image_format: str = "png"
    reject_duplicates: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.image_format not in SUPPORTED_FORMATS:
            raise ValueError(
                f"image_format must be one of {SUPPORTED_FORMATS}: {self.image_format!r}"
            )
