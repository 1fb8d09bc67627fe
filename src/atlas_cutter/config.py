"""
Module: config

Purpose:
    Top-level configuration for a conversion run, bundling the parser
    and cutter settings.

Key Classes:
    - ConverterConfig: Settings passed to controller.convert()

Used By:
    - controller: convert()
    - cli: Built from command line flags
"""

from __future__ import annotations

from dataclasses import dataclass, field

from atlas_cutter.cutting.config import CutterConfig
from atlas_cutter.parsing.config import ParserConfig


@dataclass(frozen=True)
class ConverterConfig:
    """
    Configuration for converting an atlas into part images (immutable).

    Attributes:
        parser: Parser settings
        cutter: Cutter settings

    Example:
        >>> config = ConverterConfig(
        ...     parser=ParserConfig(strict_numbers=False),
        ...     cutter=CutterConfig(image_format="webp"),
        ... )
    """
    parser: ParserConfig = field(default_factory=ParserConfig)
    cutter: CutterConfig = field(default_factory=CutterConfig)
