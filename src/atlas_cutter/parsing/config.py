"""
Module: parsing.config

Purpose:
    Configuration dataclass for the atlas parser.

Key Classes:
    - ParserConfig: Numeric strictness settings

Used By:
    - parsing.parser: AtlasParser
    - controller: ConverterConfig
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for parsing atlas text (immutable).

    Attributes:
        strict_numbers: When True (default) any malformed number fails the
            document. When False, malformed or missing components of the
            pair values (size, xy, orig, offset) fall back to 0, matching
            older atlas tooling. rotate and index always fail hard.
    """
    strict_numbers: bool = True
