"""
Module: parsing

Purpose:
    Text front end: turns .atlas documents into Atlas models.

Key Functions:
    - parse_atlas(): Parse atlas text
    - parse_atlas_file(): Parse a .atlas file

Key Classes:
    - AtlasParser: Single-use line-by-line parser
    - ParserConfig: Parser settings
    - ParseError / MissingFieldError: Parse failures

Used By:
    - controller: convert()
"""

from atlas_cutter.core.errors import MissingFieldError, ParseError

from .config import ParserConfig
from .parser import AtlasParser, ParserState, parse_atlas, parse_atlas_file

__all__ = [
    "AtlasParser",
    "MissingFieldError",
    "ParseError",
    "ParserConfig",
    "ParserState",
    "parse_atlas",
    "parse_atlas_file",
]
