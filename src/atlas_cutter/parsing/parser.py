"""
Module: parsing.parser

Purpose:
    Parse the line-oriented .atlas text format into an Atlas model.
    Single pass, one line at a time, no lookahead.

    Document layout:

        sprite.png          <- image name (first non-empty line)
        size: 64,64         <- atlas header, unindented key: value
        block               <- part name (any non key: value line)
          xy: 0,0           <- part parameters, indented key: value
          size: 32,32

Key Functions:
    - parse_atlas(): Parse atlas text
    - parse_atlas_file(): Read and parse a UTF-8 .atlas file

Key Classes:
    - AtlasParser: Single-use parser holding the configuration
    - ParserState: Position in the document grammar

Dependencies:
    - re (std)
    - atlas_cutter.core.models: Drafts and models

Used By:
    - controller: convert()
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from atlas_cutter.core.errors import ParseError
from atlas_cutter.core.models import (
    VALID_ROTATIONS,
    Atlas,
    AtlasDraft,
    PartDraft,
)

from .config import ParserConfig

logger = logging.getLogger(__name__)

# Unindented "key: value" - atlas header line
ATLAS_PARAMETER = re.compile(r"^(\w+):\s*(.+)$")
# Indented "key: value" - parameter of the current part
PART_PARAMETER = re.compile(r"^\s+(\w+):\s*(.+)$")

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")
# Inclusive bounds of the 32-bit fields numbers are stored in
_U32_RANGE = (0, 2**32 - 1)
_I32_RANGE = (-(2**31), 2**31 - 1)


class ParserState(Enum):
    """Where the parser is in the document."""
    AWAIT_IMAGE_NAME = "await_image_name"
    ATLAS_HEADER = "atlas_header"
    PART_BODY = "part_body"


@dataclass
class _Progress:
    """Everything carried from one line to the next."""
    state: ParserState = ParserState.AWAIT_IMAGE_NAME
    atlas: AtlasDraft = field(default_factory=AtlasDraft)
    part: PartDraft = field(default_factory=PartDraft)

    def finish_part(self) -> None:
        """Finalize the current part, append it and start a fresh draft."""
        finished = self.part.finalize()
        self.atlas.add_part(finished)
        logger.debug(f"Parsed part '{finished.name}' at {finished.xy} size {finished.size}")
        self.part = PartDraft()


class AtlasParser:
    """
    Parser for one atlas document.

    An instance parses exactly one document; create a new parser (or use
    parse_atlas()) for each text.

    Example:
        >>> atlas = AtlasParser().parse("a.png\\nsize: 4,4\\np\\n  xy: 0,0\\n  size: 2,2\\n")
        >>> atlas.part_names()
        ['p']
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self._used = False

    def parse(self, text: str) -> Atlas:
        """
        Parse a whole document.

        Args:
            text: Atlas text, "\\n" or "\\r\\n" line endings

        Returns:
            Finalized Atlas

        Raises:
            ParseError: On malformed numbers, bad rotations, reuse of the
                parser, or (MissingFieldError) missing mandatory fields
        """
        if self._used:
            raise ParseError("AtlasParser instances parse a single document; create a new parser")
        self._used = True

        progress = _Progress()
        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
            self._step(progress, line, line_number)

        # Parsing is line-driven, so the last part has no following name
        # line to close it.
        if progress.part.name is not None:
            progress.finish_part()

        atlas = progress.atlas.finalize()
        logger.debug(f"Parsed atlas '{atlas.image_name}' {atlas.size} with {len(atlas.parts)} parts")
        return atlas

    def _step(self, progress: _Progress, line: str, line_number: int) -> None:
        """Advance the state machine by one line."""
        if not line.strip():
            return

        if progress.state is ParserState.AWAIT_IMAGE_NAME:
            progress.atlas.image_name = line.strip()
            progress.state = ParserState.ATLAS_HEADER
            return

        if progress.state is ParserState.ATLAS_HEADER:
            match = ATLAS_PARAMETER.match(line)
            if match:
                key, value = match.groups()
                self._apply_atlas_parameter(progress.atlas, key, value.strip(), line_number)
            else:
                progress.part.name = line.strip()
                progress.state = ParserState.PART_BODY
            return

        match = PART_PARAMETER.match(line)
        if match:
            key, value = match.groups()
            self._apply_part_parameter(progress.part, key, value.strip(), line_number)
            return

        if progress.part.name is not None:
            progress.finish_part()
        progress.part.name = line.strip()

    # ─────────────────────────────────────────────────────────────────────────
    # Parameter decoding
    # ─────────────────────────────────────────────────────────────────────────

    def _apply_atlas_parameter(self, atlas: AtlasDraft, key: str, value: str, line_number: int) -> None:
        if key == "size":
            atlas.size = self._parse_pair(key, value, line_number, signed=False)
        else:
            logger.debug(f"Ignoring atlas parameter '{key}' on line {line_number}")

    def _apply_part_parameter(self, part: PartDraft, key: str, value: str, line_number: int) -> None:
        if key == "size":
            part.size = self._parse_pair(key, value, line_number, signed=False)
        elif key == "xy":
            part.xy = self._parse_pair(key, value, line_number, signed=False)
        elif key == "orig":
            part.origin = self._parse_pair(key, value, line_number, signed=False)
        elif key == "offset":
            part.offset = self._parse_pair(key, value, line_number, signed=True)
        elif key == "rotate":
            part.rotate = _parse_rotation(value, line_number)
        elif key == "index":
            part.index = _parse_int(key, value, line_number, signed=True)
        else:
            logger.debug(f"Ignoring part parameter '{key}' on line {line_number}")

    def _parse_pair(self, key: str, value: str, line_number: int, *, signed: bool) -> Tuple[int, int]:
        """Parse "a,b" into a pair of integers."""
        tokens = [token.strip() for token in value.split(",")]

        if not self.config.strict_numbers:
            numbers = [_int_or_zero(token, signed) for token in tokens[:2]]
            numbers += [0] * (2 - len(numbers))
            return (numbers[0], numbers[1])

        if len(tokens) != 2:
            raise ParseError(
                f"'{key}' expects two comma-separated integers, got {value!r}",
                line_number=line_number,
            )
        return (
            _parse_int(key, tokens[0], line_number, signed=signed),
            _parse_int(key, tokens[1], line_number, signed=signed),
        )


def _parse_int(key: str, token: str, line_number: int, *, signed: bool) -> int:
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(token):
        kind = "an integer" if signed else "a non-negative integer"
        raise ParseError(f"'{key}' expects {kind}, got {token!r}", line_number=line_number)
    number = int(token)
    low, high = _I32_RANGE if signed else _U32_RANGE
    if not low <= number <= high:
        raise ParseError(
            f"'{key}' value {token} is out of range [{low}, {high}]",
            line_number=line_number,
        )
    return number


def _int_or_zero(token: str, signed: bool) -> int:
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(token):
        return 0
    number = int(token)
    low, high = _I32_RANGE if signed else _U32_RANGE
    return number if low <= number <= high else 0


def _parse_rotation(value: str, line_number: int) -> int:
    """Decode a rotate value: true/false or a clockwise angle in degrees."""
    if value == "true":
        return 90
    if value == "false":
        return 0

    angle = _parse_int("rotate", value, line_number, signed=False)
    if angle not in VALID_ROTATIONS:
        raise ParseError(
            f"'rotate' must be one of {', '.join(map(str, VALID_ROTATIONS))}, got {angle}",
            line_number=line_number,
        )
    return angle


def parse_atlas(text: str, config: Optional[ParserConfig] = None) -> Atlas:
    """
    Parse atlas text with a fresh parser.

    Args:
        text: Atlas document
        config: Parser settings (default ParserConfig())

    Returns:
        Finalized Atlas

    Raises:
        ParseError: If the document is malformed
    """
    return AtlasParser(config).parse(text)


def parse_atlas_file(path: Path, config: Optional[ParserConfig] = None) -> Atlas:
    """
    Read a UTF-8 .atlas file and parse it.

    Raises:
        ParseError: If the file is missing, unreadable or malformed

    Example:
        >>> atlas = parse_atlas_file(Path("hero.atlas"))
        >>> atlas.image_name
        'hero.png'
    """
    if not path.exists():
        raise ParseError(f"Atlas file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Could not read {path}: {e}") from e

    logger.debug(f"Parsing atlas file {path}")
    return parse_atlas(text, config)
