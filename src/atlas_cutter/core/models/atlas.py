"""
Module: atlas

Purpose:
    Provides the Part and Atlas dataclasses - the parsed description of a
    packed texture atlas - and the PartDraft/AtlasDraft builders the parser
    fills in line by line.

Key Classes:
    - Part: One named region of the packed image (immutable)
    - Atlas: Image name, declared size and ordered parts (immutable)
    - PartDraft: Mutable, all-optional Part under construction
    - AtlasDraft: Mutable, all-optional Atlas under construction

Dependencies:
    - dataclasses (std)
    - atlas_cutter.core.errors: MissingFieldError

Used By:
    - parsing.parser: Builds drafts and finalizes them
    - cutting: Reads finalized parts
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from atlas_cutter.core.errors import MissingFieldError

# Rotations a packer may apply to a region, clockwise degrees
VALID_ROTATIONS = (0, 90, 180, 270)


@dataclass(frozen=True)
class Part:
    """
    One named sub-region of the packed image.

    Attributes:
        name: Region name, used as the output filename stem
        xy: Top-left corner inside the packed image
        size: (width, height) as stored in the packed image, i.e. after
            the packer rotated it
        rotate: Clockwise rotation in degrees (None means not rotated)
        origin: Original (untrimmed) size, carried through only
        offset: Trim offset, carried through only
        index: Animation frame index, carried through only

    Example:
        >>> part = Part(name="arm", xy=(0, 0), size=(10, 20), rotate=90)
        >>> part.crop_size
        (20, 10)
        >>> part.output_size
        (10, 20)
    """

    name: str
    xy: Tuple[int, int]
    size: Tuple[int, int]
    rotate: Optional[int] = None
    origin: Optional[Tuple[int, int]] = None
    offset: Optional[Tuple[int, int]] = None
    index: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate part on construction."""
        if not self.name:
            raise ValueError("name must be non-empty")
        if self.rotate is not None and self.rotate not in VALID_ROTATIONS:
            raise ValueError(f"rotate must be one of {VALID_ROTATIONS}: {self.rotate}")

    @property
    def angle(self) -> int:
        """Rotation in degrees, 0 when not rotated."""
        return self.rotate or 0

    @property
    def is_sideways(self) -> bool:
        """True when the stored region is rotated a quarter turn."""
        return self.angle in (90, 270)

    @property
    def crop_size(self) -> Tuple[int, int]:
        """
        Extent to crop from the packed image.

        Width and height are swapped for quarter-turn rotations so that the
        crop covers the region's physical footprint before rotating back.
        """
        width, height = self.size
        if self.is_sideways:
            return (height, width)
        return (width, height)

    @property
    def output_size(self) -> Tuple[int, int]:
        """Size of the image produced for this part."""
        return self.size


@dataclass(frozen=True)
class Atlas:
    """
    Description of one packed image and its regions.

    Attributes:
        image_name: File name of the packed image (informational)
        size: Declared (width, height) of the packed image
        parts: Regions in declaration order
    """

    image_name: str
    size: Tuple[int, int]
    parts: Tuple[Part, ...] = ()

    def __post_init__(self) -> None:
        """Validate atlas on construction."""
        if not self.image_name:
            raise ValueError("image_name must be non-empty")

    def part_names(self) -> List[str]:
        """Names of all parts in declaration order."""
        return [part.name for part in self.parts]

    def duplicate_names(self) -> List[str]:
        """Names declared more than once, in first-occurrence order."""
        seen = set()
        duplicates: List[str] = []
        for name in self.part_names():
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        return duplicates


@dataclass
class PartDraft:
    """Part under construction. Nothing is validated until finalize()."""

    name: Optional[str] = None
    xy: Optional[Tuple[int, int]] = None
    size: Optional[Tuple[int, int]] = None
    rotate: Optional[int] = None
    origin: Optional[Tuple[int, int]] = None
    offset: Optional[Tuple[int, int]] = None
    index: Optional[int] = None

    def finalize(self) -> Part:
        """
        Build the immutable Part.

        Raises:
            MissingFieldError: If name, xy or size was never set
        """
        if not self.name:
            raise MissingFieldError("Part", "name")
        if self.xy is None:
            raise MissingFieldError("Part", "xy", self.name)
        if self.size is None:
            raise MissingFieldError("Part", "size", self.name)

        return Part(
            name=self.name,
            xy=self.xy,
            size=self.size,
            rotate=self.rotate,
            origin=self.origin,
            offset=self.offset,
            index=self.index,
        )


@dataclass
class AtlasDraft:
    """Atlas under construction. Parts are appended as they are finalized."""

    image_name: Optional[str] = None
    size: Optional[Tuple[int, int]] = None
    parts: List[Part] = field(default_factory=list)

    def add_part(self, part: Part) -> None:
        self.parts.append(part)

    def finalize(self) -> Atlas:
        """
        Build the immutable Atlas.

        Raises:
            MissingFieldError: If image_name or size was never set
        """
        if not self.image_name:
            raise MissingFieldError("Atlas", "image_name")
        if self.size is None:
            raise MissingFieldError("Atlas", "size", self.image_name)

        return Atlas(
            image_name=self.image_name,
            size=self.size,
            parts=tuple(self.parts),
        )
