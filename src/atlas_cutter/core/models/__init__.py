"""
Core Models Package

Immutable atlas models plus the mutable drafts used to build them.

Parsing fills a draft one field at a time; nothing is checked until
``finalize()`` is called at the end of a part (or the end of the document
for the atlas). The finalized models are frozen dataclasses and are only
read by the cutter.

| Draft | Model | Mandatory fields |
|-------|-------|------------------|
| `PartDraft` | `Part` | name, xy, size |
| `AtlasDraft` | `Atlas` | image_name, size |
"""

from .atlas import (
    Atlas,
    AtlasDraft,
    MissingFieldError,
    Part,
    PartDraft,
    VALID_ROTATIONS,
)

__all__ = [
    "Atlas",
    "AtlasDraft",
    "MissingFieldError",
    "Part",
    "PartDraft",
    "VALID_ROTATIONS",
]
