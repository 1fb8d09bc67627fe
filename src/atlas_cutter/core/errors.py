"""
Module: core.errors

Purpose:
    Exceptions raised while turning atlas text into models. Lives in core
    so the drafts can raise MissingFieldError without importing the parser.

Key Classes:
    - ParseError: Any failure while parsing an atlas document
    - MissingFieldError: A draft was finalized without a mandatory field

Used By:
    - core.models.atlas: Draft finalization
    - parsing.parser: Line decoding
"""

from __future__ import annotations

from typing import Optional


class ParseError(Exception):
    """Error parsing an atlas document."""

    def __init__(self, message: str, *, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class MissingFieldError(ParseError):
    """
    A mandatory field was never set before finalizing a draft.

    Attributes:
        entity: "Part" or "Atlas"
        field: Name of the missing field
        name: Part name (or image name) if known, for the message
    """

    def __init__(self, entity: str, field: str, name: Optional[str] = None):
        subject = f"{entity} '{name}'" if name else entity
        super().__init__(f"{subject} is missing required field '{field}'")
        self.entity = entity
        self.field = field
        self.name = name
