"""
Unit Tests for Atlas Models

Tests for Part/Atlas and the drafts that build them.
"""

import pytest

from atlas_cutter.core.errors import MissingFieldError, ParseError
from atlas_cutter.core.models import Atlas, AtlasDraft, Part, PartDraft


class TestPart:
    """Tests for Part dataclass."""

    def test_defaults_when_optional_fields_omitted_then_none(self):
        """Optional metadata should default to None."""
        p = Part(name="arm", xy=(1, 2), size=(3, 4))
        assert p.rotate is None
        assert p.origin is None
        assert p.offset is None
        assert p.index is None
        assert p.angle == 0

    @pytest.mark.parametrize("rotate", [None, 0, 180])
    def test_crop_size_when_not_sideways_then_matches_size(self, rotate):
        """Half turns and no rotation keep the stored extent."""
        p = Part(name="arm", xy=(0, 0), size=(10, 20), rotate=rotate)
        assert p.is_sideways is False
        assert p.crop_size == (10, 20)
        assert p.output_size == (10, 20)

    @pytest.mark.parametrize("rotate", [90, 270])
    def test_crop_size_when_sideways_then_swapped(self, rotate):
        """Quarter turns swap width and height for the crop only."""
        p = Part(name="arm", xy=(0, 0), size=(10, 20), rotate=rotate)
        assert p.is_sideways is True
        assert p.crop_size == (20, 10)
        assert p.output_size == (10, 20)

    def test_frozen_when_assigned_then_raises(self):
        """Parts are immutable once built."""
        p = Part(name="arm", xy=(0, 0), size=(1, 1))
        with pytest.raises(AttributeError):
            p.name = "leg"

    def test_init_when_empty_name_then_raises(self):
        with pytest.raises(ValueError, match="name must be non-empty"):
            Part(name="", xy=(0, 0), size=(1, 1))

    @pytest.mark.parametrize("rotate", [45, -90, 360])
    def test_init_when_invalid_rotation_then_raises(self, rotate):
        """Only quarter turns are representable."""
        with pytest.raises(ValueError, match="rotate must be one of"):
            Part(name="arm", xy=(0, 0), size=(1, 1), rotate=rotate)


class TestAtlas:
    """Tests for Atlas dataclass."""

    def test_parts_default_empty(self):
        atlas = Atlas(image_name="a.png", size=(4, 4))
        assert atlas.parts == ()
        assert atlas.part_names() == []

    def test_duplicate_names_when_repeated_then_reported_once(self):
        """Each repeated name is listed once, in first-occurrence order."""
        parts = tuple(
            Part(name=name, xy=(0, 0), size=(1, 1))
            for name in ["b", "a", "b", "c", "a", "b"]
        )
        atlas = Atlas(image_name="a.png", size=(4, 4), parts=parts)
        assert atlas.duplicate_names() == ["b", "a"]

    def test_duplicate_names_when_unique_then_empty(self):
        parts = (Part("a", (0, 0), (1, 1)), Part("b", (1, 0), (1, 1)))
        atlas = Atlas(image_name="a.png", size=(4, 4), parts=parts)
        assert atlas.duplicate_names() == []

    def test_init_when_empty_image_name_then_raises(self):
        with pytest.raises(ValueError, match="image_name must be non-empty"):
            Atlas(image_name="", size=(4, 4))


class TestPartDraft:
    """Tests for PartDraft.finalize()."""

    def test_finalize_when_complete_then_copies_all_fields(self):
        draft = PartDraft(
            name="arm", xy=(1, 2), size=(3, 4),
            rotate=90, origin=(5, 6), offset=(-1, 1), index=7,
        )
        assert draft.finalize() == Part(
            name="arm", xy=(1, 2), size=(3, 4),
            rotate=90, origin=(5, 6), offset=(-1, 1), index=7,
        )

    @pytest.mark.parametrize("missing", ["name", "xy", "size"])
    def test_finalize_when_mandatory_missing_then_names_field(self, missing):
        """Missing name/xy/size should raise MissingFieldError naming the field."""
        values = {"name": "arm", "xy": (0, 0), "size": (1, 1)}
        values[missing] = None
        draft = PartDraft(**values)

        with pytest.raises(MissingFieldError, match=f"'{missing}'") as exc_info:
            draft.finalize()

        assert exc_info.value.entity == "Part"
        assert exc_info.value.field == missing

    def test_finalize_when_size_missing_then_message_names_part(self):
        with pytest.raises(MissingFieldError, match="Part 'arm'"):
            PartDraft(name="arm", xy=(0, 0)).finalize()

    def test_missing_field_error_is_parse_error(self):
        assert issubclass(MissingFieldError, ParseError)


class TestAtlasDraft:
    """Tests for AtlasDraft."""

    def test_finalize_when_complete_then_parts_in_order(self):
        draft = AtlasDraft(image_name="a.png", size=(8, 8))
        draft.add_part(Part("one", (0, 0), (1, 1)))
        draft.add_part(Part("two", (1, 0), (1, 1)))

        atlas = draft.finalize()

        assert atlas.part_names() == ["one", "two"]
        assert isinstance(atlas.parts, tuple)

    def test_finalize_when_no_image_name_then_raises(self):
        with pytest.raises(MissingFieldError, match="'image_name'"):
            AtlasDraft(size=(8, 8)).finalize()

    def test_finalize_when_no_size_then_raises(self):
        with pytest.raises(MissingFieldError, match="'size'"):
            AtlasDraft(image_name="a.png").finalize()
