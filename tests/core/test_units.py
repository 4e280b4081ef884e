"""
Unit tests for ContentUnit.
"""

import pytest

from ebook_toolkit.core.models import ContentUnit, UnitKind


class TestContentUnitConstructors:
    """Tests for the kind-specific constructors."""

    def test_heading_when_created_then_carries_level_and_text(self):
        """heading() should set kind, level and text."""
        unit = ContentUnit.heading(2, "Background")

        assert unit.kind is UnitKind.HEADING
        assert unit.level == 2
        assert unit.text == "Background"
        assert unit.is_heading and not unit.is_paragraph and not unit.is_image

    def test_image_when_created_then_keeps_reference_verbatim(self):
        """Image references are opaque strings."""
        unit = ContentUnit.image("https://picsum.photos/400/300?x=1|grayscale")

        assert unit.is_image
        assert unit.reference == "https://picsum.photos/400/300?x=1|grayscale"
        assert unit.text == ""

    def test_init_when_heading_level_zero_then_raises_error(self):
        """Headings need a level of at least 1."""
        with pytest.raises(ValueError, match="heading level"):
            ContentUnit.heading(0, "Nope")

    def test_init_when_paragraph_has_level_then_raises_error(self):
        """Only headings carry a level."""
        with pytest.raises(ValueError, match="only valid for headings"):
            ContentUnit(kind=UnitKind.PARAGRAPH, text="x", level=1)

    def test_init_when_paragraph_has_reference_then_raises_error(self):
        with pytest.raises(ValueError, match="only valid for images"):
            ContentUnit(kind=UnitKind.PARAGRAPH, text="x", reference="a.png")


class TestContentUnitBehaviour:
    """Tests for immutability and copying."""

    def test_with_text_when_called_then_returns_new_unit(self):
        """with_text should leave the original untouched."""
        # Arrange
        original = ContentUnit.paragraph("one two three")

        # Act
        remainder = original.with_text("three")

        # Assert
        assert remainder.text == "three"
        assert remainder.kind is UnitKind.PARAGRAPH
        assert original.text == "one two three"

    def test_setattr_when_frozen_then_raises(self):
        unit = ContentUnit.paragraph("fixed")

        with pytest.raises(AttributeError):
            unit.text = "changed"

    @pytest.mark.parametrize(
        "unit",
        [
            ContentUnit.heading(3, "Section"),
            ContentUnit.paragraph("Body text."),
            ContentUnit.image("img/figure-1.png"),
        ],
    )
    def test_from_dict_when_serialized_then_equal(self, unit):
        """to_dict/from_dict should preserve every kind."""
        assert ContentUnit.from_dict(unit.to_dict()) == unit
