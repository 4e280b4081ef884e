"""
Unit tests for the height estimator.
"""

import pytest

from ebook_toolkit.core.models import ContentUnit
from ebook_toolkit.layout import (
    LayoutConfig,
    estimate_height,
    estimate_lines,
    text_block_height,
)


class TestEstimateHeight:
    """Tests for estimate_height()."""

    @pytest.mark.parametrize("length,lines", [(0, 0), (1, 1), (10, 1), (11, 2), (25, 3)])
    def test_estimate_lines_when_text_length_then_ceiling_division(self, small_config, length, lines):
        assert estimate_lines("x" * length, small_config) == lines

    def test_estimate_when_paragraph_then_lines_times_line_height_plus_padding(self, small_config):
        # Arrange
        unit = ContentUnit.paragraph("x" * 25)

        # Act
        height = estimate_height(unit, small_config)

        # Assert
        assert height == 3 * 20 + 10

    def test_estimate_when_heading_then_fixed_per_level(self, small_config):
        """Heading height never depends on the text length."""
        short = ContentUnit.heading(1, "A")
        long = ContentUnit.heading(1, "A very long heading " * 20)

        assert estimate_height(short, small_config) == 60
        assert estimate_height(long, small_config) == 60
        assert estimate_height(ContentUnit.heading(2, "B"), small_config) == 40

    def test_estimate_when_image_then_fixed_height(self, small_config):
        assert estimate_height(ContentUnit.image("huge-panorama.jpg"), small_config) == 80

    def test_estimate_when_default_config_then_editor_values(self):
        """Default heading and image boxes follow the editor (60 / 40 / 280)."""
        config = LayoutConfig()

        assert estimate_height(ContentUnit.heading(1, "T"), config) == 60
        assert estimate_height(ContentUnit.heading(2, "T"), config) == 40
        assert estimate_height(ContentUnit.image("a.png"), config) == 280

    def test_text_block_height_when_zero_lines_then_padding_only(self, small_config):
        assert text_block_height(0, small_config) == 10
