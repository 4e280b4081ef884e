"""
Module: layout.estimator

Purpose:
    Estimate the vertical space a content unit will take without
    rendering it.

Key Functions:
    - estimate_height(): Box height for any content unit
    - estimate_lines(): Line count for body text
    - text_block_height(): Box height for a number of body lines

Approximations:
    - Headings use a fixed per-level height whatever their length
      (long headings are assumed to wrap inside the box).
    - Line counts come from a configured characters-per-line constant,
      not from glyph widths.
    - Images use a fixed height whatever their aspect ratio.

Dependencies:
    - math (std)
    - layout.config: LayoutConfig

Used By:
    - layout.paginator: Fit checks and splitting
"""

from __future__ import annotations

import math

from ebook_toolkit.core.models.units import ContentUnit, UnitKind

from .config import LayoutConfig


def estimate_lines(text: str, config: LayoutConfig) -> int:
    """Number of body lines a text is assumed to wrap to."""
    return math.ceil(len(text) / config.chars_per_line)


def text_block_height(lines: int, config: LayoutConfig) -> float:
    """Height of a paragraph box holding ``lines`` body lines."""
    return lines * config.line_height_px + config.paragraph_padding


def estimate_height(unit: ContentUnit, config: LayoutConfig) -> float:
    """
    Estimate the box height of a content unit.

    The gap that follows the box is not included; the allocator adds it
    when it advances the cursor.

    Args:
        unit: Content unit to measure
        config: Layout configuration

    Returns:
        Height in canvas units

    Example:
        >>> config = LayoutConfig(chars_per_line=10, body_font_size=10, body_line_height=2)
        >>> estimate_height(ContentUnit.paragraph("x" * 25), config)
        70.0  # 3 lines * 20 + 10 padding
    """
    if unit.kind is UnitKind.HEADING:
        return config.heading_height(unit.level)
    if unit.kind is UnitKind.IMAGE:
        return config.image_height
    return text_block_height(estimate_lines(unit.text, config), config)
