"""
Module: layout.segmenter

Purpose:
    Split a raw text blob into an ordered queue of content units.

Key Functions:
    - segment_text(): Text + image references -> ContentUnits
    - units_to_text(): ContentUnits -> text that segments back to them

Algorithm:
    1. Split on blank lines when the text has any, otherwise on every newline
    2. Blocks starting with '#' become headings, the '#' run is the level
    3. Trim blocks and drop the empty ones
    4. Append one trailing image unit per image reference

Dependencies:
    - re (std)
    - core.models.units: ContentUnit
    - core.utils.text: Newline normalisation

Used By:
    - controller: build_from_text()
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Sequence

from ebook_toolkit.core.models.units import ContentUnit
from ebook_toolkit.core.utils.text import normalize_newlines

from .config import MAX_HEADING_LEVEL

logger = logging.getLogger(__name__)

BLANK_LINE_PATTERN = re.compile(r"\n\s*\n")
HEADING_PREFIX_PATTERN = re.compile(r"^(#+)\s*")


def segment_text(
    text: str,
    images: Sequence[str] = (),
    *,
    max_heading_level: int = MAX_HEADING_LEVEL,
) -> List[ContentUnit]:
    """
    Split raw text into heading and paragraph units, then append images.

    Double-spaced text (blank lines between paragraphs) is split on the
    blank lines so single line breaks inside a paragraph are kept.
    Single-spaced text has no blank lines and is split on every newline,
    so it is not read as one giant paragraph.

    Args:
        text: Document text with '\\n' line endings
        images: Image references, appended as trailing image units
        max_heading_level: Cap for the length of the leading '#' run

    Returns:
        Ordered list of ContentUnits

    Example:
        >>> segment_text("# Title\\n\\nShort paragraph.")
        [ContentUnit(kind=<UnitKind.HEADING: 'heading'>, text='Title', level=1, reference=''),
         ContentUnit(kind=<UnitKind.PARAGRAPH: 'paragraph'>, text='Short paragraph.', level=0, reference='')]
    """
    units: List[ContentUnit] = []

    for block in _split_blocks(text):
        unit = _classify_block(block, max_heading_level)
        if unit is not None:
            units.append(unit)

    text_unit_count = len(units)
    units.extend(ContentUnit.image(reference) for reference in images)

    logger.debug(
        f"Segmented text into {text_unit_count} text units "
        f"and {len(units) - text_unit_count} image units"
    )
    return units


def units_to_text(units: Iterable[ContentUnit]) -> str:
    """
    Reassemble the text units of a document.

    Every block is terminated by a blank line, so the result is always
    split on blank lines and segments back into the same text units.
    Image units are skipped: they travel in the separate image list.
    """
    blocks = []
    for unit in units:
        if unit.is_heading:
            blocks.append(f"{'#' * unit.level} {unit.text}")
        elif unit.is_paragraph:
            blocks.append(unit.text)
    return "".join(f"{block}\n\n" for block in blocks)


def _split_blocks(text: str) -> List[str]:
    """Split text on blank lines, or on single newlines when there are none."""
    text = normalize_newlines(text)
    if BLANK_LINE_PATTERN.search(text):
        return BLANK_LINE_PATTERN.split(text)
    return text.split("\n")


def _classify_block(block: str, max_heading_level: int) -> ContentUnit | None:
    """Turn one trimmed block into a unit, or None if it is empty."""
    block = block.strip()
    if not block:
        return None

    match = HEADING_PREFIX_PATTERN.match(block)
    if match is None:
        return ContentUnit.paragraph(block)

    level = min(len(match.group(1)), max_heading_level)
    heading_text = block[match.end():].strip()
    if not heading_text:
        logger.debug(f"Dropping empty heading block: {block!r}")
        return None
    return ContentUnit.heading(level, heading_text)
