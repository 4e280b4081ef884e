"""
Module: layout.relayout

Purpose:
    Re-paginate an existing set of pages.
    Flattens the pages back into content units (reading order: page by
    page, elements top-to-bottom then left-to-right) and feeds them to
    the paginator again.

Key Functions:
    - linearize_pages(): Pages -> ContentUnits
    - relayout(): Pages -> LayoutResult

Notes:
    Unlike text segmentation, images stay where they were in reading
    order instead of trailing the text.

Dependencies:
    - html (std): Entity unescaping
    - re (std): Block tag matching
    - layout.paginator: paginate()

Used By:
    - cli / host applications re-flowing an edited project
"""

from __future__ import annotations

import html
import logging
import re
from typing import Any, Iterable, List

from ebook_toolkit.core.models.units import ContentUnit

from .config import LayoutConfig
from .models import ElementKind, LayoutResult, Page, PageElement
from .paginator import paginate

logger = logging.getLogger(__name__)

BLOCK_PATTERN = re.compile(r"<(h[1-6]|p)\b[^>]*>(.*?)</\1\s*>", re.IGNORECASE | re.DOTALL)
TAG_PATTERN = re.compile(r"<[^>]*>")
WHITESPACE_PATTERN = re.compile(r"\s+")


def linearize_pages(pages: Iterable[Page]) -> List[ContentUnit]:
    """
    Flatten pages into content units in reading order.

    Text elements are split into their <h1>..<h6> and <p> blocks; text
    without block tags becomes a single paragraph. Image elements keep
    their position in the flow. Shapes (master-page decoration) are
    skipped. Paragraph parts created by an earlier split
    (``continues=True``) are joined back into one paragraph, with a space
    unless the split cut through a word (``breaks_word=True``).

    Args:
        pages: Pages in document order

    Returns:
        Ordered list of ContentUnits
    """
    units: List[ContentUnit] = []
    pending_continuation = False
    joiner = " "

    for page in pages:
        for element in sorted(page.elements, key=_reading_order):
            if element.kind is ElementKind.SHAPE:
                continue

            if element.kind is ElementKind.IMAGE:
                if element.content:
                    units.append(ContentUnit.image(element.content))
                else:
                    logger.warning(f"Skipping image element {element.id} without a source")
                pending_continuation = False
                continue

            for unit in _text_units(element):
                if pending_continuation and unit.is_paragraph and units and units[-1].is_paragraph:
                    units[-1] = units[-1].with_text(f"{units[-1].text}{joiner}{unit.text}")
                else:
                    units.append(unit)
            pending_continuation = element.continues
            # A cut inside a word is rejoined without a space
            joiner = "" if element.breaks_word else " "

    logger.debug(f"Linearized pages into {len(units)} units")
    return units


def relayout(pages: Iterable[Page], config: LayoutConfig, **kwargs: Any) -> LayoutResult:
    """
    Re-paginate existing pages with a (possibly different) configuration.

    Extra keyword arguments are passed through to ``paginate()``.
    """
    return paginate(linearize_pages(pages), config, **kwargs)


def _reading_order(element: PageElement) -> tuple[float, float]:
    return (element.geometry.y, element.geometry.x)


def _text_units(element: PageElement) -> List[ContentUnit]:
    """Heading and paragraph units held by one text element."""
    units: List[ContentUnit] = []
    blocks = BLOCK_PATTERN.findall(element.content)

    if not blocks:
        text = _plain_text(element.content)
        if text:
            units.append(ContentUnit.paragraph(text))
        return units

    for tag, inner in blocks:
        text = _plain_text(inner)
        if not text:
            continue
        if tag.lower() == "p":
            units.append(ContentUnit.paragraph(text))
        else:
            units.append(ContentUnit.heading(int(tag[1]), text))
    return units


def _plain_text(markup: str) -> str:
    """Strip tags, unescape entities and collapse whitespace."""
    text = html.unescape(TAG_PATTERN.sub(" ", markup))
    return WHITESPACE_PATTERN.sub(" ", text).strip()
