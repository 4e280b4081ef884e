"""
Module: layout.factory

Purpose:
    Build output page and element records for the page flow engine.
    Owns element id generation, default geometry and the per-kind style
    overrides applied on top of the configured defaults.

Key Classes:
    - ElementIdGenerator: Collision-free counter-based element ids
    - ElementFactory: Creates PageElements and Pages

Dependencies:
    - html (std): Escaping text into markup
    - uuid (std): Per-generator id token
    - layout.config: LayoutConfig
    - layout.models: PageElement, Page

Used By:
    - layout.paginator: Element emission
    - controller: Cover page
"""

from __future__ import annotations

import html
import itertools
import uuid
from dataclasses import replace
from typing import Iterable, Optional

from ebook_toolkit.core.models.units import ContentUnit

from .config import LayoutConfig
from .models import ElementKind, Geometry, Page, PageElement


class ElementIdGenerator:
    """
    Generate unique element ids.

    Ids combine a monotonic counter with a token drawn once per
    generator, so ids from one run never collide and ids from separate
    runs only collide if their tokens do.

    Example:
        >>> ids = ElementIdGenerator(token="abc")
        >>> ids.next(), ids.next()
        ('el-1-abc', 'el-2-abc')
    """

    def __init__(self, prefix: str = "el", token: Optional[str] = None):
        self.prefix = prefix
        self.token = token if token is not None else uuid.uuid4().hex[:8]
        self._counter = itertools.count(1)

    def next(self) -> str:
        return f"{self.prefix}-{next(self._counter)}-{self.token}"


class ElementFactory:
    """
    Create positioned elements and pages from content units.

    Every generated element spans the content box horizontally
    (``x = margin_left``, ``width = content_width``), is unrotated and
    unlocked. Styles start from ``config.typography`` / ``config.box``.

    Args:
        config: Layout configuration
        ids: Element id generator (a fresh one by default)
    """

    def __init__(self, config: LayoutConfig, ids: Optional[ElementIdGenerator] = None):
        self.config = config
        self.ids = ids or ElementIdGenerator()

    # ─────────────────────────────────────────────────────────────────────────
    # Elements
    # ─────────────────────────────────────────────────────────────────────────

    def heading(self, unit: ContentUnit, y: float, unit_index: Optional[int] = None) -> PageElement:
        """Heading element with the fixed per-level height."""
        level = unit.level
        typography = replace(
            self.config.typography,
            font_size=self.config.heading_font_size(level),
            font_weight=self.config.heading_font_weight,
        )
        return PageElement(
            id=self.ids.next(),
            kind=ElementKind.TEXT,
            content=f"<h{level}>{html.escape(unit.text, quote=False)}</h{level}>",
            geometry=self._geometry(y, self.config.heading_height(level)),
            typography=typography,
            box=self.config.box,
            text=unit.text,
            unit_index=unit_index,
        )

    def paragraph(
        self,
        text: str,
        y: float,
        height: float,
        unit_index: Optional[int] = None,
        continues: bool = False,
        breaks_word: bool = False,
    ) -> PageElement:
        """
        Body text element.

        Args:
            text: Text placed in this element (a whole paragraph or one part of it)
            y: Top of the box
            height: Box height decided by the allocator
            unit_index: Index of the source unit
            continues: Whether the paragraph carries on in a later element
            breaks_word: Whether the split after this part cut through a word
        """
        typography = replace(
            self.config.typography,
            font_size=self.config.body_font_size,
            line_height=self.config.body_line_height,
            text_align="justify",
        )
        return PageElement(
            id=self.ids.next(),
            kind=ElementKind.TEXT,
            content=f"<p>{html.escape(text, quote=False)}</p>",
            geometry=self._geometry(y, height),
            typography=typography,
            box=self.config.box,
            text=text,
            unit_index=unit_index,
            continues=continues,
            breaks_word=breaks_word,
        )

    def image(self, reference: str, y: float, unit_index: Optional[int] = None) -> PageElement:
        """Image element with the fixed image height; the reference is kept verbatim."""
        return PageElement(
            id=self.ids.next(),
            kind=ElementKind.IMAGE,
            content=reference,
            geometry=self._geometry(y, self.config.image_height),
            typography=self.config.typography,
            box=self.config.box,
            unit_index=unit_index,
        )

    def cover(self, title: str, subtitle: Optional[str] = None) -> PageElement:
        """Locked full-page title element for a cover page."""
        content = f"<h1>{html.escape(title, quote=False)}</h1>"
        if subtitle:
            content += f"<p>{html.escape(subtitle, quote=False)}</p>"
        typography = replace(
            self.config.typography,
            font_size=self.config.heading_font_size(1),
            font_weight=self.config.heading_font_weight,
            text_align="center",
        )
        return PageElement(
            id=self.ids.next(),
            kind=ElementKind.TEXT,
            content=content,
            geometry=Geometry(
                x=self.config.margin_left,
                y=0,
                width=self.config.content_width,
                height=self.config.page_height,
            ),
            typography=typography,
            box=self.config.box,
            locked=True,
            text=title,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────────

    def page(self, index: int, elements: Iterable[PageElement]) -> Page:
        """Page record for the 0-based ``index``; ids count from page-1."""
        return Page(
            id=f"page-{index + 1}",
            index=index,
            master_page_id=self.config.master_page_id,
            elements=tuple(elements),
        )

    def _geometry(self, y: float, height: float) -> Geometry:
        return Geometry(
            x=self.config.margin_left,
            y=y,
            width=self.config.content_width,
            height=height,
        )
