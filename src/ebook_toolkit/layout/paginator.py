"""
Module: layout.paginator

Purpose:
    Flow content units onto fixed-size pages.
    Greedy placement with paragraph splitting and heading page breaks.

Key Functions:
    - paginate(): Main pagination function
    - split_text(): Split a paragraph at a safe boundary
    - split_position() / breaks_word(): Where split_text() cuts, and whether
      that cut falls inside a word

Algorithm:
    Walk a queue of units, one at a time:
    1. Heading: level 1 always opens a page; level 2 opens a page when
       less than heading_break_threshold remains; any heading that would
       overflow opens a page.
    2. Paragraph: place whole when it fits. Otherwise split it at the
       last word boundary of the lines that still fit, flush, and push
       the remainder back to the FRONT of the queue. With too little
       room left the whole paragraph goes back to the front instead.
    3. Image: open a page when it would overflow, then place.
    4. Flush whatever is left when the queue runs dry.

Dependencies:
    - layout.config: LayoutConfig
    - layout.estimator: Height estimates
    - layout.factory: ElementFactory
    - layout.models: Page, PageElement, LayoutResult

Used By:
    - controller: build_from_text()
    - layout.relayout: relayout()
"""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Iterable, List, Optional, Tuple

from ebook_toolkit.core.models.units import ContentUnit

from .config import LayoutConfig
from .estimator import estimate_height, estimate_lines, text_block_height
from .factory import ElementFactory
from .models import LayoutResult, Page, PageElement

logger = logging.getLogger(__name__)

DEFAULT_CHECKPOINT_EVERY = 50


@dataclass(frozen=True)
class PaginationProgress:
    """
    Snapshot handed to a checkpoint callback.

    Attributes:
        units_processed: Units taken off the queue so far (retries count again)
        pages_emitted: Pages flushed so far
        units_pending: Units still waiting in the queue
    """

    units_processed: int
    pages_emitted: int
    units_pending: int


Checkpoint = Callable[[PaginationProgress], None]


def paginate(
    units: Iterable[ContentUnit],
    config: LayoutConfig,
    *,
    factory: Optional[ElementFactory] = None,
    checkpoint: Optional[Checkpoint] = None,
    checkpoint_every: int = DEFAULT_CHECKPOINT_EVERY,
    first_page_number: int = 1,
) -> LayoutResult:
    """
    Arrange content units onto pages.

    Args:
        units: Content units in document order
        config: Layout configuration
        factory: Element factory (one bound to ``config`` by default)
        checkpoint: Optional callable invoked every ``checkpoint_every``
            processed units so a host can yield to its event loop. It
            does not affect the output; an exception it raises aborts
            the run.
        checkpoint_every: Units between checkpoint calls
        first_page_number: Number of the first emitted page ("page-N")

    Returns:
        LayoutResult with pages in emission order

    Raises:
        ValueError: If checkpoint_every or first_page_number is not positive

    Example:
        >>> units = segment_text("# Title\\n\\nShort paragraph.")
        >>> result = paginate(units, LayoutConfig())
        >>> result.page_count
        1
    """
    if checkpoint_every <= 0:
        raise ValueError(f"checkpoint_every must be positive: {checkpoint_every}")
    if first_page_number < 1:
        raise ValueError(f"first_page_number must be >= 1: {first_page_number}")

    flow = _PageFlow(config, factory or ElementFactory(config), first_page_number - 1)
    queue: Deque[Tuple[int, ContentUnit]] = deque(enumerate(units))
    unit_count = len(queue)
    processed = 0

    while queue:
        index, unit = queue.popleft()

        if unit.is_heading:
            flow.place_heading(index, unit)
        elif unit.is_paragraph:
            remainder = flow.place_paragraph(index, unit)
            if remainder is not None:
                # Retry goes ahead of everything else still queued
                queue.appendleft((index, remainder))
        else:
            flow.place_image(index, unit)

        processed += 1
        if checkpoint is not None and processed % checkpoint_every == 0:
            checkpoint(PaginationProgress(
                units_processed=processed,
                pages_emitted=len(flow.pages),
                units_pending=len(queue),
            ))

    flow.flush("end of content")

    logger.info(f"Paginated {unit_count} units onto {len(flow.pages)} pages")

    return LayoutResult(
        pages=tuple(flow.pages),
        warnings=flow.warnings,
        unit_page_map=flow.unit_page_map,
    )


def split_text(text: str, index: int, boundary_ratio: float = 0.5) -> Tuple[str, str]:
    """
    Split text near ``index`` without breaking a word where possible.

    Looks for the last whitespace at or before ``index``. If there is
    none, or it sits before ``boundary_ratio * index`` (which would leave
    a nearly empty first part), the text is cut at ``index`` itself.

    Args:
        text: Trimmed text to split
        index: Target split position
        boundary_ratio: Fraction of ``index`` below which a word
            boundary is rejected

    Returns:
        (head, tail) with the whitespace at the cut removed

    Example:
        >>> split_text("alpha beta gamma", 12)
        ('alpha beta', 'gamma')
    """
    cut = split_position(text, index, boundary_ratio)
    return text[:cut].rstrip(), text[cut:].strip()


def split_position(text: str, index: int, boundary_ratio: float = 0.5) -> int:
    """Cut position chosen by split_text()."""
    if index >= len(text):
        return len(text)

    boundary = _last_whitespace(text, index)
    if boundary is None or boundary < index * boundary_ratio:
        return index
    return boundary


def breaks_word(text: str, cut: int) -> bool:
    """True when cutting ``text`` at ``cut`` separates two non-space characters."""
    if cut <= 0 or cut >= len(text):
        return False
    return not text[cut - 1].isspace() and not text[cut].isspace()


def _last_whitespace(text: str, index: int) -> Optional[int]:
    """Position of the last whitespace character at or before index."""
    for position in range(min(index, len(text) - 1), -1, -1):
        if text[position].isspace():
            return position
    return None


@dataclass
class _Cursor:
    """Working state of one pagination run."""

    current_y: float
    page_index: int
    elements: List[PageElement] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.elements


class _PageFlow:
    """Page accumulator and placement rules for one pagination run."""

    def __init__(self, config: LayoutConfig, factory: ElementFactory, first_index: int):
        self.config = config
        self.factory = factory
        self.cursor = _Cursor(current_y=config.margin_top, page_index=first_index)
        self.pages: List[Page] = []
        self.warnings: List[str] = []
        self.unit_page_map: dict[int, list[int]] = {}

    @property
    def remaining(self) -> float:
        return self.config.page_bottom - self.cursor.current_y

    # ─────────────────────────────────────────────────────────────────────────
    # Placement rules
    # ─────────────────────────────────────────────────────────────────────────

    def place_heading(self, index: int, unit: ContentUnit) -> None:
        if not unit.text.strip():
            logger.debug(f"Dropping empty heading unit {index}")
            return

        height = estimate_height(unit, self.config)
        reason = self._heading_break_reason(unit.level, height)
        if reason is not None:
            self.flush(reason)

        self._warn_if_oversized(index, "heading", height)
        element = self.factory.heading(unit, self.cursor.current_y, unit_index=index)
        self._append(index, element, height + self.config.heading_gap)

    def place_paragraph(self, index: int, unit: ContentUnit) -> Optional[ContentUnit]:
        """
        Place a paragraph, or the part of it that fits.

        Returns:
            The unit to retry at the front of the queue (the whole
            paragraph or its remainder), or None when fully placed.
        """
        config = self.config
        text = unit.text.strip()
        if not text:
            logger.debug(f"Dropping empty paragraph unit {index}")
            return None

        height = text_block_height(estimate_lines(text, config), config)
        if self.cursor.current_y + height <= config.page_bottom:
            element = self.factory.paragraph(text, self.cursor.current_y, height, unit_index=index)
            self._append(index, element, height + config.paragraph_gap)
            return None

        remaining = self.remaining
        lines_fit = 0
        if remaining >= config.min_split_height:
            lines_fit = math.floor((remaining - config.paragraph_padding) / config.line_height_px)
        if self.cursor.is_empty:
            lines_fit = max(lines_fit, 1)

        if lines_fit <= 0:
            self.flush("no room left for paragraph")
            return unit.with_text(text)

        cut = split_position(text, lines_fit * config.chars_per_line, config.split_boundary_ratio)
        head, tail = text[:cut].rstrip(), text[cut:].strip()
        part_height = text_block_height(lines_fit, config)
        logger.debug(
            f"Splitting unit {index} after {len(head)} of {len(text)} chars "
            f"({lines_fit} lines on page {self.cursor.page_index})"
        )
        element = self.factory.paragraph(
            head,
            self.cursor.current_y,
            part_height,
            unit_index=index,
            continues=True,
            breaks_word=breaks_word(text, cut),
        )
        self._append(index, element, part_height + config.paragraph_gap)
        self.flush("paragraph split")
        return unit.with_text(tail)

    def place_image(self, index: int, unit: ContentUnit) -> None:
        height = estimate_height(unit, self.config)
        if not self.cursor.is_empty and self.cursor.current_y + height > self.config.page_bottom:
            self.flush("image overflow")

        self._warn_if_oversized(index, "image", height)
        element = self.factory.image(unit.reference, self.cursor.current_y, unit_index=index)
        self._append(index, element, height + self.config.image_gap)

    # ─────────────────────────────────────────────────────────────────────────
    # Page bookkeeping
    # ─────────────────────────────────────────────────────────────────────────

    def flush(self, reason: str) -> None:
        """Emit the current page (if it holds anything) and reset the cursor."""
        if self.cursor.is_empty:
            return

        page = self.factory.page(self.cursor.page_index, self.cursor.elements)
        self.pages.append(page)
        logger.debug(f"Flushed {page.id} with {page.element_count} elements ({reason})")

        self.cursor = _Cursor(
            current_y=self.config.margin_top,
            page_index=self.cursor.page_index + 1,
        )

    def _heading_break_reason(self, level: int, height: float) -> Optional[str]:
        if self.cursor.is_empty:
            return None
        if level == 1:
            return "level-1 heading"
        if level == 2 and self.remaining < self.config.heading_break_threshold:
            return "level-2 heading near page bottom"
        if self.cursor.current_y + height > self.config.page_bottom:
            return "heading overflow"
        return None

    def _warn_if_oversized(self, index: int, kind: str, height: float) -> None:
        if self.cursor.current_y + height <= self.config.page_bottom:
            return
        message = (
            f"{kind.capitalize()} (unit {index}) overflows page {self.cursor.page_index}: "
            f"{height}px needed, {self.remaining}px available"
        )
        logger.warning(message)
        self.warnings.append(message)

    def _append(self, index: int, element: PageElement, advance: float) -> None:
        self.cursor.elements.append(element)
        self.cursor.current_y += advance
        _track_unit(self.unit_page_map, index, self.cursor.page_index)


def _track_unit(
    unit_page_map: dict[int, list[int]],
    unit_index: int,
    page_index: int,
) -> None:
    """Track which pages a unit appears on."""
    if unit_index not in unit_page_map:
        unit_page_map[unit_index] = []
    if page_index not in unit_page_map[unit_index]:
        unit_page_map[unit_index].append(page_index)
