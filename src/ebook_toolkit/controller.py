"""
Module: controller

Purpose:
    Orchestrate the complete book layout pipeline.
    Import → Segment → Paginate → (Cover)

Key Functions:
    - build_from_text(): Lay out text and images already in memory
    - build_from_file(): Import a document, then lay it out

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - importing: Document readers
    - layout: Segmentation and pagination

Used By:
    - ebook_toolkit.cli: Command line
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Sequence

from .importing import DocumentImportError, read_document
from .layout import (
    ElementFactory,
    LayoutConfig,
    LayoutResult,
    Page,
    paginate,
    segment_text,
)
from .layout.paginator import Checkpoint

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        layout: Pagination output (cover page included when requested)
        title: Book title, if known
        unit_count: Number of content units fed to the paginator
        elapsed: Wall time of the build in seconds
        warnings: Any warnings during build

    Example:
        >>> result = build_from_text("# One\\n\\nText.")
        >>> print(f"Generated {result.page_count} pages")
    """

    layout: LayoutResult
    title: Optional[str]
    unit_count: int
    elapsed: float
    warnings: tuple[str, ...]

    @property
    def pages(self) -> tuple[Page, ...]:
        return self.layout.pages

    @property
    def page_count(self) -> int:
        return self.layout.page_count


def build_from_text(
    text: str,
    images: Sequence[str] = (),
    config: Optional[LayoutConfig] = None,
    *,
    title: Optional[str] = None,
    with_cover: bool = False,
    cover_subtitle: Optional[str] = None,
    checkpoint: Optional[Checkpoint] = None,
) -> BuildResult:
    """
    Lay out text and images onto pages.

    Pipeline:
    1. Segment text into headings and paragraphs, images trailing
    2. Paginate
    3. (Optional) Prepend a cover page; content pages then start at page-2

    Args:
        text: Document text with '\\n' line endings
        images: Image references, placed after the text
        config: Layout configuration (defaults to LayoutConfig())
        title: Book title, required for a cover page
        with_cover: Whether to prepend a cover page
        cover_subtitle: Optional line under the cover title
        checkpoint: Cooperative checkpoint passed to the paginator

    Returns:
        BuildResult with pages and diagnostics

    Raises:
        BuildError: If a cover is requested without a title
    """
    config = config or LayoutConfig()
    start_time = time.perf_counter()

    if with_cover and not title:
        raise BuildError("A cover page needs a title")

    units = segment_text(text, images, max_heading_level=config.max_heading_level)
    logger.info(f"Segmented document into {len(units)} content units")

    factory = ElementFactory(config)
    layout = paginate(
        units,
        config,
        factory=factory,
        checkpoint=checkpoint,
        first_page_number=2 if with_cover else 1,
    )

    if with_cover:
        cover = factory.page(0, [factory.cover(title, cover_subtitle)])
        layout = replace(layout, pages=(cover,) + layout.pages)
        logger.info(f"Added cover page for {title!r}")

    elapsed = time.perf_counter() - start_time
    logger.info(f"Laid out {layout.page_count} pages in {elapsed:.2f}s")

    return BuildResult(
        layout=layout,
        title=title,
        unit_count=len(units),
        elapsed=elapsed,
        warnings=tuple(layout.warnings),
    )


def build_from_file(
    path: Path,
    images: Sequence[str] = (),
    config: Optional[LayoutConfig] = None,
    *,
    with_cover: bool = True,
    checkpoint: Optional[Checkpoint] = None,
) -> BuildResult:
    """
    Import a document and lay it out.

    The first line of the document becomes the title when it is short
    enough (see ``importing.split_title``); otherwise the file name is.
    A document holding only a title line builds just the cover page.

    Args:
        path: .txt, .md or .pdf document
        images: Image references, placed after the text
        config: Layout configuration
        with_cover: Whether to prepend a cover page with the title
        checkpoint: Cooperative checkpoint passed to the paginator

    Returns:
        BuildResult with pages and diagnostics

    Raises:
        BuildError: If the document cannot be read, or has no content and
            no title line for a cover
    """
    logger.info(f"Importing {path}")
    try:
        document = read_document(Path(path))
    except DocumentImportError as e:
        raise BuildError(f"Failed to import document: {e}") from e

    # A title line alone still makes a cover page
    cover_only = with_cover and document.title_from_text
    if document.is_empty and not images and not cover_only:
        raise BuildError(f"No text found in {document.source.name}")

    return build_from_text(
        document.text,
        images,
        config,
        title=document.title,
        with_cover=with_cover,
        checkpoint=checkpoint,
    )
