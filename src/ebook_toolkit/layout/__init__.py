"""
Module: layout

Purpose:
    Automatic text-and-image pagination.
    Converts a flat stream of headings, paragraphs and images into
    fixed-size pages of positioned elements.

Key Functions:
    - segment_text(): Raw text -> content units
    - estimate_height(): Vertical space of a unit
    - paginate(): Arrange units onto pages
    - relayout(): Re-paginate existing pages

Key Classes:
    - LayoutConfig: Configuration for page layout
    - ElementFactory: Builds elements and pages
    - PageElement / Page: Layout output
    - LayoutResult: Pages plus diagnostics

Dependencies:
    - ebook_toolkit.core.models: ContentUnit, style snapshots

Used By:
    - ebook_toolkit.controller: Build orchestration
    - ebook_toolkit.cli: Command line
"""

from .config import LayoutConfig, LayoutConfigError
from .models import ElementKind, Geometry, PageElement, Page, LayoutResult
from .segmenter import segment_text, units_to_text
from .estimator import estimate_height, estimate_lines, text_block_height
from .factory import ElementFactory, ElementIdGenerator
from .paginator import paginate, split_text, PaginationProgress
from .relayout import linearize_pages, relayout

__all__ = [
    # Config
    "LayoutConfig",
    "LayoutConfigError",
    # Models
    "ElementKind",
    "Geometry",
    "PageElement",
    "Page",
    "LayoutResult",
    # Segmenter
    "segment_text",
    "units_to_text",
    # Estimator
    "estimate_height",
    "estimate_lines",
    "text_block_height",
    # Factory
    "ElementFactory",
    "ElementIdGenerator",
    # Paginator
    "paginate",
    "split_text",
    "PaginationProgress",
    # Re-layout
    "linearize_pages",
    "relayout",
]
