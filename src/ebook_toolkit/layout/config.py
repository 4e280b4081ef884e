"""
Module: layout.config

Purpose:
    Configuration for the page flow engine.
    Defines page dimensions, margins, font metrics and the constants
    behind the page-break heuristics.

Key Classes:
    - LayoutConfig: Immutable layout configuration
    - LayoutConfigError: Raised for degenerate configurations

Dependencies:
    - dataclasses (std)
    - core.models.styles: Default style snapshot

Used By:
    - layout.estimator: Height estimation
    - layout.paginator: Page arrangement
    - layout.factory: Element geometry and styles
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ebook_toolkit.core.models.styles import BoxStyle, TypographyStyle


# A4 in points, as used by the editor canvas
DEFAULT_PAGE_WIDTH = 595
DEFAULT_PAGE_HEIGHT = 842
DEFAULT_MASTER_PAGE_ID = "master-a"
MAX_HEADING_LEVEL = 6


class LayoutConfigError(ValueError):
    """Raised when a LayoutConfig cannot drive the page flow."""
    pass


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    All lengths are in canvas units (points on the default A4 page).

    Attributes:
        page_width: Page width
        page_height: Page height
        margin_top: Top margin; also the cursor position on a fresh page
        margin_bottom: Bottom margin; page_bottom = page_height - margin_bottom
        margin_left: Left margin; x of every generated element
        margin_right: Right margin
        chars_per_line: Characters assumed to fit on one body line
        body_font_size: Body text font size
        body_line_height: Body line height multiplier
        heading_heights: Fixed box height for heading levels 1..n
            (levels past the end reuse the last value)
        heading_font_sizes: Font size for heading levels 1..n
        heading_font_weight: Font weight applied to headings
        paragraph_padding: Constant added to every paragraph box
        heading_gap: Vertical gap after a heading
        paragraph_gap: Vertical gap after a paragraph
        image_height: Fixed image box height
        image_gap: Vertical gap after an image
        heading_break_threshold: Level-2 headings start a new page when
            less than this much height remains
        min_split_height: Below this remaining height a paragraph is moved
            whole to the next page instead of being split
        split_boundary_ratio: A word-boundary split point earlier than
            this fraction of the target index is replaced by a hard split
        max_heading_level: Cap for the ``#`` run length
        master_page_id: Master page assigned to generated pages
        typography: Default typography snapshot
        box: Default box snapshot

    Example:
        >>> config = LayoutConfig()
        >>> config.page_bottom
        750
        >>> config.content_width
        495
    """

    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH
    page_height: float = DEFAULT_PAGE_HEIGHT

    # Margins
    margin_top: float = 50
    margin_bottom: float = 92
    margin_left: float = 50
    margin_right: float = 50

    # Font metrics
    chars_per_line: int = 80
    body_font_size: float = 12.0
    body_line_height: float = 1.6
    heading_heights: tuple[float, ...] = (60, 40, 32, 28, 24, 20)
    heading_font_sizes: tuple[float, ...] = (32, 24, 20, 18, 16, 14)
    heading_font_weight: int = 700

    # Spacing
    paragraph_padding: float = 10
    heading_gap: float = 10
    paragraph_gap: float = 10
    image_height: float = 280
    image_gap: float = 20

    # Page-break heuristics
    heading_break_threshold: float = 200
    min_split_height: float = 40
    split_boundary_ratio: float = 0.5

    # Output
    max_heading_level: int = MAX_HEADING_LEVEL
    master_page_id: str = DEFAULT_MASTER_PAGE_ID
    typography: TypographyStyle = field(default_factory=TypographyStyle)
    box: BoxStyle = field(default_factory=BoxStyle)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise LayoutConfigError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise LayoutConfigError(f"page_height must be positive: {self.page_height}")
        if min(self.margin_top, self.margin_bottom, self.margin_left, self.margin_right) < 0:
            raise LayoutConfigError("Margins must be non-negative")
        if self.content_width <= 0:
            raise LayoutConfigError("Margins exceed page width")
        if self.usable_height <= 0:
            raise LayoutConfigError("Margins exceed page height")
        if self.chars_per_line <= 0:
            raise LayoutConfigError(f"chars_per_line must be positive: {self.chars_per_line}")
        if self.body_font_size <= 0 or self.body_line_height <= 0:
            raise LayoutConfigError(f"line height must be positive: {self.line_height_px}")
        if not self.heading_heights or min(self.heading_heights) <= 0:
            raise LayoutConfigError("heading_heights must be non-empty and positive")
        if not self.heading_font_sizes or min(self.heading_font_sizes) <= 0:
            raise LayoutConfigError("heading_font_sizes must be non-empty and positive")
        if self.image_height <= 0:
            raise LayoutConfigError(f"image_height must be positive: {self.image_height}")
        for name in (
            "paragraph_padding",
            "heading_gap",
            "paragraph_gap",
            "image_gap",
            "heading_break_threshold",
            "min_split_height",
        ):
            if getattr(self, name) < 0:
                raise LayoutConfigError(f"{name} must be non-negative: {getattr(self, name)}")
        if not 0.0 <= self.split_boundary_ratio <= 1.0:
            raise LayoutConfigError(
                f"split_boundary_ratio must be within [0, 1]: {self.split_boundary_ratio}"
            )
        if not 1 <= self.max_heading_level <= MAX_HEADING_LEVEL:
            raise LayoutConfigError(
                f"max_heading_level must be within 1..{MAX_HEADING_LEVEL}: {self.max_heading_level}"
            )
        # A fresh page must accept at least one body line, otherwise a
        # paragraph would bounce between pages forever.
        if self.usable_height < self.min_split_height:
            raise LayoutConfigError(
                f"Usable height {self.usable_height} is below min_split_height {self.min_split_height}"
            )
        if self.usable_height < self.paragraph_padding + self.line_height_px:
            raise LayoutConfigError(
                f"Usable height {self.usable_height} cannot hold a single line of body text"
            )

    @property
    def content_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def usable_height(self) -> float:
        """Height available for content (excluding margins)."""
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def page_bottom(self) -> float:
        """Lowest y coordinate an element may reach."""
        return self.page_height - self.margin_bottom

    @property
    def line_height_px(self) -> float:
        """Height of one body line."""
        return self.body_font_size * self.body_line_height

    def heading_height(self, level: int) -> float:
        """Fixed box height for a heading level."""
        return self.heading_heights[min(level, len(self.heading_heights)) - 1]

    def heading_font_size(self, level: int) -> float:
        """Font size for a heading level."""
        return self.heading_font_sizes[min(level, len(self.heading_font_sizes)) - 1]
