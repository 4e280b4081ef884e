"""
Module: layout.models

Purpose:
    Data models for page layout output.
    Immutable dataclasses representing positioned elements and pages.

Key Classes:
    - ElementKind: Kind of page element
    - Geometry: Element box on the page
    - PageElement: Positioned content block
    - Page: Ordered elements plus master page reference
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)
    - core.models.styles: Style snapshots

Used By:
    - layout.factory: Creates PageElements and Pages
    - layout.paginator: Creates LayoutResult
    - layout.relayout: Reads existing pages
    - core.utils.serialization: Plain-dict export
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ebook_toolkit.core.models.styles import BoxStyle, TypographyStyle


class ElementKind(str, Enum):
    """Kind of page element."""

    TEXT = "text"
    IMAGE = "image"
    SHAPE = "shape"


@dataclass(frozen=True, slots=True)
class Geometry:
    """
    Element box in page coordinates.

    Example:
        >>> Geometry(x=50, y=100, width=495, height=60).bottom
        160
    """

    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0

    @property
    def bottom(self) -> float:
        """Bottom Y coordinate (y + height)."""
        return self.y + self.height

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Geometry":
        return cls(
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            rotation=data.get("rotation", 0.0),
        )


@dataclass(frozen=True)
class PageElement:
    """
    A content block positioned on a page.

    Attributes:
        id: Unique element id
        kind: TEXT, IMAGE or SHAPE
        content: Markup for text elements, raw source for images
        geometry: Box on the page
        typography: Typography snapshot
        box: Box style snapshot
        locked: Whether the element is locked against editing
        text: Plain text of a text element (None for images and shapes)
        unit_index: Index of the source content unit, if generated
        continues: True when the text carries on in the next element
        breaks_word: True when the split that produced this part cut
            through a word, so the next part continues it without a space

    Example:
        >>> element.geometry.bottom
        160
    """

    id: str
    kind: ElementKind
    content: str
    geometry: Geometry
    typography: TypographyStyle = field(default_factory=TypographyStyle)
    box: BoxStyle = field(default_factory=BoxStyle)
    locked: bool = False
    text: Optional[str] = None
    unit_index: Optional[int] = None
    continues: bool = False
    breaks_word: bool = False

    @property
    def is_text(self) -> bool:
        return self.kind is ElementKind.TEXT

    @property
    def is_image(self) -> bool:
        return self.kind is ElementKind.IMAGE

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON."""
        result: dict[str, Any] = {
            "id": self.id,
            "kind": self.kind.value,
            "content": self.content,
            "geometry": self.geometry.to_dict(),
            "typography": self.typography.to_dict(),
            "box": self.box.to_dict(),
            "locked": self.locked,
        }
        if self.text is not None:
            result["text"] = self.text
        if self.unit_index is not None:
            result["unit_index"] = self.unit_index
        if self.continues:
            result["continues"] = True
        if self.breaks_word:
            result["breaks_word"] = True
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageElement":
        """Deserialize from dictionary."""
        return cls(
            id=data["id"],
            kind=ElementKind(data["kind"]),
            content=data.get("content", ""),
            geometry=Geometry.from_dict(data["geometry"]),
            typography=TypographyStyle.from_dict(data.get("typography", {})),
            box=BoxStyle.from_dict(data.get("box", {})),
            locked=data.get("locked", False),
            text=data.get("text"),
            unit_index=data.get("unit_index"),
            continues=data.get("continues", False),
            breaks_word=data.get("breaks_word", False),
        )


@dataclass(frozen=True)
class Page:
    """
    Complete layout for a single page.

    Attributes:
        id: Page id ("page-1", "page-2", ...)
        index: Page number (0-indexed)
        master_page_id: Master page template reference
        elements: Tuple of PageElements in placement order

    Example:
        >>> page = Page(id="page-1", index=0, master_page_id="master-a", elements=(e1, e2))
        >>> page.element_count
        2
    """

    id: str
    index: int
    master_page_id: str
    elements: tuple[PageElement, ...]

    @property
    def element_count(self) -> int:
        """Number of elements on this page."""
        return len(self.elements)

    @property
    def is_empty(self) -> bool:
        """Check if page has no elements."""
        return len(self.elements) == 0

    @property
    def content_bottom(self) -> float:
        """Lowest element bottom on the page (0 for empty pages)."""
        return max((e.geometry.bottom for e in self.elements), default=0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "index": self.index,
            "master_page_id": self.master_page_id,
            "elements": [e.to_dict() for e in self.elements],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Page":
        return cls(
            id=data["id"],
            index=data["index"],
            master_page_id=data["master_page_id"],
            elements=tuple(PageElement.from_dict(e) for e in data.get("elements", [])),
        )


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of Pages in emission order
        warnings: List of warning messages
        unit_page_map: Mapping of content unit index to page indices

    Example:
        >>> result = LayoutResult(pages=(page1, page2), warnings=[])
        >>> result.page_count
        2
    """

    pages: tuple[Page, ...]
    warnings: list[str] = field(default_factory=list)
    unit_page_map: dict[int, list[int]] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def element_count(self) -> int:
        """Total number of elements across all pages."""
        return sum(p.element_count for p in self.pages)

    def elements_for_unit(self, unit_index: int) -> list[PageElement]:
        """All elements generated from one content unit, in emission order."""
        return [
            element
            for page in self.pages
            for element in page.elements
            if element.unit_index == unit_index
        ]
