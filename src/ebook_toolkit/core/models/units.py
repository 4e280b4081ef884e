"""
Module: units

Purpose:
    Provides the ContentUnit dataclass - one classified piece of input
    content (heading, body paragraph or image) before page placement.

Key Classes:
    - UnitKind: Enum of unit kinds
    - ContentUnit: Immutable content unit

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.segmenter: Produces units from raw text
    - layout.estimator: Measures units
    - layout.paginator: Consumes the unit queue
    - layout.relayout: Rebuilds units from existing pages
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class UnitKind(str, Enum):
    """Kind of content unit."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    IMAGE = "image"


@dataclass(frozen=True, slots=True)
class ContentUnit:
    """
    One piece of document content (immutable).

    Use the ``heading``, ``paragraph`` and ``image`` constructors rather
    than building instances directly.

    Attributes:
        kind: What the unit is
        text: Heading or paragraph text (empty for images)
        level: Heading level 1..6 (0 for other kinds)
        reference: Image source string (empty for text kinds)

    Invariants:
        - headings have level >= 1
        - non-headings have level == 0
        - only images carry a reference

    Example:
        >>> unit = ContentUnit.heading(2, "Background")
        >>> unit.is_heading, unit.level
        (True, 2)
    """

    kind: UnitKind
    text: str = ""
    level: int = 0
    reference: str = ""

    def __post_init__(self) -> None:
        """Validate unit on construction."""
        if self.kind is UnitKind.HEADING:
            if self.level < 1:
                raise ValueError(f"heading level must be >= 1: {self.level}")
        elif self.level != 0:
            raise ValueError(f"level is only valid for headings: {self.level}")
        if self.kind is not UnitKind.IMAGE and self.reference:
            raise ValueError("reference is only valid for images")

    # ─────────────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def heading(cls, level: int, text: str) -> "ContentUnit":
        return cls(kind=UnitKind.HEADING, text=text, level=level)

    @classmethod
    def paragraph(cls, text: str) -> "ContentUnit":
        return cls(kind=UnitKind.PARAGRAPH, text=text)

    @classmethod
    def image(cls, reference: str) -> "ContentUnit":
        return cls(kind=UnitKind.IMAGE, reference=reference)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def is_heading(self) -> bool:
        return self.kind is UnitKind.HEADING

    @property
    def is_paragraph(self) -> bool:
        return self.kind is UnitKind.PARAGRAPH

    @property
    def is_image(self) -> bool:
        return self.kind is UnitKind.IMAGE

    def with_text(self, text: str) -> "ContentUnit":
        """Return a copy of this unit carrying different text (split remainders)."""
        return replace(self, text=text)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON."""
        result: dict[str, Any] = {"kind": self.kind.value}
        if self.kind is UnitKind.IMAGE:
            result["reference"] = self.reference
        else:
            result["text"] = self.text
        if self.kind is UnitKind.HEADING:
            result["level"] = self.level
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContentUnit":
        """Deserialize from dictionary."""
        return cls(
            kind=UnitKind(data["kind"]),
            text=data.get("text", ""),
            level=data.get("level", 0),
            reference=data.get("reference", ""),
        )
