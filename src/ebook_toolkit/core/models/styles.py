"""
Module: styles

Purpose:
    Typography and box style snapshots attached to every page element.
    The defaults mirror the editor's body text settings; the element
    factory derives per-kind variants with ``dataclasses.replace``.

Key Classes:
    - TypographyStyle: Font and paragraph settings
    - BoxStyle: Margins, padding, border and fill

Dependencies:
    - dataclasses (std)

Used By:
    - layout.config: Default style snapshot
    - layout.factory: Per-kind overrides
    - layout.models: PageElement fields
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional


@dataclass(frozen=True)
class TypographyStyle:
    """
    Font and paragraph settings (immutable).

    Sizes are in ``font_size_unit``; ``line_height`` is a unitless
    multiplier of the font size.

    Example:
        >>> TypographyStyle().font_family
        'Merriweather'
    """

    font_family: str = "Merriweather"
    font_size: float = 12.0
    font_size_unit: str = "pt"
    font_weight: int = 400
    font_style: str = "normal"
    line_height: float = 1.5
    letter_spacing: float = 0.0
    word_spacing: float = 0.0
    font_kerning: str = "normal"
    text_align: str = "left"
    hyphens: str = "auto"
    color: str = "#1e293b"
    text_transform: str = "none"
    text_decoration: str = "none"
    widows: Optional[int] = 2
    orphans: Optional[int] = 2

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive: {self.font_size}")
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypographyStyle":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class BoxStyle:
    """Box model settings (immutable)."""

    margin_top: float = 0.0
    margin_right: float = 0.0
    margin_bottom: float = 0.0
    margin_left: float = 0.0
    padding_top: float = 0.0
    padding_right: float = 0.0
    padding_bottom: float = 0.0
    padding_left: float = 0.0
    border_width: float = 0.0
    border_color: str = "#000000"
    background_color: str = "transparent"
    opacity: float = 1.0
    filter: str = "none"
    object_fit: Optional[str] = "cover"

    def __post_init__(self) -> None:
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be within [0, 1]: {self.opacity}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BoxStyle":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
