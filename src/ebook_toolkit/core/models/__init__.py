"""
Core data models.

Content units fed to the layout engine and the style snapshots carried
by the elements it produces.
"""

from .units import ContentUnit, UnitKind
from .styles import TypographyStyle, BoxStyle

__all__ = [
    "ContentUnit",
    "UnitKind",
    "TypographyStyle",
    "BoxStyle",
]
