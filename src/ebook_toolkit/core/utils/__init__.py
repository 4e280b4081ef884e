"""
Utils Package

Serialization helpers for layout output and shared text helpers.
"""

from .serialization import (
    serialize_layout,
    deserialize_layout,
    deserialize_pages,
    write_layout_json,
    load_layout_json,
)
from .text import normalize_newlines

__all__ = [
    "serialize_layout",
    "deserialize_layout",
    "deserialize_pages",
    "write_layout_json",
    "load_layout_json",
    "normalize_newlines",
]
