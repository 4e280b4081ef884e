"""
Serialization Utilities

Plain-dict and JSON export of layout output for a renderer or an
exporter to walk. This is a handoff format, not a project file format:
only the generated pages and diagnostics are written.

All models provide ``to_dict()`` / ``from_dict()``; these helpers wrap
them for whole layouts.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ebook_toolkit.layout.models import LayoutResult, Page


LAYOUT_FORMAT_VERSION = 1


# ─────────────────────────────────────────────────────────────────────────────
# Layout Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_layout(result: LayoutResult) -> dict[str, Any]:
    """
    Serialize a LayoutResult to a dictionary.

    Args:
        result: Layout to serialize

    Returns:
        Dictionary suitable for JSON serialization

    Note:
        unit_page_map keys become strings, as JSON object keys must be.
    """
    return {
        "format_version": LAYOUT_FORMAT_VERSION,
        "page_count": result.page_count,
        "pages": [page.to_dict() for page in result.pages],
        "warnings": list(result.warnings),
        "unit_page_map": {str(k): list(v) for k, v in result.unit_page_map.items()},
    }


def deserialize_layout(data: dict[str, Any]) -> LayoutResult:
    """
    Deserialize a LayoutResult from a dictionary.

    Raises:
        ValueError: If the format version is not supported
        KeyError: If a required field is missing
    """
    version = data.get("format_version", LAYOUT_FORMAT_VERSION)
    if version != LAYOUT_FORMAT_VERSION:
        raise ValueError(f"Unsupported layout format version: {version}")

    return LayoutResult(
        pages=deserialize_pages(data["pages"]),
        warnings=list(data.get("warnings", [])),
        unit_page_map={int(k): list(v) for k, v in data.get("unit_page_map", {}).items()},
    )


def deserialize_pages(data: list[dict[str, Any]]) -> tuple[Page, ...]:
    """Deserialize a list of page dictionaries."""
    return tuple(Page.from_dict(page) for page in data)


# ─────────────────────────────────────────────────────────────────────────────
# JSON Utilities
# ─────────────────────────────────────────────────────────────────────────────

def write_layout_json(result: LayoutResult, path: Path) -> None:
    """
    Save a layout to a JSON file.

    Args:
        result: Layout to save
        path: Output path (parent directories are created)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_layout(result), f, indent=2, ensure_ascii=False)


def load_layout_json(path: Path) -> LayoutResult:
    """
    Load a layout from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Layout file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return deserialize_layout(data)
