"""
Importing Package

Readers that turn source documents into text for the layout engine.
"""

from .reader import (
    DocumentImportError,
    ImportedDocument,
    read_document,
    split_title,
)

__all__ = [
    "DocumentImportError",
    "ImportedDocument",
    "read_document",
    "split_title",
]
