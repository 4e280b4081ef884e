"""
Module: importing.reader

Purpose:
    Read source documents into plain text ready for segmentation.
    Plain text and markdown are read directly; PDFs go through PyMuPDF
    text extraction.

Key Functions:
    - read_document(): Path -> ImportedDocument
    - split_title(): Take the title off the first line of a document

Key Classes:
    - ImportedDocument: Title, body text and source path
    - DocumentImportError: Raised for unreadable or unsupported files

Dependencies:
    - fitz (PyMuPDF): PDF text extraction
    - core.utils.text: Newline normalisation

Used By:
    - controller: build_from_file()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import fitz

from ebook_toolkit.core.utils.text import normalize_newlines

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = frozenset({".txt", ".md", ".markdown"})
PDF_SUFFIXES = frozenset({".pdf"})
SUPPORTED_SUFFIXES = TEXT_SUFFIXES | PDF_SUFFIXES

# First lines at least this long are body text, not a title
MAX_TITLE_LENGTH = 100


class DocumentImportError(Exception):
    """Raised when a document cannot be read."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


@dataclass(frozen=True)
class ImportedDocument:
    """
    A document read from disk.

    Attributes:
        title: Title from the first line, or the file stem
        text: Body text with '\\n' line endings (title line removed)
        source: Path the document was read from
        title_from_text: True when the title was taken from the first line
    """

    title: str
    text: str
    source: Path
    title_from_text: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


def read_document(path: Path) -> ImportedDocument:
    """
    Read a .txt, .md or .pdf document.

    Args:
        path: File to read

    Returns:
        ImportedDocument with title split off the body

    Raises:
        DocumentImportError: If the file is missing, unsupported or unreadable

    Example:
        >>> doc = read_document(Path("novel.md"))
        >>> doc.title
        'The Long Night'
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in SUPPORTED_SUFFIXES:
        raise DocumentImportError(
            f"Unsupported file format {suffix or '(none)'}: use .txt, .md or .pdf",
            path=str(path),
        )
    if not path.exists():
        raise DocumentImportError(f"Document not found: {path}", path=str(path))

    if suffix in PDF_SUFFIXES:
        raw = _read_pdf_text(path)
    else:
        raw = _read_plain_text(path)

    title, body = _title_line(normalize_newlines(raw))
    document = ImportedDocument(
        title=title or path.stem,
        text=body,
        source=path,
        title_from_text=title is not None,
    )
    logger.info(f"Imported {path.name}: {len(body)} chars, title {document.title!r}")
    return document


def split_title(text: str, fallback: str) -> Tuple[str, str]:
    """
    Take the document title from its first line.

    A first line shorter than MAX_TITLE_LENGTH characters is the title
    (leading '#' markers stripped) and is removed from the body.
    Otherwise the fallback is the title and the body is left whole.

    Args:
        text: Normalised document text
        fallback: Title to use when the first line is not one

    Returns:
        (title, body)
    """
    title, body = _title_line(text)
    return title or fallback, body


def _title_line(text: str) -> Tuple[Optional[str], str]:
    """(title, body) with title None when the first line is not a title."""
    text = text.lstrip("\n")
    first_line, _, rest = text.partition("\n")
    candidate = first_line.strip().lstrip("#").strip()

    if first_line and len(first_line) < MAX_TITLE_LENGTH and candidate:
        return candidate, rest
    return None, text


def _read_plain_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentImportError(f"Could not read {path.name}: {e}", path=str(path)) from e


def _read_pdf_text(path: Path) -> str:
    """
    Extract the text blocks of every page as blank-line separated paragraphs.

    Line breaks inside a block are PDF wrapping, not paragraph breaks,
    so they are collapsed to spaces.
    """
    try:
        doc = fitz.open(path)
    except (RuntimeError, ValueError) as e:
        raise DocumentImportError(f"Could not open PDF {path.name}: {e}", path=str(path)) from e

    paragraphs = []
    try:
        for page_number, page in enumerate(doc, 1):
            blocks = page.get_text("blocks", sort=True)
            # (x0, y0, x1, y1, text, block_no, block_type); type 1 is an image
            texts = [" ".join(block[4].split()) for block in blocks if block[6] == 0]
            texts = [text for text in texts if text]
            if not texts:
                logger.debug(f"No text layer on page {page_number} of {path.name}")
            paragraphs.extend(texts)
    finally:
        doc.close()

    if not paragraphs:
        logger.warning(f"No extractable text in {path.name}")
    return "\n\n".join(paragraphs)
