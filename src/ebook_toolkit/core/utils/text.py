"""
Text Utilities

Helpers shared by the document readers and the segmenter.
"""


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to '\\n'."""
    return text.replace("\r\n", "\n").replace("\r", "\n")
